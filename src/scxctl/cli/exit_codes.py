"""Process exit statuses returned by ``scxctl``.

argparse exits with 2 on its own for malformed command lines; every
other path returns one of the values below.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The loader accepted the request, or the query was answered."""

GENERAL_ERROR: int = 1
"""An ScxctlError was reported: bad state, unknown scheduler, loader down."""

UNEXPECTED_ERROR: int = 2
"""A bug: some exception other than ScxctlError reached ``cli()``."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
