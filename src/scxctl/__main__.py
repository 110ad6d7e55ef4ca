"""``python -m scxctl``: same as the ``scxctl`` console script."""

from __future__ import annotations

from scxctl.cli.app import cli

if __name__ == "__main__":
    cli()
