"""Logging setup for scxctl.

Diagnostics go to stderr so that stdout only ever carries the status
line of the command.  Rich is used for the handler when available.
"""

from __future__ import annotations

import logging
import sys

NOISY_LOGGERS: tuple[str, ...] = ("asyncio", "markdown_it")


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger once at CLI startup.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))

    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
