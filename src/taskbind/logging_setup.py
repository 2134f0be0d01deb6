"""Console logging for the taskbind CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "taskbind-rich"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Route ``taskbind`` loggers to stderr through rich, replacing earlier setup."""
    logger = logging.getLogger("taskbind")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
