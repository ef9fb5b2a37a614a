"""Logging configuration for the CLI and server."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED_ATTR = "_todobridge_logging_configured"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Install a rich handler on the root logger.

    Calling this again only adjusts the level.

    Args:
        level: Logging level name or number
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    if getattr(root_logger, _CONFIGURED_ATTR, False):
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))

    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    setattr(root_logger, _CONFIGURED_ATTR, True)
