# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ganttgrid"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_handler: RichHandler | None = None


def configure_logging(level: str = "WARNING") -> None:
    """Send ganttgrid diagnostics to stderr through rich, at ``level``."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(_handler)

    logger.setLevel(level.upper())
