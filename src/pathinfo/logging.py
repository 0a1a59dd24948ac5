"""Logging utilities for pathinfo.

Stdlib logging, rendered through rich when a front-end configures it. The
library modules only create loggers; handlers are installed by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "pathinfo"

__all__ = [
    "get_logger",
    "configure_console",
    "configure_logging",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_console(color_flag: Optional[bool]) -> Console:
    if color_flag is True:
        return Console()
    if color_flag is False:
        return Console(no_color=True)
    return Console(no_color=not sys.stdout.isatty())


def configure_logging(console: Console, debug: bool = False) -> logging.Logger:
    logger = get_logger()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
