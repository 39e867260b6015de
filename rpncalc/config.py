"""Environment-driven settings and logging setup for the rpncalc CLI.

The library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "rpn> "


def log_level(verbose: bool = False) -> int:
    """Resolve the log level: --verbose wins, then RPNCALC_LOG_LEVEL, then WARNING."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get("RPNCALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def prompt() -> str:
    """REPL prompt, overridable with RPNCALC_PROMPT."""
    return os.environ.get("RPNCALC_PROMPT", DEFAULT_PROMPT)


def configure_logging(console: Console, verbose: bool = False) -> None:
    """Route the rpncalc loggers through a RichHandler on ``console``."""
    logger = logging.getLogger("rpncalc")
    logger.setLevel(log_level(verbose))
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))
