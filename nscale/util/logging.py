"""Logging configuration for nscale.

The frequency table is the program's product and goes to stdout; everything
else (warnings about the output file, negative MIDI notes, diagnostics) goes
through the ``nscale`` logger to stderr.

Usage:
    from nscale.util.logging import get_logger, configure_logging

    configure_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.warning("unable to create file %s", path)
"""

from __future__ import annotations

import logging
import sys
import traceback
from typing import Any, Optional


# Module-level state
_configured = False
_root_logger_name = "nscale"
_default_level = "WARNING"


class ConsoleFormatter(logging.Formatter):
    """Human-readable console format with optional color."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        if self.use_color:
            color = self.LEVEL_COLORS.get(level, "")
            level_str = f"{color}{level}{self.RESET}"
        else:
            level_str = level
        msg = record.getMessage()
        base = f"{level_str}: {msg}"
        if record.exc_info:
            base += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return base


def configure_logging(
    *,
    level: Optional[str] = None,
    use_color: bool = True,
) -> None:
    """Configure the nscale logging subsystem.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to WARNING.
        use_color: Whether to colorize console output (auto-disabled if not a TTY).

    This function is idempotent; calling it multiple times reconfigures handlers
    and rebinds the console handler to the current ``sys.stderr``.
    """
    global _configured

    if level is None:
        level = _default_level
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(_root_logger_name)
    logger.setLevel(numeric_level)

    # Remove existing handlers to allow reconfiguration
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(ConsoleFormatter(use_color=use_color))
    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the nscale namespace.

    If configure_logging() has not been called, a default configuration
    is applied automatically.
    """
    global _configured
    if not _configured:
        configure_logging()

    if not name.startswith(_root_logger_name):
        if name == "__main__":
            name = f"{_root_logger_name}.main"
        else:
            name = f"{_root_logger_name}.{name}"

    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **extra: Any,
) -> None:
    """Log a caught exception at ERROR level without a traceback.

    The OS reason (``strerror``) is appended when the exception carries one.
    """
    reason = getattr(exc, "strerror", None) or str(exc)
    logger.error("%s: %s", message, reason, extra=dict(extra))
