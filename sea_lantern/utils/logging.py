"""Logging configuration for Sea Lantern.

Provides centralized logging that keeps the user's home directory, and with
it the OS account name, out of log files.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def _home_prefix() -> Optional[str]:
    """Return the home directory as a string, or None if unknown."""
    try:
        home = str(Path.home())
    except (RuntimeError, KeyError):
        return None
    if home in ("", ".", "~", "/"):
        return None
    return home


class HomeRedactingFormatter(logging.Formatter):
    """Custom formatter that replaces the home directory with '~'."""

    def __init__(self, *args, home: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._home = home if home is not None else _home_prefix()

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record, redacting the home directory."""
        message = super().format(record)
        if self._home:
            message = message.replace(self._home, "~")
        return message


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure application logging with home directory redaction.

    Args:
        level: Logging level (default INFO)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("sea_lantern")
    logger.setLevel(level)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = HomeRedactingFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler; an unwritable log file must not stop the application
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            logger.warning(f"Cannot open log file {log_file}: {e}")
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "sea_lantern") -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default is app logger)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
