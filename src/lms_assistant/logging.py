"""Logging configuration using loguru.

Library modules log through ``get_logger`` but stay silent until an entry
point calls ``configure_logging``; importing or calling the analyzer never
touches stderr or the filesystem on its own.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from loguru._logger import Logger as LoguruLogger

from lms_assistant.config import settings

PACKAGE = "lms_assistant"

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

logger.disable(PACKAGE)


def configure_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> Path:
    """
    Install the stderr and file sinks and enable package logging.

    Args:
        log_dir: Directory for ``assistant.log`` and ``errors.log``
            (defaults to ``settings.log_dir``)
        level: Console level (defaults to ``settings.log_level``)

    Returns:
        The resolved log directory
    """
    logger.remove()

    target = Path(log_dir or settings.log_dir).resolve()
    target.mkdir(parents=True, exist_ok=True)

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>",
        level=level or settings.log_level,
        colorize=True,
    )

    # Classification traces stay at DEBUG and never reach disk
    logger.add(
        target / "assistant.log",
        format=_FILE_FORMAT,
        level="INFO",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )
    logger.add(
        target / "errors.log",
        format=_FILE_FORMAT,
        level="ERROR",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )

    logger.enable(PACKAGE)
    return target


def get_logger(name: str) -> LoguruLogger:
    """Logger bound to ``name`` (typically the calling module's ``__name__``)."""
    return logger.bind(name=name)  # type: ignore[return-value]
