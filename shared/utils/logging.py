"""
Logging configuration module.
Provides standardized logging setup using loguru.
"""

import sys
from typing import Optional

from loguru import logger

from shared.utils.env import get_env

DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)


def setup_logging(
    level: Optional[str] = None,
    format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure loguru logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Falls back to
            ADS_LIB_LOG_LEVEL, then INFO.
        format: Log message format
        log_file: Optional file path to write logs
    """
    level = (level or get_env("ADS_LIB_LOG_LEVEL", "INFO")).upper()

    logger.remove()

    logger.add(
        sys.stderr,
        format=format,
        level=level,
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            format=format,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )
