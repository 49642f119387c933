"""Logging utilities for github2gogs."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    '<green>{time:HH:mm:ss}</green> '
    '<level>{level: <7}</level> '
    '<cyan>[{extra[component]}]</cyan> {message}'
)
FILE_FORMAT = '{time:YYYY-MM-DD HH:mm:ss} {level: <7} [{extra[component]}] {message}'


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Route loguru records to stderr and, optionally, a rotating file.

    Args:
        level: Minimum level for every sink
        log_file: Optional log file path
        log_format: Format overriding the stderr default
    """
    logger.remove()
    logger.configure(extra={'component': 'github2gogs'})

    logger.add(sys.stderr, format=log_format or CONSOLE_FORMAT, level=level)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=FILE_FORMAT, level=level, rotation='5 MB')
        logger.debug(f'Writing log to {log_file}')
