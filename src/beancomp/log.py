# beancomp.log - Logging setup
"""Logging configuration for beancomp using loguru."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    console_output: bool = True,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru sinks.

    Library modules only emit records; the CLI decides where they go.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating log file
        console_output: Whether to log to stderr
        rotation: Log rotation size
        retention: How long to keep old logs
    """
    logger.remove()

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )
