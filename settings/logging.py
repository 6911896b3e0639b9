"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path | None = None):
    """Console sink plus, optionally, a daily board log and a warnings-only log.

    The warnings log keeps session continuity failures and database errors
    apart from the per-request debug chatter.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    if not to_file:
        return logger

    log_dir = Path(log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_dir / "board_{time:YYYY-MM-DD}.log",
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="00:00",
        retention="14 days",
        compression="gz",
    )
    logger.add(
        log_dir / "board_warnings.log",
        format=FILE_FORMAT,
        level="WARNING",
        rotation="10 MB",
        retention=5,
        backtrace=False,
    )
    logger.info("Logging to {} (console level {})", log_dir, level.upper())
    return logger
