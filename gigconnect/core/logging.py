"""
Logging configuration using Loguru.
"""
import sys
from pathlib import Path
from typing import Optional
from loguru import logger
from gigconnect.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the global loguru logger.

    Three sinks are installed:
    - stdout, colorized
    - a rotating application log
    - a rotating error-only log next to the application log

    Args:
        level: minimum level (defaults to settings.LOG_LEVEL)
        log_file: application log path (defaults to settings.LOG_FILE)
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file_path = Path(log_file or settings.LOG_FILE)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.configure(extra={"name": "gigconnect"})

    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level, colorize=True)

    logger.add(
        str(log_file_path),
        format=FILE_FORMAT,
        level=level,
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
    )

    logger.add(
        str(log_file_path.parent / "error.log"),
        format=FILE_FORMAT,
        level="ERROR",
        rotation="50 MB",
        retention="60 days",
        compression="zip",
        encoding="utf-8",
    )

    logger.debug(f"Logging configured (level={level}, file={log_file_path})")


def get_logger(name: str = None):
    """
    Return the logger, bound to a module name when given.

    Args:
        name: logger name (usually __name__)
    """
    if name:
        return logger.bind(name=name)
    return logger


setup_logging()
