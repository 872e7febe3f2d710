"""
Logging setup shared by the pipeline, the HTTP service and the CLI.

Loggers from get_logger write to the console and do not propagate, so uvicorn's
own root handlers never print a line twice.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from settings import settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured: List[logging.Logger] = []
_file_handlers: List[logging.Handler] = []


def _level_from_settings() -> int:
    return getattr(logging, str(settings.LOG_LEVEL or "INFO").upper(), logging.INFO)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return the named logger, configuring it on first use.

    Args:
        name: Logger name (usually __name__)
        level: Logging level; defaults to LOG_LEVEL
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level if level is not None else _level_from_settings()
    logger.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console)
    logger.propagate = False

    # Loggers created after setup_file_logging still get the file
    for handler in _file_handlers:
        logger.addHandler(handler)

    _configured.append(logger)
    return logger


def setup_file_logging(log_dir: str = "logs", log_file: Optional[str] = None) -> Path:
    """
    Mirror every get_logger logger into a DEBUG-level log file.

    Args:
        log_dir: Directory for the log file (created if missing)
        log_file: File name; defaults to a timestamped buildcast_*.log

    Returns:
        Path of the log file
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (log_file or f"buildcast_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    _file_handlers.append(handler)

    for logger in _configured:
        logger.addHandler(handler)
    return path


def close_file_logging() -> None:
    """Detach and close every handler added by setup_file_logging."""
    while _file_handlers:
        handler = _file_handlers.pop()
        for logger in _configured:
            logger.removeHandler(handler)
        handler.close()
