"""Logging configuration for AdminView"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = CONSOLE_FORMAT + ' - [%(filename)s:%(lineno)d]'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(log_level: str) -> int:
    return getattr(logging, log_level.upper(), logging.INFO)


def setup_logging(log_dir: Optional[Union[str, Path]] = None, log_level: str = "INFO",
                  console: bool = True) -> Path:
    """
    Set up logging for the dashboard

    The console shows records at ``log_level`` and above; the rotating
    file always keeps DEBUG, where row clicks and grid binding are traced.

    Args:
        log_dir: Directory for log files. If None, uses ~/.adminview/logs
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Whether to echo records to stdout

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir) if log_dir is not None else Path.home() / '.adminview' / 'logs'
    log_dir.mkdir(parents=True, exist_ok=True)
    level = _resolve_level(log_level)

    root = logging.getLogger()
    root.setLevel(min(level, logging.DEBUG))
    root.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(console_handler)

    log_file = log_dir / 'adminview.log'
    file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=30)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(file_handler)

    logging.getLogger(__name__).info(f"Logging initialized at {logging.getLevelName(level)}; "
                                     f"log file: {log_file}")
    return log_file
