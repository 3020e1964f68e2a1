"""Logging configuration for LyricSub."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

from .utils import ensure_dir_exists

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s'
CONSOLE_LOG_FORMAT = '%(levelname)s: %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
NOISY_LOGGERS = ("httpx", "httpcore") # httpx logs every request at INFO

def setup_logging(
    log_level: int = logging.INFO,
    log_dir: Optional[str] = "logs",
    log_file: str = "lyricsub.log",
    console_format: str = CONSOLE_LOG_FORMAT,
    file_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    max_bytes: int = 10 * 1024 * 1024, # 10 MB
    backup_count: int = 5,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configures logging for the application.

    The console (stdout) shares the terminal with the interactive prompts, so
    it gets a short format; the rotating log file keeps the detailed one.
    Calling this again replaces the previously installed handlers.

    Args:
        log_level: The minimum logging level (e.g., logging.INFO, logging.DEBUG).
        log_dir: The directory to store log files. None disables file logging.
        log_file: The name of the log file.
        console_format: Format string for console messages.
        file_format: Format string for log file messages.
        date_format: The format string for timestamps in logs.
        max_bytes: Maximum size of a log file before rotation.
        backup_count: Number of backup log files to keep.
        quiet_loggers: Third-party loggers capped at WARNING.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(log_level)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(console_format))
    stream_handler.setLevel(log_level)
    root.addHandler(stream_handler)

    if log_dir:
        try:
            ensure_dir_exists(log_dir)
            log_path = os.path.join(log_dir, log_file)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
            root.addHandler(file_handler)
            root.debug(f"Logging initialized. Log file: {log_path}")
        except Exception as e:
            # Keep running with console logging only
            root.error(f"Failed to set up file logging handler at {log_dir}/{log_file}: {e}")

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
