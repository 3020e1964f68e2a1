"""Utility functions for LyricSub."""

import os
import logging
from datetime import datetime
from .exceptions import FileSystemError

logger = logging.getLogger(__name__)

MS_PER_HOUR = 3600000
MS_PER_DAY = 24 * MS_PER_HOUR

def ensure_dir_exists(dir_path: str) -> None:
    """
    Ensures that a directory exists. Creates it if it doesn't.

    Args:
        dir_path: The path to the directory.

    Raises:
        FileSystemError: If the directory cannot be created due to permissions
                         or if the path exists but is not a directory.
    """
    if not dir_path:
        raise ValueError("Directory path cannot be empty.")
    try:
        if not os.path.exists(dir_path):
            os.makedirs(dir_path)
            logger.info(f"Created directory: {dir_path}")
        elif not os.path.isdir(dir_path):
            raise FileSystemError(f"Path exists but is not a directory: {dir_path}")
    except OSError as e:
        logger.error(f"Error creating or accessing directory {dir_path}: {e}", exc_info=True)
        raise FileSystemError(f"Could not create or access directory {dir_path}: {e}") from e

def _to_milliseconds(seconds: float) -> int:
    """Converts seconds to whole milliseconds, truncating toward zero. Negative values clamp to 0."""
    if seconds < 0:
        seconds = 0.0
    return int(seconds * 1000)

def format_time_srt(seconds: float) -> str:
    """
    Formats seconds into SRT time format HH:MM:SS,mmm.

    The value is read back as a UTC time of day, so the hour field wraps
    after 24 hours (e.g. 25h formats as 01:00:00,000).

    Args:
        seconds: Time in seconds.

    Returns:
        Formatted time string.
    """
    milliseconds = _to_milliseconds(seconds) % MS_PER_DAY
    hrs = milliseconds // MS_PER_HOUR
    milliseconds %= MS_PER_HOUR
    mins = milliseconds // 60000
    milliseconds %= 60000
    secs = milliseconds // 1000
    milliseconds %= 1000
    return f"{hrs:02d}:{mins:02d}:{secs:02d},{milliseconds:03d}"

def format_time_lrc(seconds: float) -> str:
    """
    Formats seconds into an LRC tag [MM:SS.hh] (hundredths truncated).

    Like the SRT hour field, minutes are read back as a UTC time of day and
    wrap every hour (3725.5s formats as [02:05.50]).
    """
    ms = _to_milliseconds(seconds)
    mins = (ms // 60000) % 60
    secs = (ms % 60000) // 1000
    hundredths = (ms % 1000) // 10
    return f"[{mins:02d}:{secs:02d}.{hundredths:02d}]"

def format_file_timestamp(moment: datetime) -> str:
    """
    Formats a UTC datetime as a filesystem-safe ISO-8601 timestamp.

    ``2024-05-01T12:30:45.123Z`` becomes ``2024-05-01T12-30-45-123Z``.
    """
    iso = moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")
