"""Writes subtitle documents to timestamped files in the output directory."""

import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .exceptions import FileSystemError
from .utils import ensure_dir_exists, format_file_timestamp

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "aligned_words"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubtitleWriter:
    """Saves subtitle text as ``aligned_words_<songId>_<timestamp>.<ext>``."""

    def __init__(self, output_dir: str = "output", clock: Callable[[], datetime] = _utc_now):
        """
        Args:
            output_dir: Directory receiving the files; created on first save.
            clock: Returns the current UTC time.
        """
        self.output_dir = output_dir
        self.clock = clock
        self._last_moment: Optional[datetime] = None

    def _next_moment(self) -> datetime:
        # Millisecond resolution; never reuse a timestamp within this writer
        now = self.clock()
        now = now.replace(microsecond=(now.microsecond // 1000) * 1000)
        if self._last_moment is not None and now <= self._last_moment:
            now = self._last_moment + timedelta(milliseconds=1)
        self._last_moment = now
        return now

    def build_path(self, extension: str, song_id: str) -> str:
        safe_id = song_id.replace("/", "_").replace("\\", "_")
        timestamp = format_file_timestamp(self._next_moment())
        return os.path.join(self.output_dir, f"{FILENAME_PREFIX}_{safe_id}_{timestamp}.{extension}")

    def save(self, content: str, extension: str, song_id: str) -> str:
        """
        Writes the content to a new file.

        Args:
            content: The subtitle document.
            extension: File extension without the dot ('srt' or 'lrc').
            song_id: Song identifier embedded in the filename.

        Returns:
            The path of the written file.

        Raises:
            FileSystemError: If the directory or file cannot be written.
        """
        ensure_dir_exists(self.output_dir)
        file_path = self.build_path(extension, song_id)
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write {file_path}: {e}", exc_info=True)
            raise FileSystemError(f"Could not write subtitle file {file_path}: {e}") from e
        logger.info(f"Wrote {len(content)} characters to {os.path.abspath(file_path)}")
        return file_path
