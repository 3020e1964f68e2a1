"""Handles converting aligned lyric words into subtitle text (SRT and LRC)."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Type

from .models import AlignedWord
from .exceptions import FormattingError
from .utils import format_time_lrc, format_time_srt

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "lrc"


def to_srt(words: Iterable[AlignedWord]) -> str:
    """
    Converts aligned words to SRT, one numbered block per word.

    Args:
        words: Aligned words in playback order.

    Returns:
        The SRT document. Empty input yields an empty string.
    """
    blocks = []
    for index, w in enumerate(words, start=1):
        blocks.append(f"{index}\n{format_time_srt(w.start_s)} --> {format_time_srt(w.end_s)}\n{w.word}\n\n")
    return "".join(blocks)


def to_lrc(words: Iterable[AlignedWord]) -> str:
    """Converts aligned words to LRC, one ``[MM:SS.hh]word`` line per word. End times are dropped."""
    return "".join(f"{format_time_lrc(w.start_s)}{w.word}\n" for w in words)


class SubtitleFormatter(ABC):
    """Abstract base class for subtitle formatters."""

    extension: str = ""

    @abstractmethod
    def format_words(self, words: Iterable[AlignedWord]) -> str:
        """
        Formats aligned words into subtitle text.

        Args:
            words: Aligned words in playback order.

        Returns:
            The subtitle document as a string.
        """
        pass


class SRTFormatter(SubtitleFormatter):
    """Formats subtitles into the SRT (SubRip Text) format."""

    extension = "srt"

    def format_words(self, words: Iterable[AlignedWord]) -> str:
        return to_srt(words)


class LRCFormatter(SubtitleFormatter):
    """Formats subtitles into the LRC lyric format."""

    extension = "lrc"

    def format_words(self, words: Iterable[AlignedWord]) -> str:
        return to_lrc(words)


_FORMATTERS: Dict[str, Type[SubtitleFormatter]] = {
    SRTFormatter.extension: SRTFormatter,
    LRCFormatter.extension: LRCFormatter,
}


def normalize_format(answer: str) -> str:
    """Maps a user answer to a format name: 'srt' on an exact case-insensitive match, 'lrc' otherwise."""
    if answer.lower() == "srt":
        return "srt"
    return DEFAULT_FORMAT


def get_formatter(name: str) -> SubtitleFormatter:
    """
    Returns a formatter instance for the given format name.

    Raises:
        FormattingError: If the format is not supported.
    """
    formatter_cls = _FORMATTERS.get(name.lower())
    if formatter_cls is None:
        raise FormattingError(f"Unsupported output format '{name}'. Choose one of: {', '.join(sorted(_FORMATTERS))}.")
    logger.debug(f"Using {formatter_cls.__name__} for format '{name}'")
    return formatter_cls()
