"""Data models for LyricSub."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

@dataclass
class AlignedWord:
    """A single lyric token with its time span in seconds."""
    word: str
    start_s: float
    end_s: float

class FetchStatus(Enum):
    OK = "ok"
    AUTH_FAILED = "auth_failed"
    SOFT_FAILED = "soft_failed"

@dataclass
class FetchResult:
    """Outcome of one aligned-lyrics request, tagged by status."""
    status: FetchStatus
    words: List[AlignedWord] = field(default_factory=list)
    reason: Optional[str] = None # Set for failures

    @classmethod
    def ok(cls, words: List[AlignedWord]) -> "FetchResult":
        return cls(status=FetchStatus.OK, words=list(words))

    @classmethod
    def auth_failed(cls, reason: Optional[str] = None) -> "FetchResult":
        return cls(status=FetchStatus.AUTH_FAILED, reason=reason)

    @classmethod
    def soft_failed(cls, reason: str) -> "FetchResult":
        return cls(status=FetchStatus.SOFT_FAILED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def is_auth_failure(self) -> bool:
        return self.status is FetchStatus.AUTH_FAILED

@dataclass
class ExportSummary:
    """Holds the per-run outcome of the interactive export."""
    saved_paths: List[str] = field(default_factory=list)
    skipped_ids: List[str] = field(default_factory=list)
    aborted: bool = False # True when an authentication failure stopped the loop
