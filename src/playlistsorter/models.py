"""Data types passed between pipeline stages."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

# Publish time of a video the API could not resolve; sorts as the oldest
ZERO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class VideoEntry:
    """A single video of the source playlist."""

    video_id: str
    title: str
    added_at: datetime
    published_at: datetime = ZERO_TIMESTAMP

    @property
    def is_resolved(self) -> bool:
        """Whether an upload timestamp was found for this video."""
        return self.published_at != ZERO_TIMESTAMP


@dataclass
class SkippedEntry:
    """A video that could not be added to the destination playlist."""

    entry: VideoEntry
    reason: str


@dataclass
class BuildResult:
    """Outcome of rebuilding a playlist."""

    playlist_id: str
    title: str
    total: int
    added: int = 0
    skipped: List[SkippedEntry] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def complete(self) -> bool:
        """True when every entry made it into the new playlist."""
        return not self.skipped and self.added == self.total


@dataclass
class SortResult:
    """Outcome of a full sort run."""

    source_id: str
    source_title: str
    entries: List[VideoEntry]
    unresolved: int = 0
    build: Optional[BuildResult] = None
