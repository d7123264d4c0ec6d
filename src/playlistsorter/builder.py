"""Create the sorted destination playlist."""

from typing import Callable, List, Optional

from . import config
from .core import YouTubeBase
from .errors import YouTubeError
from .logging_config import get_logger
from .models import BuildResult, SkippedEntry, VideoEntry
from .utils import truncate_title

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int, VideoEntry], None]


class PlaylistBuilder:
    """Creates a private playlist and fills it oldest video first."""

    def __init__(self, youtube: YouTubeBase, progress: Optional[ProgressCallback] = None):
        """Initialize builder.

        Args:
            youtube: API wrapper used for the writes
            progress: Called with (position, total, entry) after each video is added
        """
        self.youtube = youtube
        self.progress = progress

    @staticmethod
    def sorted_title(source_title: str) -> str:
        return f"{source_title}{config.SORTED_SUFFIX}"

    def build(self, entries: List[VideoEntry], source_title: str) -> BuildResult:
        """Create the destination playlist and add every entry to it.

        The playlist API only appends, so the newest-first list is walked
        from the end to leave the playlist in ascending upload order. A video
        that cannot be added is recorded as skipped and the rest still go in.

        Args:
            entries: Entries sorted newest first
            source_title: Title of the source playlist

        Returns:
            BuildResult with the new playlist ID and per-video outcome

        Raises:
            YouTubeError: If the playlist itself cannot be created
        """
        title = self.sorted_title(source_title)
        playlist_id = self.youtube.create_playlist(
            title, description=config.SORTED_DESCRIPTION, privacy_status="private"
        )
        logger.info('Created new playlist: "%s" (%s)', title, playlist_id)

        total = len(entries)
        result = BuildResult(playlist_id=playlist_id, title=title, total=total)
        logger.info("Adding %d videos in chronological order...", total)

        for position, entry in enumerate(reversed(entries), start=1):
            try:
                self.youtube.add_video_to_playlist(playlist_id, entry.video_id)
            except YouTubeError as e:
                logger.warning('Skipped "%s": %s', truncate_title(entry.title), e)
                result.skipped.append(SkippedEntry(entry=entry, reason=str(e)))
                continue

            result.added += 1
            logger.debug(
                "Added %d/%d: %s (uploaded %s)",
                position,
                total,
                truncate_title(entry.title, 40),
                entry.published_at.date().isoformat() if entry.is_resolved else "unknown",
            )
            if self.progress:
                self.progress(position, total, entry)

        return result
