"""Fetch, enrich, sort and rebuild a playlist."""

from typing import Optional

from . import config
from .builder import PlaylistBuilder, ProgressCallback
from .core import YouTubeBase
from .enricher import VideoEnricher
from .logging_config import get_logger
from .models import SortResult
from .reader import PlaylistReader
from .sorter import sort_by_publish_date
from .utils import truncate_title

logger = get_logger(__name__)


class SortPipeline:
    """Runs the reader, enricher, sorter and builder against one playlist.

    Any error from a stage aborts the run. A destination playlist created
    before the error is left as it is.
    """

    def __init__(
        self,
        youtube: YouTubeBase,
        reader: Optional[PlaylistReader] = None,
        enricher: Optional[VideoEnricher] = None,
        builder: Optional[PlaylistBuilder] = None,
        drop_unresolved: bool = config.DROP_UNRESOLVED,
        progress: Optional[ProgressCallback] = None,
    ):
        self.youtube = youtube
        self.reader = reader or PlaylistReader(youtube)
        self.enricher = enricher or VideoEnricher(youtube, drop_unresolved=drop_unresolved)
        self.builder = builder or PlaylistBuilder(youtube, progress=progress)

    def run(self, playlist_id: str, dry_run: bool = False) -> SortResult:
        """Sort a playlist into a new private playlist.

        Args:
            playlist_id: ID of the source playlist
            dry_run: Stop after sorting and only log the planned order

        Returns:
            SortResult, with build set unless dry_run

        Raises:
            PlaylistNotFoundError: If the source playlist does not exist
            YouTubeError: If reading, enriching or creating the playlist fails
        """
        info = self.youtube.get_playlist_info(playlist_id)
        source_title = info["title"]
        logger.info('Processing playlist "%s" (%s)', source_title, playlist_id)

        entries = self.reader.fetch_all(playlist_id)
        logger.info("Found %d videos", len(entries))

        self.enricher.enrich(entries)
        entries = sort_by_publish_date(entries)
        unresolved = sum(1 for entry in entries if not entry.is_resolved)
        logger.info("Videos sorted by upload date")

        result = SortResult(
            source_id=playlist_id,
            source_title=source_title,
            entries=entries,
            unresolved=unresolved,
        )

        if dry_run:
            for position, entry in enumerate(reversed(entries), start=1):
                logger.info(
                    "Would add %d/%d: %s (uploaded %s)",
                    position,
                    len(entries),
                    truncate_title(entry.title),
                    entry.published_at.date().isoformat() if entry.is_resolved else "unknown",
                )
            return result

        result.build = self.builder.build(entries, source_title)
        return result
