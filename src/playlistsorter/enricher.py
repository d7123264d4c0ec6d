"""Fill in upload timestamps and canonical titles."""

from typing import Dict, List

from . import config
from .core import MAX_RESULTS, YouTubeBase
from .logging_config import get_logger
from .models import VideoEntry
from .utils import parse_timestamp

logger = get_logger(__name__)


class VideoEnricher:
    """Resolves the publish timestamp of every entry with bulk video lookups."""

    def __init__(
        self,
        youtube: YouTubeBase,
        batch_size: int = config.BATCH_SIZE,
        drop_unresolved: bool = config.DROP_UNRESOLVED,
    ):
        """Initialize enricher.

        Args:
            youtube: API wrapper used for the lookups
            batch_size: IDs per lookup, clamped to the API maximum of 50
            drop_unresolved: Remove entries whose video could not be looked
                up instead of keeping them with a zero timestamp
        """
        self.youtube = youtube
        self.batch_size = max(1, min(batch_size, MAX_RESULTS))
        self.drop_unresolved = drop_unresolved

    def enrich(self, entries: List[VideoEntry]) -> List[VideoEntry]:
        """Update entries in place with upload timestamps and titles.

        Entries missing from a lookup response (deleted, private or blocked
        videos) keep their playlist title and a zero timestamp, unless
        drop_unresolved is set, in which case they are removed from the list.

        Args:
            entries: Entries in playlist order

        Returns:
            The same list object

        Raises:
            TransportError: If any lookup fails
        """
        total = len(entries)
        for start in range(0, total, self.batch_size):
            batch = entries[start : start + self.batch_size]
            videos = self.youtube.list_videos([entry.video_id for entry in batch])
            lookup: Dict[str, dict] = {video["id"]: video for video in videos}

            for entry in batch:
                video = lookup.get(entry.video_id)
                if video is None:
                    logger.debug('No details for "%s" (%s)', entry.title, entry.video_id)
                    continue
                snippet = video.get("snippet", {})
                try:
                    entry.published_at = parse_timestamp(snippet.get("publishedAt", ""))
                except ValueError as e:
                    logger.warning(
                        'Bad upload timestamp for "%s" (%s): %s', entry.title, entry.video_id, e
                    )
                    continue
                entry.title = snippet.get("title", entry.title)

            logger.info("Fetched upload dates for %d/%d videos", start + len(batch), total)

        unresolved = [entry for entry in entries if not entry.is_resolved]
        if unresolved:
            logger.warning("%d videos could not be resolved", len(unresolved))
            if self.drop_unresolved:
                for entry in unresolved:
                    logger.info('Dropping "%s" (%s)', entry.title, entry.video_id)
                entries[:] = [entry for entry in entries if entry.is_resolved]

        return entries
