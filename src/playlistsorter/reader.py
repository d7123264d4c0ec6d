"""Read the membership of a playlist."""

from typing import List

from . import config
from .core import MAX_RESULTS, YouTubeBase
from .logging_config import get_logger
from .models import VideoEntry
from .utils import parse_timestamp

logger = get_logger(__name__)


class PlaylistReader:
    """Pages through a playlist and returns its entries in playlist order."""

    def __init__(self, youtube: YouTubeBase, page_size: int = config.PAGE_SIZE):
        """Initialize reader.

        Args:
            youtube: API wrapper used for the requests
            page_size: Items per page, clamped to the API maximum of 50
        """
        self.youtube = youtube
        self.page_size = max(1, min(page_size, MAX_RESULTS))

    def fetch_all(self, playlist_id: str) -> List[VideoEntry]:
        """Get every video in a playlist.

        Items whose added timestamp or video ID cannot be read are skipped
        individually; the rest of the page is kept.

        Args:
            playlist_id: ID of playlist to read

        Returns:
            Entries in source playlist order

        Raises:
            PlaylistNotFoundError: If playlist is not found
            TransportError: If a page request fails
        """
        entries: List[VideoEntry] = []
        page_token = None
        page = 0

        while True:
            response = self.youtube.list_playlist_items(
                playlist_id, page_size=self.page_size, page_token=page_token
            )
            page += 1
            items = response.get("items", [])
            for item in items:
                entry = self._parse_item(item)
                if entry is not None:
                    entries.append(entry)

            logger.info("Fetched page %d of %s: %d items", page, playlist_id, len(items))

            page_token = response.get("nextPageToken")
            if not page_token:
                break

        return entries

    @staticmethod
    def _parse_item(item):
        snippet = item.get("snippet", {})
        title = snippet.get("title", "")
        video_id = snippet.get("resourceId", {}).get("videoId")
        if not video_id:
            logger.warning('Skipping "%s": playlist item has no video ID', title)
            return None

        try:
            added_at = parse_timestamp(snippet.get("publishedAt", ""))
        except ValueError as e:
            logger.warning('Skipping "%s" (%s): bad added timestamp: %s', title, video_id, e)
            return None

        return VideoEntry(video_id=video_id, title=title, added_at=added_at)
