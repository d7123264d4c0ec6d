"""YouTube API base class."""

from typing import Any, Dict, List, Optional

import httplib2
from googleapiclient.errors import HttpError

from . import config
from .errors import (
    PlaylistNotFoundError,
    RateLimitError,
    TransientError,
    translate_http_error,
    with_retry,
)
from .logging_config import get_logger
from .ratelimit import RequestPacer

logger = get_logger(__name__)

MAX_RESULTS = 50


class YouTubeBase:
    """Base class for YouTube API operations.

    Every request goes through the shared RequestPacer. HttpErrors and
    network failures are translated into the package error types.
    """

    def __init__(self, youtube, pacer: Optional[RequestPacer] = None):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client from googleapiclient.discovery.build
            pacer: Request pacer, a default one is created if omitted
        """
        self.youtube = youtube
        self.pacer = pacer or RequestPacer()

    def _send(self, request, context: str) -> Dict[str, Any]:
        self.pacer.wait()
        try:
            response = request.execute()
        except HttpError as e:
            error = translate_http_error(e, context)
            if isinstance(error, RateLimitError):
                self.pacer.record_throttle(error.retry_after)
            raise error from e
        except (OSError, httplib2.HttpLib2Error) as e:
            # Timeouts and dropped connections never reach an HTTP status
            raise TransientError(f"{context}: {e}") from e
        self.pacer.record_success()
        return response or {}

    @with_retry(
        max_retries=config.MAX_RETRIES,
        retryable_exceptions=(RateLimitError, TransientError),
    )
    def _execute(self, request, context: str) -> Dict[str, Any]:
        """Execute a read request, retrying throttling, 5xx and network failures."""
        return self._send(request, context)

    @with_retry(max_retries=config.MAX_RETRIES, retryable_exceptions=(RateLimitError,))
    def _execute_write(self, request, context: str) -> Dict[str, Any]:
        """Execute a write request.

        Only throttled writes are retried, a 5xx or a timeout may already
        have been applied.
        """
        return self._send(request, context)

    def get_playlist_info(self, playlist_id: str) -> Dict[str, str]:
        """Get playlist information.

        Args:
            playlist_id: ID of playlist to get info for

        Returns:
            Dictionary with playlist id, title and description

        Raises:
            PlaylistNotFoundError: If playlist is not found
            TransportError: If API request fails
        """
        request = self.youtube.playlists().list(
            part="snippet",
            id=playlist_id,
            maxResults=1,  # We only need one result
        )
        response = self._execute(request, f"Failed to get playlist {playlist_id}")

        if not response.get("items"):
            raise PlaylistNotFoundError(f"Playlist {playlist_id} not found")

        playlist = response["items"][0]
        return {
            "id": playlist_id,
            "title": playlist["snippet"]["title"],
            "description": playlist["snippet"].get("description", ""),
        }

    def list_playlist_items(
        self,
        playlist_id: str,
        page_size: int = MAX_RESULTS,
        page_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get one page of playlist membership.

        Args:
            playlist_id: ID of playlist to list
            page_size: Number of items per page, at most 50
            page_token: Continuation cursor from the previous page

        Returns:
            Raw response with "items" and an optional "nextPageToken"

        Raises:
            PlaylistNotFoundError: If playlist is not found
            TransportError: If API request fails
        """
        request = self.youtube.playlistItems().list(
            part="snippet",
            playlistId=playlist_id,
            maxResults=page_size,
            pageToken=page_token,
        )
        return self._execute(request, f"Failed to list items of playlist {playlist_id}")

    def list_videos(self, video_ids: List[str]) -> List[Dict[str, Any]]:
        """Look up metadata for several videos in one request.

        Videos that are deleted, private or blocked are missing from the
        result rather than reported as errors.

        Args:
            video_ids: Up to 50 video IDs

        Returns:
            List of video resources for the IDs that still resolve

        Raises:
            ValueError: If more than 50 IDs are given
            TransportError: If API request fails
        """
        if not video_ids:
            return []
        if len(video_ids) > MAX_RESULTS:
            raise ValueError(f"At most {MAX_RESULTS} video IDs per lookup, got {len(video_ids)}")

        request = self.youtube.videos().list(
            part="snippet",
            id=",".join(video_ids),
            maxResults=len(video_ids),
        )
        response = self._execute(request, "Failed to fetch video details")
        return response.get("items", [])

    def create_playlist(
        self, title: str, description: str = "", privacy_status: str = "private"
    ) -> str:
        """Create a new playlist owned by the authenticated account.

        Args:
            title: Playlist title
            description: Playlist description
            privacy_status: One of private, unlisted or public

        Returns:
            ID of the new playlist

        Raises:
            TransportError: If API request fails
        """
        request = self.youtube.playlists().insert(
            part="snippet,status",
            body={
                "snippet": {"title": title, "description": description},
                "status": {"privacyStatus": privacy_status},
            },
        )
        response = self._execute_write(request, f'Failed to create playlist "{title}"')
        return response["id"]

    def add_video_to_playlist(self, playlist_id: str, video_id: str) -> Dict[str, Any]:
        """Append a video to the end of a playlist.

        Args:
            playlist_id: ID of playlist to add to
            video_id: ID of video to add

        Returns:
            The created playlist item

        Raises:
            VideoNotFoundError: If the video no longer exists
            YouTubeError: If API request fails
        """
        request = self.youtube.playlistItems().insert(
            part="snippet",
            body={
                "snippet": {
                    "playlistId": playlist_id,
                    "resourceId": {"kind": "youtube#video", "videoId": video_id},
                }
            },
        )
        return self._execute_write(request, f"Failed to add video {video_id}")
