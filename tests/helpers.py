"""Helpers for building fake YouTube API responses."""

import json
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import MagicMock

from googleapiclient.errors import HttpError
from httplib2 import Response

from src.playlistsorter.models import VideoEntry


def make_http_error(status: int, reason: str = "", headers: Optional[Dict] = None) -> HttpError:
    """Build an HttpError the way googleapiclient raises it."""
    info = {"status": str(status)}
    info.update(headers or {})
    body = {"error": {"code": status, "message": reason or "error", "errors": []}}
    if reason:
        body["error"]["errors"].append({"reason": reason, "message": reason})
    return HttpError(Response(info), json.dumps(body).encode("utf-8"))


def timestamp(day: int, month: int = 1, year: int = 2020) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}T00:00:00Z"


def make_entry(
    video_id: str, published: Optional[datetime] = None, title: Optional[str] = None
) -> VideoEntry:
    entry = VideoEntry(
        video_id=video_id,
        title=title or f"Title {video_id}",
        added_at=datetime(2021, 1, 1, tzinfo=timezone.utc),
    )
    if published is not None:
        entry.published_at = published
    return entry


class FakeChannel:
    """In-memory stand-in for the playlist and video endpoints.

    Attributes:
        playlists: Source playlist ID -> title
        items: Source playlist ID -> list of playlistItem resources
        videos: Video ID -> video resource
        inserted: (playlist ID, video ID) pairs in insertion order
        failing_inserts: Video IDs whose insertion raises
    """

    def __init__(self) -> None:
        self.playlists: Dict[str, str] = {}
        self.items: Dict[str, List[dict]] = {}
        self.videos: Dict[str, dict] = {}
        self.created: List[dict] = []
        self.inserted: List[tuple] = []
        self.failing_inserts: Dict[str, Exception] = {}

    def add_playlist(self, playlist_id: str, title: str) -> None:
        self.playlists[playlist_id] = title
        self.items.setdefault(playlist_id, [])

    def add_video(
        self,
        playlist_id: str,
        video_id: str,
        added: str,
        published: Optional[str] = None,
        title: Optional[str] = None,
    ) -> None:
        title = title or f"Video {video_id}"
        self.items[playlist_id].append(
            {
                "id": f"item-{video_id}",
                "snippet": {
                    "title": title,
                    "publishedAt": added,
                    "resourceId": {"kind": "youtube#video", "videoId": video_id},
                },
            }
        )
        if published is not None:
            self.videos[video_id] = {
                "id": video_id,
                "snippet": {"title": title, "publishedAt": published},
            }

    def inserted_ids(self, playlist_id: str) -> List[str]:
        return [video_id for target, video_id in self.inserted if target == playlist_id]

    @staticmethod
    def _request(result=None, error=None) -> MagicMock:
        request = MagicMock()
        if error is not None:
            request.execute.side_effect = error
        else:
            request.execute.return_value = result
        return request

    def playlists_list(self, part, id, maxResults=None):
        items = []
        if id in self.playlists:
            items.append({"id": id, "snippet": {"title": self.playlists[id], "description": ""}})
        return self._request({"items": items})

    def playlists_insert(self, part, body):
        playlist_id = f"new-{len(self.created) + 1}"
        self.created.append({"id": playlist_id, **body})
        return self._request({"id": playlist_id, **body})

    def playlist_items_list(self, part, playlistId, maxResults, pageToken=None):
        if playlistId not in self.items:
            return self._request(error=make_http_error(404, "playlistNotFound"))
        start = int(pageToken) if pageToken else 0
        end = start + maxResults
        response = {"items": self.items[playlistId][start:end]}
        if end < len(self.items[playlistId]):
            response["nextPageToken"] = str(end)
        return self._request(response)

    def playlist_items_insert(self, part, body):
        snippet = body["snippet"]
        video_id = snippet["resourceId"]["videoId"]
        if video_id in self.failing_inserts:
            return self._request(error=self.failing_inserts[video_id])

        def execute():
            self.inserted.append((snippet["playlistId"], video_id))
            return {"id": f"inserted-{video_id}", "snippet": snippet}

        request = MagicMock()
        request.execute.side_effect = execute
        return request

    def videos_list(self, part, id, maxResults=None):
        ids = id.split(",")
        return self._request({"items": [self.videos[v] for v in ids if v in self.videos]})

    def client(self) -> MagicMock:
        """Return a MagicMock client whose endpoints read and write this channel."""
        mock = MagicMock()
        mock.playlists.return_value.list.side_effect = self.playlists_list
        mock.playlists.return_value.insert.side_effect = self.playlists_insert
        mock.playlistItems.return_value.list.side_effect = self.playlist_items_list
        mock.playlistItems.return_value.insert.side_effect = self.playlist_items_insert
        mock.videos.return_value.list.side_effect = self.videos_list
        return mock
