"""Tests for core YouTube API functionality."""

import socket

import httplib2
import pytest
from unittest.mock import MagicMock, patch

from helpers import FakeChannel, make_http_error, timestamp
from src.playlistsorter.core import YouTubeBase
from src.playlistsorter.errors import (
    PlaylistNotFoundError,
    RateLimitError,
    TransientError,
    TransportError,
)


def test_get_playlist_info(api: YouTubeBase, channel: FakeChannel, youtube_client: MagicMock):
    """Test getting playlist information."""
    channel.add_playlist("playlist1", "Playlist 1")

    info = api.get_playlist_info("playlist1")

    assert info == {"id": "playlist1", "title": "Playlist 1", "description": ""}
    youtube_client.playlists.return_value.list.assert_called_once_with(
        part="snippet", id="playlist1", maxResults=1
    )


def test_get_playlist_info_not_found(api: YouTubeBase):
    """Test getting info for non-existent playlist."""
    with pytest.raises(PlaylistNotFoundError):
        api.get_playlist_info("nonexistent")


def test_list_playlist_items_page(api: YouTubeBase, channel: FakeChannel, youtube_client):
    channel.add_playlist("playlist1", "Playlist 1")
    for i in range(3):
        channel.add_video("playlist1", f"vid{i}", timestamp(i + 1))

    response = api.list_playlist_items("playlist1", page_size=2)

    assert [item["snippet"]["resourceId"]["videoId"] for item in response["items"]] == [
        "vid0",
        "vid1",
    ]
    assert response["nextPageToken"] == "2"
    youtube_client.playlistItems.return_value.list.assert_called_once_with(
        part="snippet", playlistId="playlist1", maxResults=2, pageToken=None
    )


def test_list_playlist_items_not_found(api: YouTubeBase):
    with pytest.raises(PlaylistNotFoundError):
        api.list_playlist_items("nonexistent")


def test_list_videos_joins_ids(api: YouTubeBase, channel: FakeChannel, youtube_client):
    channel.add_playlist("p", "P")
    channel.add_video("p", "a", timestamp(1), published=timestamp(5))
    channel.add_video("p", "b", timestamp(2), published=timestamp(6))

    videos = api.list_videos(["a", "b", "gone"])

    assert [video["id"] for video in videos] == ["a", "b"]
    youtube_client.videos.return_value.list.assert_called_once_with(
        part="snippet", id="a,b,gone", maxResults=3
    )


def test_list_videos_empty_makes_no_request(api: YouTubeBase, youtube_client):
    assert api.list_videos([]) == []
    youtube_client.videos.return_value.list.assert_not_called()


def test_list_videos_rejects_oversized_batch(api: YouTubeBase):
    with pytest.raises(ValueError):
        api.list_videos([f"v{i}" for i in range(51)])


def test_create_playlist_is_private(api: YouTubeBase, channel: FakeChannel, youtube_client):
    playlist_id = api.create_playlist("Mix - Sorted", description="desc")

    assert playlist_id == "new-1"
    youtube_client.playlists.return_value.insert.assert_called_once_with(
        part="snippet,status",
        body={
            "snippet": {"title": "Mix - Sorted", "description": "desc"},
            "status": {"privacyStatus": "private"},
        },
    )


def test_add_video_to_playlist(api: YouTubeBase, channel: FakeChannel):
    api.add_video_to_playlist("target", "vid1")

    assert channel.inserted == [("target", "vid1")]


@patch("time.sleep")
def test_read_retries_transient_errors(mock_sleep, pacer):
    client = MagicMock()
    client.videos.return_value.list.return_value.execute.side_effect = [
        make_http_error(503, "backendError"),
        {"items": [{"id": "a"}]},
    ]
    api = YouTubeBase(client, pacer=pacer)

    assert api.list_videos(["a"]) == [{"id": "a"}]
    assert client.videos.return_value.list.return_value.execute.call_count == 2
    mock_sleep.assert_called_once()


@patch("time.sleep")
def test_read_gives_up_after_max_retries(mock_sleep, pacer):
    client = MagicMock()
    client.videos.return_value.list.return_value.execute.side_effect = make_http_error(500)
    api = YouTubeBase(client, pacer=pacer)

    with pytest.raises(TransientError):
        api.list_videos(["a"])
    assert client.videos.return_value.list.return_value.execute.call_count == 4


@patch("time.sleep")
def test_rate_limit_slows_pacer(mock_sleep, pacer):
    client = MagicMock()
    client.playlistItems.return_value.list.return_value.execute.side_effect = [
        make_http_error(429, headers={"Retry-After": "3"}),
        {"items": []},
    ]
    api = YouTubeBase(client, pacer=pacer)

    api.list_playlist_items("playlist1")

    assert pacer.interval >= 1.5  # raised to 3s, then halved by the success
    mock_sleep.assert_called_once_with(3.0)


@patch("time.sleep")
def test_write_does_not_retry_server_errors(mock_sleep, pacer):
    client = MagicMock()
    client.playlistItems.return_value.insert.return_value.execute.side_effect = make_http_error(
        500
    )
    api = YouTubeBase(client, pacer=pacer)

    with pytest.raises(TransientError):
        api.add_video_to_playlist("target", "vid1")
    assert client.playlistItems.return_value.insert.return_value.execute.call_count == 1
    mock_sleep.assert_not_called()


@patch("time.sleep")
def test_write_retries_rate_limit(mock_sleep, pacer):
    client = MagicMock()
    client.playlistItems.return_value.insert.return_value.execute.side_effect = [
        make_http_error(403, "rateLimitExceeded"),
        {"id": "item"},
    ]
    api = YouTubeBase(client, pacer=pacer)

    assert api.add_video_to_playlist("target", "vid1") == {"id": "item"}


def test_client_error_is_not_retried(pacer):
    client = MagicMock()
    client.videos.return_value.list.return_value.execute.side_effect = make_http_error(
        400, "invalidParameter"
    )
    api = YouTubeBase(client, pacer=pacer)

    with pytest.raises(TransportError) as exc_info:
        api.list_videos(["a"])
    assert not isinstance(exc_info.value, RateLimitError)
    assert client.videos.return_value.list.return_value.execute.call_count == 1


def test_every_request_is_paced(api: YouTubeBase, channel: FakeChannel):
    api.pacer = MagicMock()
    channel.add_playlist("p", "P")

    api.get_playlist_info("p")
    api.list_playlist_items("p")

    assert api.pacer.wait.call_count == 2
    assert api.pacer.record_success.call_count == 2


@patch("time.sleep")
def test_network_failure_on_read_is_retried(mock_sleep, pacer):
    client = MagicMock()
    client.videos.return_value.list.return_value.execute.side_effect = [
        socket.timeout("timed out"),
        {"items": [{"id": "a"}]},
    ]
    api = YouTubeBase(client, pacer=pacer)

    assert api.list_videos(["a"]) == [{"id": "a"}]
    mock_sleep.assert_called_once()


@patch("time.sleep")
def test_network_failure_on_write_is_transient_and_not_retried(mock_sleep, pacer):
    client = MagicMock()
    execute = client.playlistItems.return_value.insert.return_value.execute
    execute.side_effect = httplib2.HttpLib2Error("connection dropped")
    api = YouTubeBase(client, pacer=pacer)

    with pytest.raises(TransientError, match="Failed to add video vid1: connection dropped"):
        api.add_video_to_playlist("target", "vid1")
    assert execute.call_count == 1
    mock_sleep.assert_not_called()
