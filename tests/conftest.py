"""Common test fixtures and utilities."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from helpers import FakeChannel
from src.playlistsorter.core import YouTubeBase
from src.playlistsorter.ratelimit import RequestPacer


@pytest.fixture
def pacer() -> RequestPacer:
    """Pacer that never really sleeps."""
    return RequestPacer(interval=0, sleep=MagicMock())


@pytest.fixture
def channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def youtube_client(channel: FakeChannel) -> MagicMock:
    """Create a mock YouTube API client backed by the fake channel.

    Returns:
        MagicMock: Mock YouTube API client
    """
    return channel.client()


@pytest.fixture
def api(youtube_client: MagicMock, pacer: RequestPacer) -> YouTubeBase:
    """Create YouTubeBase instance with mock client."""
    return YouTubeBase(youtube_client, pacer=pacer)


@pytest.fixture
def base_time() -> datetime:
    return datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def days(base_time: datetime):
    """Return a function turning a day offset into a UTC datetime."""

    def _days(offset: int) -> datetime:
        return base_time + timedelta(days=offset)

    return _days
