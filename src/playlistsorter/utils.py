"""Utility functions for YouTube playlist operations."""

import re
from datetime import datetime, timezone

PLAYLIST_URL = "https://www.youtube.com/playlist?list={}"
_FRACTION = re.compile(r"\.(\d+)")


def parse_playlist_url(playlist_str: str) -> str:
    """Extract playlist ID from a YouTube playlist URL or return the raw ID.

    Args:
        playlist_str: A YouTube playlist URL or ID

    Returns:
        The playlist ID

    Raises:
        ValueError if the input is not a valid playlist URL or ID
    """
    # Try to extract playlist ID from URL
    url_match = re.search(r"[?&]list=([^&#]+)", playlist_str)
    if url_match:
        return url_match.group(1)

    # If not a URL, validate as a raw playlist ID
    if re.match(r"^[A-Za-z0-9_-]+$", playlist_str):
        return playlist_str

    raise ValueError(
        f"Invalid playlist format: {playlist_str}. " "Must be a YouTube playlist URL or ID"
    )


def playlist_url(playlist_id: str) -> str:
    """Return the watch URL for a playlist ID."""
    return PLAYLIST_URL.format(playlist_id)


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp as returned by the Data API.

    Args:
        value: Timestamp such as "2020-01-03T08:00:00Z"

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If the value is empty or malformed
    """
    if not value:
        raise ValueError("empty timestamp")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp without timezone: {value}")
    return parsed.astimezone(timezone.utc)


def truncate_title(title: str, max_length: int = 50) -> str:
    """Shorten a title for console output, marking the cut with '...'."""
    if len(title) <= max_length:
        return title
    return title[: max_length - 3] + "..."
