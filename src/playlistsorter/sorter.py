"""Chronological ordering of playlist entries."""

from typing import Iterable, List

from .models import VideoEntry


def sort_by_publish_date(entries: Iterable[VideoEntry]) -> List[VideoEntry]:
    """Return entries ordered newest first by upload time.

    The sort is stable, entries with the same timestamp keep their playlist
    order. Unresolved entries end up last.
    """
    return sorted(entries, key=lambda entry: entry.published_at, reverse=True)
