"""Command module initialization."""

from .base import YouTubeCommand
from .setup import SetupCommand  # noqa: F401
from .sort import SortCommand  # noqa: F401

__all__ = ["YouTubeCommand", "SetupCommand", "SortCommand"]
