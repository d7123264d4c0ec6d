"""Sort command for YouTube playlists."""

from typing import Optional

from tqdm.contrib.logging import logging_redirect_tqdm

from .. import config
from ..core import YouTubeBase
from ..logging_config import get_logger, logger as package_logger
from ..models import SortResult
from ..pipeline import SortPipeline
from ..progress import ProgressBar
from ..utils import parse_playlist_url, playlist_url
from .base import YouTubeCommand

# Get logger for this module
logger = get_logger(__name__)


class SortCommand(YouTubeCommand):
    """Command for copying a playlist into a new one sorted by upload date."""

    def __init__(
        self,
        youtube,
        playlist: str,
        dry_run: bool = False,
        drop_unresolved: bool = config.DROP_UNRESOLVED,
        verbose: bool = False,
        show_progress: bool = True,
    ) -> None:
        """Initialize command.

        Args:
            youtube: YouTube API client or YouTubeBase wrapper
            playlist: Source playlist URL or ID
            dry_run: Whether to stop before creating the new playlist
            drop_unresolved: Whether to leave out videos without an upload date
            verbose: Whether to list skipped videos at the end
            show_progress: Whether to draw a progress bar while adding videos
        """
        super().__init__(youtube)
        self.playlist = playlist
        self.playlist_id: Optional[str] = None
        self.dry_run = dry_run
        self.drop_unresolved = drop_unresolved
        self.verbose = verbose
        self.show_progress = show_progress
        self.result: Optional[SortResult] = None

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.playlist:
            raise ValueError("Source playlist is required")
        self.playlist_id = parse_playlist_url(self.playlist)

    def _run(self) -> bool:
        """Run the sort command.

        Returns:
            bool: True if the pipeline ran to the end
        """
        api = self.youtube if isinstance(self.youtube, YouTubeBase) else YouTubeBase(self.youtube)
        progress = ProgressBar(disable=not self.show_progress)
        pipeline = SortPipeline(api, drop_unresolved=self.drop_unresolved, progress=progress)

        try:
            with logging_redirect_tqdm(loggers=[package_logger]):
                self.result = pipeline.run(self.playlist_id, dry_run=self.dry_run)
        finally:
            progress.close()

        self._report(self.result)
        return True

    def _report(self, result: SortResult) -> None:
        if result.unresolved:
            logger.info("%d videos had no upload date and were sorted as oldest", result.unresolved)

        build = result.build
        if build is None:
            logger.info("Dry run: would create a playlist with %d videos", len(result.entries))
            return

        logger.info(
            "Added %d/%d videos (%d skipped)", build.added, build.total, build.skipped_count
        )
        if self.verbose:
            for skipped in build.skipped:
                logger.info("  skipped %s: %s", skipped.entry.video_id, skipped.reason)
        logger.info("New playlist created: %s", playlist_url(build.playlist_id))
