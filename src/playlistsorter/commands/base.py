"""Base command class for YouTube operations."""

from ..errors import YouTubeError
from ..logging_config import get_logger

# Get logger for this module
logger = get_logger(__name__)


class YouTubeCommand:
    """Base class for commands."""

    def __init__(self, youtube=None):
        """Initialize command.

        Args:
            youtube: YouTube API client, if the command talks to the API
        """
        self.youtube = youtube
        self._validated = False
        self.verbose = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.youtube:
            raise ValueError("YouTube API client is required")
        self._validated = True

    def run(self) -> bool:
        """Run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            YouTubeError: If command fails
            ValueError: If parameters are invalid
        """
        self.validate()
        try:
            return self._run()
        except (YouTubeError, ValueError):
            raise
        except Exception as e:
            raise YouTubeError(str(e)) from e

    def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False
