"""Sort YouTube playlists by upload date."""

__version__ = "0.1.0"

# Import all public components
from .auth import FileTokenStore, MemoryTokenStore, TokenStore, get_youtube_service
from .builder import PlaylistBuilder
from .cli import main
from .commands import SetupCommand, SortCommand, YouTubeCommand
from .core import YouTubeBase
from .enricher import VideoEnricher
from .errors import (
    AuthenticationError,
    ConfigurationError,
    PlaylistNotFoundError,
    RateLimitError,
    TransportError,
    YouTubeError,
)
from .logging_config import configure_logging, get_logger
from .models import ZERO_TIMESTAMP, BuildResult, SkippedEntry, SortResult, VideoEntry
from .pipeline import SortPipeline
from .ratelimit import RequestPacer
from .reader import PlaylistReader
from .sorter import sort_by_publish_date
from .utils import parse_playlist_url

# Import config variables
from .config import (  # noqa: F401
    YOUTUBE_SCOPES,
    CLIENT_SECRETS_FILE,
    CONFIG_DIR,
    TOKEN_FILE,
    BATCH_SIZE,
    PAGE_SIZE,
)

# Get logger for this module
logger = get_logger(__name__)
