"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Directory Settings
_XDG_CONFIG_HOME = os.getenv("XDG_CONFIG_HOME") or os.path.join(
    os.path.expanduser("~"), ".config"
)
CONFIG_DIR = os.getenv(
    "PLAYLISTSORTER_CONFIG_DIR", os.path.join(_XDG_CONFIG_HOME, "playlistsorter")
)

# YouTube API Settings
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube"]
CLIENT_SECRETS_FILE = os.getenv(
    "GOOGLE_CLIENT_SECRETS_FILE", os.path.join(CONFIG_DIR, "client_secret.json")
)
TOKEN_FILE = os.getenv("PLAYLISTSORTER_TOKEN_FILE", os.path.join(CONFIG_DIR, "token.json"))

# Request Settings
PAGE_SIZE = 50  # playlistItems.list maxResults ceiling
BATCH_SIZE = 50  # videos.list ids per call ceiling
REQUEST_INTERVAL = float(os.getenv("PLAYLISTSORTER_REQUEST_INTERVAL", "0.1"))
MAX_REQUEST_INTERVAL = 30.0
MAX_RETRIES = int(os.getenv("PLAYLISTSORTER_MAX_RETRIES", "3"))

# Sort Settings
DROP_UNRESOLVED = _env_flag("PLAYLISTSORTER_DROP_UNRESOLVED")
SORTED_SUFFIX = " - Sorted"
SORTED_DESCRIPTION = "Sorted by upload date (oldest to newest)"
