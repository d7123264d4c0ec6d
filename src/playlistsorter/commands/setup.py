"""Setup command: store OAuth client credentials."""

import getpass
import json
import os
from typing import Callable, Optional

from .. import config
from ..errors import ConfigurationError
from ..logging_config import get_logger
from .base import YouTubeCommand

logger = get_logger(__name__)

INSTRUCTIONS = """\
To use playlistsorter you need your own OAuth client for the YouTube Data API:

1. Go to https://console.cloud.google.com/
2. Create a new project or select an existing one
3. Enable "YouTube Data API v3"
4. Configure the OAuth consent screen:
   - Choose 'External' user type
   - Fill in the required fields
   - Add your Google account under 'Test users'
5. Create OAuth 2.0 credentials of type "Desktop app"
6. Enter the client ID and secret below

The app stays in 'Testing' mode, so only the test users can sign in.
"""


def client_secrets(client_id: str, client_secret: str) -> dict:
    """Build an installed-app client secrets document."""
    return {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": ["http://localhost"],
        }
    }


class SetupCommand(YouTubeCommand):
    """Command that asks for OAuth client credentials and saves them."""

    def __init__(
        self,
        secrets_file: Optional[str] = None,
        prompt: Callable[[str], str] = input,
        secret_prompt: Callable[[str], str] = getpass.getpass,
    ) -> None:
        super().__init__(None)
        self.secrets_file = secrets_file or config.CLIENT_SECRETS_FILE
        self.prompt = prompt
        self.secret_prompt = secret_prompt

    def validate(self) -> None:
        if not self.secrets_file:
            raise ConfigurationError("No location configured for the client secrets file")
        self._validated = True

    def _run(self) -> bool:
        print(INSTRUCTIONS)
        client_id = self.prompt("Client ID: ").strip()
        client_secret = self.secret_prompt("Client Secret: ").strip()
        if not client_id or not client_secret:
            raise ValueError("Client ID and client secret are both required")

        directory = os.path.dirname(self.secrets_file)
        if directory:
            os.makedirs(directory, mode=0o700, exist_ok=True)
        fd = os.open(self.secrets_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(client_secrets(client_id, client_secret), f, indent=2)

        logger.info("Configuration saved to %s", self.secrets_file)
        logger.info("Now run: playlistsorter sort <playlist-url>")
        return True
