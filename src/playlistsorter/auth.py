"""YouTube API authentication handling."""

import json
import os
from typing import Optional

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from . import config
from .logging_config import get_logger

logger = get_logger(__name__)


class TokenStore:
    """Storage for the serialized OAuth token."""

    def read(self) -> Optional[str]:
        """Return the stored token blob, or None if there is none."""
        raise NotImplementedError

    def write(self, blob: str) -> None:
        """Replace the stored token blob."""
        raise NotImplementedError


class FileTokenStore(TokenStore):
    """Token kept as JSON in a file readable only by the owner."""

    def __init__(self, path: str = config.TOKEN_FILE) -> None:
        self.path = path

    def read(self) -> Optional[str]:
        if not os.path.exists(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def write(self, blob: str) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, mode=0o700, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(blob)


class MemoryTokenStore(TokenStore):
    """Token kept in memory, for tests and embedding."""

    def __init__(self, blob: Optional[str] = None) -> None:
        self.blob = blob

    def read(self) -> Optional[str]:
        return self.blob

    def write(self, blob: str) -> None:
        self.blob = blob


def load_credentials(token_store: TokenStore) -> Optional[Credentials]:
    """Load stored credentials, ignoring a corrupt token."""
    blob = token_store.read()
    if not blob:
        return None
    try:
        return Credentials.from_authorized_user_info(json.loads(blob), config.YOUTUBE_SCOPES)
    except ValueError as e:
        logger.warning("Ignoring unreadable stored token: %s", str(e))
        return None


def get_youtube_service(
    token_store: Optional[TokenStore] = None,
    client_secrets_file: Optional[str] = None,
) -> Optional[object]:
    """
    Get an authenticated YouTube service object.
    Returns None if authentication fails.
    """
    token_store = token_store or FileTokenStore()
    client_secrets_file = client_secrets_file or config.CLIENT_SECRETS_FILE

    creds = load_credentials(token_store)

    # If there are no (valid) credentials available, let the user log in
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            try:
                creds.refresh(Request())
            except RefreshError as e:
                logger.warning("Token refresh failed, signing in again: %s", str(e))
                creds = None

        if not creds or not creds.valid:
            if not client_secrets_file or not os.path.exists(client_secrets_file):
                logger.error(
                    "Client secrets file not found: %s. Run 'playlistsorter setup' first",
                    client_secrets_file,
                )
                return None
            try:
                flow = InstalledAppFlow.from_client_secrets_file(
                    client_secrets_file, config.YOUTUBE_SCOPES
                )
                creds = flow.run_local_server(port=0)
            except Exception as e:
                logger.error("Authentication failed: %s", str(e))
                return None

        # Save the credentials for the next run
        try:
            token_store.write(creds.to_json())
        except OSError as e:
            logger.warning("Failed to save token: %s", str(e))

    try:
        return build("youtube", "v3", credentials=creds)
    except Exception as e:
        logger.error("Failed to build YouTube service: %s", str(e))
        return None
