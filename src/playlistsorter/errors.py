"""Error types and error handling utilities."""

import functools
import json
import time
from typing import Any, Callable, Optional, TypeVar

from googleapiclient.errors import HttpError

from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

RATE_LIMIT_REASONS = ("rateLimitExceeded", "userRateLimitExceeded")


class YouTubeError(Exception):
    """Base class for YouTube API errors."""

    pass


class ConfigurationError(YouTubeError):
    """Error raised when credentials or settings are missing."""

    pass


class AuthenticationError(YouTubeError):
    """Error raised when the session is rejected and cannot be refreshed."""

    pass


class PlaylistNotFoundError(YouTubeError):
    """Error raised when a playlist is not found."""

    pass


class VideoNotFoundError(YouTubeError):
    """Error raised when a video is not found (private/deleted)."""

    pass


class TransportError(YouTubeError):
    """Error raised when an API request fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class TransientError(TransportError):
    """Server side failure that is expected to clear on retry."""

    pass


class RateLimitError(TransportError):
    """Error raised when rate limit is exceeded."""

    def __init__(self, retry_after: Optional[float] = None, status: Optional[int] = 429):
        """Initialize error.

        Args:
            retry_after: Number of seconds to wait before retrying
            status: HTTP status of the throttled response
        """
        self.retry_after = retry_after
        if retry_after:
            message = f"Rate limit exceeded. Retry after {retry_after:g} seconds"
        else:
            message = "Rate limit exceeded"
        super().__init__(message, status=status)


def _error_reason(error: HttpError) -> str:
    """Pull the first error reason out of an HttpError body."""
    content = error.content
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    try:
        payload = json.loads(content)
    except (TypeError, ValueError):
        return ""
    if not isinstance(payload, dict):
        return ""
    details = payload.get("error", {})
    if not isinstance(details, dict):
        return ""
    for detail in details.get("errors", []):
        if isinstance(detail, dict) and detail.get("reason"):
            return detail["reason"]
    return ""


def _retry_after(error: HttpError) -> Optional[float]:
    value = error.resp.get("retry-after") if hasattr(error.resp, "get") else None
    try:
        return float(value) if value is not None else None
    except ValueError:
        return None


def translate_http_error(error: HttpError, context: str) -> YouTubeError:
    """Map an HttpError onto the package error taxonomy.

    Args:
        error: Error raised by the API client
        context: What was being attempted, used as the message prefix

    Returns:
        The YouTubeError subclass matching the status and reason
    """
    status = int(error.resp.status)
    reason = _error_reason(error)
    message = f"{context}: HTTP {status}" + (f" ({reason})" if reason else "")

    if status == 429 or (status == 403 and reason in RATE_LIMIT_REASONS):
        return RateLimitError(retry_after=_retry_after(error), status=status)
    if status == 401:
        return AuthenticationError(message)
    if reason == "playlistNotFound" or (status == 404 and "playlist" in context.lower()):
        return PlaylistNotFoundError(message)
    if reason == "videoNotFound":
        return VideoNotFoundError(message)
    if status >= 500:
        return TransientError(message, status=status)
    return TransportError(message, status=status)


def with_retry(
    max_retries: int = 3,
    initial_delay: float = 2.0,
    max_delay: float = 60.0,
    backoff_factor: float = 2.0,
    retryable_exceptions: Optional[tuple] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator to retry a function on failure.

    A RateLimitError carrying retry_after waits at least that long.

    Args:
        max_retries: Maximum number of retries
        initial_delay: Initial delay between retries in seconds
        max_delay: Maximum delay between retries in seconds
        backoff_factor: Factor to multiply delay by after each retry
        retryable_exceptions: Tuple of exceptions to retry on

    Returns:
        Decorated function
    """
    if retryable_exceptions is None:
        retryable_exceptions = (RateLimitError,)

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            delay = initial_delay

            for attempt in range(max_retries + 1):  # +1 for initial attempt
                try:
                    return func(*args, **kwargs)
                except retryable_exceptions as e:
                    if attempt >= max_retries:
                        logger.error(
                            "Error in %s: %s. Max retries (%d) exceeded.",
                            func.__name__,
                            str(e),
                            max_retries,
                        )
                        raise
                    wait = delay
                    retry_after = getattr(e, "retry_after", None)
                    if retry_after:
                        wait = min(max(wait, retry_after), max_delay)
                    logger.warning(
                        "Error in %s: %s. Retrying in %s seconds... (attempt %d/%d)",
                        func.__name__,
                        str(e),
                        wait,
                        attempt + 1,
                        max_retries,
                    )
                    time.sleep(wait)
                    delay = min(delay * backoff_factor, max_delay)

        return wrapper

    return decorator
