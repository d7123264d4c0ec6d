"""Request pacing for YouTube API calls."""

import time
from typing import Callable, Optional

from . import config
from .logging_config import get_logger

logger = get_logger(__name__)


class RequestPacer:
    """Keeps a minimum interval between consecutive API requests.

    The interval starts at the base value, doubles every time the API reports
    throttling and halves back toward the base after each successful request.
    """

    def __init__(
        self,
        interval: float = config.REQUEST_INTERVAL,
        max_interval: float = config.MAX_REQUEST_INTERVAL,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        """Initialize pacer.

        Args:
            interval: Base number of seconds between requests
            max_interval: Upper bound for the interval after throttling
            clock: Monotonic clock, defaults to time.monotonic
            sleep: Sleep function, defaults to time.sleep
        """
        self.base_interval = max(0.0, interval)
        self.max_interval = max(self.base_interval, max_interval)
        self.interval = self.base_interval
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._last_request: Optional[float] = None

    def wait(self) -> float:
        """Block until the next request may be sent.

        Returns:
            Number of seconds slept
        """
        now = self._clock()
        delay = 0.0
        if self._last_request is not None:
            delay = self.interval - (now - self._last_request)
        if delay > 0:
            self._sleep(delay)
            now += delay
        self._last_request = now
        return max(delay, 0.0)

    def record_success(self) -> None:
        """Relax the interval after a request went through."""
        if self.interval > self.base_interval:
            self.interval = max(self.base_interval, self.interval / 2)

    def record_throttle(self, retry_after: Optional[float] = None) -> None:
        """Slow down after the API reported throttling.

        Args:
            retry_after: Seconds the server asked us to wait, if given
        """
        interval = max(self.interval * 2, self.base_interval, 1.0)
        if retry_after:
            interval = max(interval, retry_after)
        self.interval = min(interval, self.max_interval)
        logger.debug("Throttled, request interval now %.2fs", self.interval)
