"""
TTL cache for the slow power probe.

``system_profiler SPPowerDataType`` takes seconds to run and its content
(battery condition, cycle count, fan speed) changes rarely, while battery
and thermal collectors both need fields from it on every poll. The cache
keeps the last captured text for ``ttl`` seconds.
"""

from __future__ import annotations
import threading
import time
from typing import Callable, Optional
import logging

logger = logging.getLogger('powerstat.cache')

DEFAULT_TTL = 30.0


class PowerDataCache:
    """
    Thread-safe holder of the last slow-probe output.

    Usage:
        cache = PowerDataCache(fetch=probe.slow_power_output, ttl=30.0)
        text = cache.get()

    ``fetch`` returns the probe text, or None when the probe failed. A
    failed refresh keeps whatever was cached before (possibly expired).
    ``clock`` defaults to time.monotonic and is injectable for tests.
    """

    def __init__(
        self,
        fetch: Callable[[], Optional[str]],
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._text = ""
        self._fetched_at: Optional[float] = None

    def _is_fresh(self, now: float) -> bool:
        return (
            self._text != ""
            and self._fetched_at is not None
            and now - self._fetched_at < self.ttl
        )

    def get(self) -> str:
        """Return cached text, refreshing it first if stale or absent."""
        with self._lock:
            now = self._clock()
            if self._is_fresh(now):
                return self._text

            text = self._fetch()
            if text is not None:
                self._text = text
                self._fetched_at = now
                logger.debug(
                    "Power data refreshed",
                    extra={"probe": "slow_power", "ttl": self.ttl}
                )
            else:
                logger.debug(
                    "Power data refresh failed; keeping previous value",
                    extra={"probe": "slow_power", "error_code": "refresh_failed"}
                )
            return self._text

    def age(self) -> Optional[float]:
        """Seconds since the last successful refresh, or None if never fetched."""
        with self._lock:
            if self._fetched_at is None:
                return None
            return self._clock() - self._fetched_at

    def invalidate(self) -> None:
        """Force the next get() to refresh. The old text stays as fallback."""
        with self._lock:
            self._fetched_at = None
