"""Access to the slow power report shared by the battery and thermal collectors."""

from __future__ import annotations
from typing import Optional, Tuple

from ..cache import PowerDataCache, DEFAULT_TTL
from ..parsers import parse_power_profile
from ..platform.base import PowerProbe


class PowerDataSource:
    """
    Slow-probe text behind a PowerDataCache.

    On platforms without the slow probe every accessor returns empty values
    and the cache is never touched.
    """

    def __init__(self, probe: PowerProbe, cache: Optional[PowerDataCache] = None, ttl: float = DEFAULT_TTL):
        self.probe = probe
        self.cache = cache or PowerDataCache(fetch=probe.slow_power_output, ttl=ttl)

    def system_power_output(self) -> str:
        """Raw slow-probe text, refreshed when the cache is stale."""
        if not self.probe.has_slow_power_probe():
            return ""
        return self.cache.get()

    def power_data(self) -> Tuple[str, int]:
        """(health, cycle count) from the cached report; ("", 0) if unavailable."""
        out = self.system_power_output()
        if not out:
            return "", 0
        return parse_power_profile(out)
