"""
Platform abstraction layer for powerstat.

Detects the host platform once and returns the matching PowerProbe.
"""

import sys
from typing import Optional
import logging

from .base import PowerProbe

logger = logging.getLogger('powerstat.platform')

_probe_cache: Optional[PowerProbe] = None


def create_power_probe(platform: Optional[str] = None, **kwargs) -> PowerProbe:
    """
    Build the probe for a platform string (default: sys.platform).

    Keyword arguments are passed to the probe constructor.
    """
    platform = platform or sys.platform

    if platform.startswith('linux'):
        from .linux import LinuxPowerProbe
        return LinuxPowerProbe(**kwargs)
    kwargs.pop('power_supply_glob', None)
    if platform == 'darwin':
        from .macos import MacPowerProbe
        return MacPowerProbe(**kwargs)

    from .generic import GenericPowerProbe
    logger.warning(
        f"Platform '{platform}' has no power probes; battery and thermal data will be empty",
        extra={"platform": platform}
    )
    return GenericPowerProbe(**kwargs)


def get_power_probe(**kwargs) -> PowerProbe:
    """
    Get the power probe for the current system.

    Result is cached after first call; arguments only apply to that call.
    """
    global _probe_cache

    if _probe_cache is None:
        _probe_cache = create_power_probe(**kwargs)

    return _probe_cache


def reset_power_probe_cache():
    """Reset probe cache (useful for testing)."""
    global _probe_cache
    _probe_cache = None


__all__ = [
    'PowerProbe',
    'create_power_probe',
    'get_power_probe',
    'reset_power_probe_cache',
]
