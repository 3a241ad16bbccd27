"""
Linux power probe.

Batteries come from /sys/class/power_supply; there is no fast or slow
power command and no thermal-level proxy.
"""

import glob
import os
from typing import List, Optional, Tuple
import logging

from .base import PowerProbe

logger = logging.getLogger('powerstat.platform.linux')

DEFAULT_POWER_SUPPLY_GLOB = '/sys/class/power_supply/BAT*/capacity'


def _read_text(path: str) -> str:
    with open(path, 'r') as f:
        return f.read()


class LinuxPowerProbe(PowerProbe):
    """Linux implementation."""

    def __init__(self, *args, power_supply_glob: str = DEFAULT_POWER_SUPPLY_GLOB, **kwargs):
        super().__init__(*args, **kwargs)
        self.power_supply_glob = power_supply_glob

    @property
    def platform_name(self) -> str:
        return "linux"

    def has_fast_battery_probe(self) -> bool:
        return False

    def fast_battery_output(self) -> Optional[str]:
        return None

    def scan_sysfs_batteries(self) -> List[Tuple[str, Optional[str]]]:
        batteries = []
        for capacity_file in sorted(glob.glob(self.power_supply_glob)):
            try:
                capacity = _read_text(capacity_file)
            except OSError as e:
                logger.debug(f"Skipping unreadable {capacity_file}: {e}")
                continue

            status_file = os.path.join(os.path.dirname(capacity_file), 'status')
            try:
                status = _read_text(status_file)
            except OSError:
                status = None

            batteries.append((capacity, status))
        return batteries

    def has_slow_power_probe(self) -> bool:
        return False

    def slow_power_output(self) -> Optional[str]:
        return None

    def battery_temperature_output(self) -> Optional[str]:
        return None

    def thermal_level_output(self) -> Optional[str]:
        return None
