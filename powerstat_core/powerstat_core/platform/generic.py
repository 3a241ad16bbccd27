"""Fallback probe for platforms without any supported power source."""

from typing import List, Optional, Tuple

from .base import PowerProbe


class GenericPowerProbe(PowerProbe):
    """Answers "no data" for every capability."""

    @property
    def platform_name(self) -> str:
        return "generic"

    def has_fast_battery_probe(self) -> bool:
        return False

    def fast_battery_output(self) -> Optional[str]:
        return None

    def scan_sysfs_batteries(self) -> List[Tuple[str, Optional[str]]]:
        return []

    def has_slow_power_probe(self) -> bool:
        return False

    def slow_power_output(self) -> Optional[str]:
        return None

    def battery_temperature_output(self) -> Optional[str]:
        return None

    def thermal_level_output(self) -> Optional[str]:
        return None
