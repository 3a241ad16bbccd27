"""
macOS power probe.

Uses:
- pmset for fast battery percentage/status
- system_profiler SPPowerDataType for condition, cycle count and fan speed
- ioreg (AppleSmartBattery) for a battery-adjacent temperature
- sysctl machdep.xcpm.cpu_thermal_level as a thermal proxy
"""

from typing import List, Optional, Tuple

from ..utils.runner import command_exists
from .base import PowerProbe

PMSET_COMMAND = ['pmset', '-g', 'batt']
SYSTEM_PROFILER_COMMAND = ['system_profiler', 'SPPowerDataType']
IOREG_TEMPERATURE_COMMAND = [
    'sh', '-c', 'ioreg -rn AppleSmartBattery | awk \'/"Temperature"/ {print $3}\''
]
THERMAL_LEVEL_COMMAND = ['sysctl', '-n', 'machdep.xcpm.cpu_thermal_level']


class MacPowerProbe(PowerProbe):
    """macOS implementation."""

    @property
    def platform_name(self) -> str:
        return "macos"

    def has_fast_battery_probe(self) -> bool:
        return command_exists('pmset')

    def fast_battery_output(self) -> Optional[str]:
        return self._run(PMSET_COMMAND, timeout=self.default_timeout)

    def scan_sysfs_batteries(self) -> List[Tuple[str, Optional[str]]]:
        return []

    def has_slow_power_probe(self) -> bool:
        return True

    def slow_power_output(self) -> Optional[str]:
        return self._run(SYSTEM_PROFILER_COMMAND, timeout=self.slow_timeout)

    def battery_temperature_output(self) -> Optional[str]:
        return self._run(IOREG_TEMPERATURE_COMMAND, timeout=self.fast_timeout)

    def thermal_level_output(self) -> Optional[str]:
        return self._run(THERMAL_LEVEL_COMMAND, timeout=self.fast_timeout)
