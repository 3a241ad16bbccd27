"""
Thermal collector.

Fan speed comes from the cached slow power report. CPU temperature is tried
from the most direct source down:
1. battery-adjacent temperature sensor (centi-degrees)
2. kernel thermal level, mapped to an estimate
"""

from __future__ import annotations
import logging

from ..models import ThermalStatus
from ..parsers import (
    estimate_cpu_temp,
    parse_battery_temperature,
    parse_fan_speed,
    parse_thermal_level,
)
from ..platform.base import PowerProbe
from .power import PowerDataSource

logger = logging.getLogger('powerstat.thermal')


class ThermalCollector:
    """Produce a ThermalStatus; never raises for missing data."""

    def __init__(self, probe: PowerProbe, power: PowerDataSource):
        self.probe = probe
        self.power = power

    def collect(self) -> ThermalStatus:
        fan_speed = 0
        out = self.power.system_power_output()
        if out:
            fan_speed = parse_fan_speed(out)

        raw = self.probe.battery_temperature_output()
        if raw is not None:
            cpu_temp = parse_battery_temperature(raw)
            if cpu_temp > 0:
                return ThermalStatus(fan_speed=fan_speed, cpu_temp=cpu_temp)

        raw = self.probe.thermal_level_output()
        if raw is not None:
            level = parse_thermal_level(raw)
            if level is not None:
                return ThermalStatus(
                    fan_speed=fan_speed,
                    cpu_temp=estimate_cpu_temp(level),
                    cpu_temp_estimated=True,
                )
            logger.debug(f"Unusable thermal level {raw!r}", extra={"probe": "thermal_level"})

        return ThermalStatus(fan_speed=fan_speed)
