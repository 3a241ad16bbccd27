"""Battery collector: fast command first, kernel power_supply scan as fallback."""

from __future__ import annotations
from typing import List
import logging

from ..errors import BatteryCollectionError, NoBatteryDataError
from ..models import BatteryStatus
from ..parsers import parse_pmset, parse_sysfs_battery
from ..platform.base import PowerProbe
from ..utils.guard import contain_faults
from .power import PowerDataSource

logger = logging.getLogger('powerstat.battery')


class BatteryCollector:
    """
    Produce one BatteryStatus per battery on the host.

    Usage:
        collector = BatteryCollector(probe, PowerDataSource(probe))
        batteries = collector.collect()
    """

    def __init__(self, probe: PowerProbe, power: PowerDataSource):
        self.probe = probe
        self.power = power

    @contain_faults(BatteryCollectionError, "battery collection failed")
    def collect(self) -> List[BatteryStatus]:
        """
        Collect battery snapshots.

        Returns:
            Non-empty list of BatteryStatus

        Raises:
            NoBatteryDataError: No source reported a battery
            BatteryCollectionError: A probe failed unexpectedly
        """
        batteries = self._collect_fast()
        if batteries:
            return batteries

        batteries = self._collect_sysfs()
        if batteries:
            return batteries

        raise NoBatteryDataError()

    def _collect_fast(self) -> List[BatteryStatus]:
        if not self.probe.has_fast_battery_probe():
            return []

        out = self.probe.fast_battery_output()
        if out is None:
            logger.debug("Fast battery probe failed", extra={"probe": "fast_battery"})
            return []

        health, cycles = self.power.power_data()
        return parse_pmset(out, health, cycles)

    def _collect_sysfs(self) -> List[BatteryStatus]:
        return [
            parse_sysfs_battery(capacity, status)
            for capacity, status in self.probe.scan_sysfs_batteries()
        ]
