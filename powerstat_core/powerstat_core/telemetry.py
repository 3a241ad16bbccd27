"""
Entry point for dashboards.

TelemetryCollector wires one power probe, one shared PowerDataCache and the
three collectors together. The module-level functions use a lazily created
default instance built from the user's config file.

Usage:
    from powerstat_core import collect_batteries, collect_thermal, collect_sensors

    try:
        batteries = collect_batteries()
    except NoBatteryDataError:
        batteries = []
    thermal = collect_thermal()
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from .cache import PowerDataCache
from .collectors import BatteryCollector, PowerDataSource, SensorCollector, ThermalCollector
from .config import CollectorConfig, load_config
from .errors import TelemetryError
from .models import BatteryStatus, SensorReading, TelemetrySnapshot, ThermalStatus
from .obs.logging import get_logger
from .platform import create_power_probe, get_power_probe
from .platform.base import PowerProbe

logger = logging.getLogger('powerstat.telemetry')


def probe_options(config: CollectorConfig) -> Dict[str, Any]:
    """Probe constructor arguments taken from the collector config."""
    return {
        "fast_timeout": config.fast_timeout,
        "slow_timeout": config.slow_timeout,
        "default_timeout": config.default_timeout,
        "power_supply_glob": config.power_supply_glob,
    }


class TelemetryCollector:
    """
    Collect battery, thermal and sensor data for one host.

    All calls are synchronous and safe to make from several threads; the
    only shared state is the lock-guarded power cache.
    """

    def __init__(
        self,
        config: Optional[CollectorConfig] = None,
        probe: Optional[PowerProbe] = None,
        cache: Optional[PowerDataCache] = None,
        sensor_facility=None,
    ):
        self.config = config or CollectorConfig()
        self.probe = probe or create_power_probe(**probe_options(self.config))
        self.power = PowerDataSource(self.probe, cache=cache, ttl=self.config.power_cache_ttl)
        self.batteries = BatteryCollector(self.probe, self.power)
        self.thermal = ThermalCollector(self.probe, self.power)
        self.sensors = SensorCollector(
            sensor_facility,
            min_c=self.config.sensor_min_c,
            max_c=self.config.sensor_max_c,
        )
        logger.info(
            f"TelemetryCollector initialized ({self.probe.platform_name})",
            extra={"platform": self.probe.platform_name}
        )

    def collect_batteries(self) -> List[BatteryStatus]:
        """Raises NoBatteryDataError or BatteryCollectionError, nothing else."""
        return self.batteries.collect()

    def collect_thermal(self) -> ThermalStatus:
        return self.thermal.collect()

    def collect_sensors(self) -> List[SensorReading]:
        """Sensor facility errors propagate unchanged."""
        return self.sensors.collect()

    def snapshot(self) -> TelemetrySnapshot:
        """
        Run all three collectors; a failing section does not hide the others.

        Returns:
            TelemetrySnapshot with per-section error messages in ``errors``
        """
        errors = {}

        batteries: List[BatteryStatus] = []
        try:
            batteries = self.collect_batteries()
        except TelemetryError as e:
            errors["batteries"] = str(e)

        sensors: List[SensorReading] = []
        try:
            sensors = self.collect_sensors()
        except Exception as e:
            logger.debug(f"Sensor facility failed: {e}", extra={"probe": "sensors"})
            errors["sensors"] = str(e) or type(e).__name__

        return TelemetrySnapshot(
            timestamp=datetime.now(),
            batteries=batteries,
            thermal=self.collect_thermal(),
            sensors=sensors,
            errors=errors,
        )


_default_collector: Optional[TelemetryCollector] = None


def get_collector() -> TelemetryCollector:
    """Get the process-wide collector, building it from config on first use."""
    global _default_collector
    if _default_collector is None:
        config = load_config()
        get_logger("powerstat", level=config.log_level)
        _default_collector = TelemetryCollector(config, probe=get_power_probe(**probe_options(config)))
    return _default_collector


def reset_collector():
    """Drop the process-wide collector (useful for testing)."""
    global _default_collector
    _default_collector = None


def collect_batteries() -> List[BatteryStatus]:
    return get_collector().collect_batteries()


def collect_thermal() -> ThermalStatus:
    return get_collector().collect_thermal()


def collect_sensors() -> List[SensorReading]:
    return get_collector().collect_sensors()


def snapshot() -> TelemetrySnapshot:
    return get_collector().snapshot()
