"""
powerstat - best-effort battery, thermal and sensor telemetry for one host.

Three read operations for status dashboards:
- collect_batteries(): list of BatteryStatus, or NoBatteryDataError
- collect_thermal(): ThermalStatus, zero-valued when nothing is available
- collect_sensors(): list of SensorReading, facility errors propagate
"""

from .errors import BatteryCollectionError, NoBatteryDataError, TelemetryError
from .models import BatteryStatus, SensorReading, TelemetrySnapshot, ThermalStatus
from .telemetry import (
    TelemetryCollector,
    collect_batteries,
    collect_sensors,
    collect_thermal,
    get_collector,
    reset_collector,
    snapshot,
)

__all__ = [
    'BatteryStatus',
    'ThermalStatus',
    'SensorReading',
    'TelemetrySnapshot',
    'TelemetryError',
    'NoBatteryDataError',
    'BatteryCollectionError',
    'TelemetryCollector',
    'collect_batteries',
    'collect_thermal',
    'collect_sensors',
    'snapshot',
    'get_collector',
    'reset_collector',
]
