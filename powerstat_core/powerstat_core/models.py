"""
Telemetry records handed to the dashboard.

Records are created per collection call and never mutated afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

STATUS_UNKNOWN = "Unknown"

CELSIUS = "°C"


@dataclass(frozen=True)
class BatteryStatus:
    """
    One battery's state.

    time_left and health are empty strings when the source does not
    report them; cycle_count is 0 when unknown.
    """
    percent: float
    status: str = STATUS_UNKNOWN
    time_left: str = ""
    health: str = ""
    cycle_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "percent": self.percent,
            "status": self.status,
            "time_left": self.time_left,
            "health": self.health,
            "cycle_count": self.cycle_count,
        }


@dataclass(frozen=True)
class ThermalStatus:
    """
    Fan and CPU temperature.

    The all-zero value means "no data" and is not an error.
    cpu_temp_estimated is True when cpu_temp came from the thermal-level
    heuristic instead of a sensor reading.
    """
    fan_speed: int = 0
    cpu_temp: float = 0.0
    cpu_temp_estimated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fan_speed": self.fan_speed,
            "cpu_temp": self.cpu_temp,
            "cpu_temp_estimated": self.cpu_temp_estimated,
        }


@dataclass(frozen=True)
class SensorReading:
    label: str
    value: float
    unit: str = CELSIUS

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "value": self.value, "unit": self.unit}


@dataclass(frozen=True)
class TelemetrySnapshot:
    """
    Everything one poll produced.

    A section that failed keeps its empty value and records the error
    message in ``errors`` under the section name.
    """
    timestamp: datetime
    batteries: List[BatteryStatus] = field(default_factory=list)
    thermal: ThermalStatus = field(default_factory=ThermalStatus)
    sensors: List[SensorReading] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    def error_for(self, section: str) -> Optional[str]:
        return self.errors.get(section)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "batteries": [b.to_dict() for b in self.batteries],
            "thermal": self.thermal.to_dict(),
            "sensors": [s.to_dict() for s in self.sensors],
            "errors": dict(self.errors),
        }
