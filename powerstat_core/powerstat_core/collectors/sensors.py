"""Generic temperature sensors from the host-info facility."""

from __future__ import annotations
from typing import Callable, List, Optional, Tuple

from ..models import CELSIUS, SensorReading
from ..parsers import clean_sensor_label
from ..platform.hostinfo import list_temperatures

# Readings outside (min, max] are sentinels or garbage, not temperatures
SENSOR_MIN_C = 0.0
SENSOR_MAX_C = 150.0


class SensorCollector:
    """
    List plausible temperature readings with cleaned labels.

    Errors raised by the facility propagate unchanged.
    """

    def __init__(
        self,
        facility: Optional[Callable[[], List[Tuple[str, float]]]] = None,
        min_c: float = SENSOR_MIN_C,
        max_c: float = SENSOR_MAX_C,
    ):
        self.facility = facility or list_temperatures
        self.min_c = min_c
        self.max_c = max_c

    def is_plausible(self, value: float) -> bool:
        return self.min_c < value <= self.max_c

    def collect(self) -> List[SensorReading]:
        return [
            SensorReading(label=clean_sensor_label(key), value=value, unit=CELSIUS)
            for key, value in self.facility()
            if self.is_plausible(value)
        ]
