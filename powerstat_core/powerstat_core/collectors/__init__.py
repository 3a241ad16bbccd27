"""
Battery, thermal and sensor collectors.

Each collector takes its data sources through the constructor, so tests can
hand in fake probes, caches and sensor facilities.
"""

from .battery import BatteryCollector
from .thermal import ThermalCollector
from .sensors import SensorCollector
from .power import PowerDataSource

__all__ = [
    'BatteryCollector',
    'ThermalCollector',
    'SensorCollector',
    'PowerDataSource',
]
