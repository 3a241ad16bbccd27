"""Pytest configuration and fixtures."""

from typing import List, Optional, Tuple

import pytest

from powerstat_core.platform import reset_power_probe_cache
from powerstat_core.platform.base import PowerProbe
from powerstat_core.telemetry import reset_collector


PMSET_OUTPUT = (
    "Now drawing from 'AC Power'\n"
    " -InternalBattery-0 (id=4653155)\t85%; charging; 1:30 remaining present: true"
)

POWER_PROFILE_OUTPUT = """Power:

    Battery Information:

      Model Information:
          Manufacturer: SMP
          Device Name: bq40z651
      Charge Information:
          Fully Charged: No
          Charging: Yes
          State of Charge (%): 85
      Health Information:
          Cycle Count: 231
          Condition: Normal
          Maximum Capacity: 89%
    Fan Information:
          Fan Speed: 1200 rpm
"""


class FakeProbe(PowerProbe):
    """In-memory PowerProbe; every output is a plain attribute and calls are counted."""

    def __init__(
        self,
        fast: Optional[str] = None,
        slow: Optional[str] = None,
        temperature: Optional[str] = None,
        level: Optional[str] = None,
        sysfs: Optional[List[Tuple[str, Optional[str]]]] = None,
        has_fast: bool = True,
        has_slow: bool = True,
    ):
        super().__init__()
        self.fast = fast
        self.slow = slow
        self.temperature = temperature
        self.level = level
        self.sysfs = sysfs or []
        self.has_fast = has_fast
        self.has_slow = has_slow
        self.calls = {"fast": 0, "slow": 0, "temperature": 0, "level": 0, "sysfs": 0}

    @property
    def platform_name(self) -> str:
        return "fake"

    def has_fast_battery_probe(self) -> bool:
        return self.has_fast

    def fast_battery_output(self) -> Optional[str]:
        self.calls["fast"] += 1
        return self.fast

    def scan_sysfs_batteries(self):
        self.calls["sysfs"] += 1
        return list(self.sysfs)

    def has_slow_power_probe(self) -> bool:
        return self.has_slow

    def slow_power_output(self) -> Optional[str]:
        self.calls["slow"] += 1
        return self.slow

    def battery_temperature_output(self) -> Optional[str]:
        self.calls["temperature"] += 1
        return self.temperature

    def thermal_level_output(self) -> Optional[str]:
        self.calls["level"] += 1
        return self.level


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _reset_singletons():
    reset_power_probe_cache()
    reset_collector()
    yield
    reset_power_probe_cache()
    reset_collector()
