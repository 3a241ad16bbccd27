"""
Parsers for raw probe output.

Pure functions: text in, records or plain values out. No I/O happens here,
so every function can be exercised against literal fixture strings.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from .models import BatteryStatus, STATUS_UNKNOWN

# Kernel thermal level -> approximate Celsius. Uncalibrated estimate.
THERMAL_LEVEL_BASE_C = 45.0
THERMAL_LEVEL_STEP_C = 0.5


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _split_key_value(line: str) -> Optional[str]:
    """Return the part after the colon, or None unless there is exactly one colon."""
    parts = line.split(":")
    if len(parts) != 2:
        return None
    return parts[1].strip()


def parse_time_left(raw: str) -> str:
    """
    Extract the time-left estimate from pmset-style output.

    The value is the token right before the word "remaining"; the last
    occurrence wins. Returns "" when no line mentions it.
    """
    time_left = ""
    for line in raw.splitlines():
        if "remaining" not in line:
            continue
        tokens = line.split()
        for i, token in enumerate(tokens):
            if i > 0 and token.rstrip(";") == "remaining":
                time_left = tokens[i - 1]
    return time_left


def parse_pmset(raw: str, health: str = "", cycles: int = 0) -> List[BatteryStatus]:
    """
    Parse ``pmset -g batt`` output into one BatteryStatus per percent line.

    Example line:
        -InternalBattery-0 (id=123) 85%; charging; 1:30 remaining present: true

    Args:
        raw: Command output
        health: Condition string from the slow probe, shared by all records
        cycles: Cycle count from the slow probe, shared by all records

    Returns:
        List of BatteryStatus (empty when no line carries a percent sign)
    """
    time_left = parse_time_left(raw)
    batteries = []

    for line in raw.splitlines():
        if "%" not in line:
            continue
        tokens = line.split()
        percent = 0.0
        status = STATUS_UNKNOWN
        for i, token in enumerate(tokens):
            if "%" in token:
                percent = _to_float(token.rstrip(";").rstrip("%"))
                if i + 1 < len(tokens):
                    status = tokens[i + 1].rstrip(";") or STATUS_UNKNOWN
                break

        batteries.append(BatteryStatus(
            percent=percent,
            status=status,
            time_left=time_left,
            health=health,
            cycle_count=cycles,
        ))

    return batteries


def parse_power_profile(raw: str) -> Tuple[str, int]:
    """
    Pull (health, cycle count) out of ``system_profiler SPPowerDataType``.

    Only "key: value" lines with a single colon are honoured; a malformed
    cycle count reads as 0.
    """
    health = ""
    cycles = 0
    for line in raw.splitlines():
        lower = line.lower()
        if "cycle count" in lower:
            value = _split_key_value(line)
            if value is not None:
                cycles = _to_int(value)
        if "condition" in lower:
            value = _split_key_value(line)
            if value is not None:
                health = value
    return health, cycles


def parse_fan_speed(raw: str) -> int:
    """Return the RPM of the first "fan ... speed: N rpm" line, or 0."""
    for line in raw.splitlines():
        lower = line.lower()
        if "fan" not in lower or "speed" not in lower:
            continue
        value = _split_key_value(line)
        if value is None:
            continue
        tokens = value.split()
        return _to_int(tokens[0]) if tokens else 0
    return 0


def parse_battery_temperature(raw: str) -> float:
    """
    Convert the ioreg battery "Temperature" value (centi-degrees) to Celsius.

    Returns 0.0 for anything that is not a positive integer.
    """
    raw_value = _to_int(raw.strip())
    if raw_value <= 0:
        return 0.0
    return raw_value / 100.0


def parse_thermal_level(raw: str) -> Optional[int]:
    """Parse the sysctl thermal level; None if unparseable or negative."""
    try:
        level = int(raw.strip())
    except ValueError:
        return None
    return level if level >= 0 else None


def estimate_cpu_temp(level: int) -> float:
    """Map a thermal level to an approximate CPU temperature in Celsius."""
    return THERMAL_LEVEL_BASE_C + level * THERMAL_LEVEL_STEP_C


def parse_sysfs_battery(capacity: str, status: Optional[str]) -> BatteryStatus:
    """Build a BatteryStatus from the raw sysfs capacity/status file contents."""
    status = (status or "").strip()
    return BatteryStatus(
        percent=_to_float(capacity.strip()),
        status=status or STATUS_UNKNOWN,
    )


def clean_sensor_label(key: str) -> str:
    """
    Make a vendor sensor key presentable: "TC_AMBIENT" -> "AMBIENT".

    Trims whitespace, drops a leading "TC" and turns underscores into
    spaces, repeated until the label stops changing so that cleaning a
    clean label is a no-op.
    """
    label = key
    while True:
        cleaned = label.strip()
        if cleaned.startswith("TC"):
            cleaned = cleaned[2:]
        cleaned = cleaned.replace("_", " ").strip()
        if cleaned == label:
            return label
        label = cleaned
