"""
Cross-platform temperature sensor listing via psutil.

Errors are not caught here; the sensor collector propagates them as-is.
"""

from typing import List, Tuple
import psutil


def list_temperatures() -> List[Tuple[str, float]]:
    """
    List every temperature sensor psutil knows about.

    Returns:
        List of (sensor key, current Celsius). The key is "<chip>_<label>",
        or just the chip name when the sensor has no label.

    Raises:
        NotImplementedError: psutil has no sensor support on this platform
    """
    if not hasattr(psutil, 'sensors_temperatures'):
        raise NotImplementedError("temperature sensors are not supported on this platform")

    readings = []
    for chip, entries in psutil.sensors_temperatures().items():
        for entry in entries:
            key = f"{chip}_{entry.label}" if entry.label else chip
            readings.append((key, float(entry.current)))
    return readings
