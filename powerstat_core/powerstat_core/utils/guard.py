"""
Fault boundary for collector entry points.

A collector decorated with contain_faults() never lets an arbitrary
exception escape: anything that is not already a TelemetryError is logged
and re-raised as the given error type.
"""

from __future__ import annotations
import functools
import logging
from typing import Any, Callable, Type

from ..errors import TelemetryError

logger = logging.getLogger('powerstat.guard')


def contain_faults(error_cls: Type[TelemetryError], message: str) -> Callable:
    """
    Decorator converting unexpected faults into ``error_cls``.

    Args:
        error_cls: TelemetryError subclass raised in place of the fault
        message: Prefix for the converted error ("<message>: <fault>")

    Example:
        @contain_faults(BatteryCollectionError, "battery collection failed")
        def collect(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except TelemetryError:
                raise
            except Exception as exc:
                logger.error(
                    f"{func.__qualname__} raised {type(exc).__name__}: {exc}",
                    exc_info=True,
                    extra={"error_code": "fault_contained"}
                )
                raise error_cls(f"{message}: {exc}") from exc

        return wrapper
    return decorator
