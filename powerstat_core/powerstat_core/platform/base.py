"""
Abstract base class for platform power probes.

Each platform exposes the same small set of capabilities. A capability the
platform lacks answers "nothing" (False, None or an empty list) instead of
raising, so collectors never branch on the operating system themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..utils.runner import run_command

Runner = Callable[..., Dict[str, Any]]


class PowerProbe(ABC):
    """
    Abstract interface for platform-specific power and thermal probes.

    Probes only fetch raw text; turning it into records is the job of
    powerstat_core.parsers.
    """

    def __init__(
        self,
        runner: Optional[Runner] = None,
        fast_timeout: float = 0.5,
        slow_timeout: float = 3.0,
        default_timeout: Optional[float] = None,
    ):
        self._runner = runner or run_command
        self.fast_timeout = fast_timeout
        self.slow_timeout = slow_timeout
        self.default_timeout = default_timeout

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """
        Get platform name (e.g., 'linux', 'macos').

        Returns:
            Platform identifier string
        """
        pass

    # ==========================================
    # Battery
    # ==========================================

    @abstractmethod
    def has_fast_battery_probe(self) -> bool:
        """Whether a cheap battery percentage/status command is available."""
        pass

    @abstractmethod
    def fast_battery_output(self) -> Optional[str]:
        """
        Run the fast battery command.

        Returns:
            Trimmed stdout, or None if the command failed or is unavailable
        """
        pass

    @abstractmethod
    def scan_sysfs_batteries(self) -> List[Tuple[str, Optional[str]]]:
        """
        Read per-battery files from the kernel power_supply class.

        Returns:
            List of (capacity text, status text or None) per readable battery
        """
        pass

    # ==========================================
    # Slow power probe
    # ==========================================

    @abstractmethod
    def has_slow_power_probe(self) -> bool:
        """Whether the detailed (slow) power report exists on this platform."""
        pass

    @abstractmethod
    def slow_power_output(self) -> Optional[str]:
        """
        Run the slow power report under the slow deadline.

        Returns:
            Trimmed stdout, or None on failure
        """
        pass

    # ==========================================
    # Thermal
    # ==========================================

    @abstractmethod
    def battery_temperature_output(self) -> Optional[str]:
        """Raw battery-adjacent temperature reading, or None."""
        pass

    @abstractmethod
    def thermal_level_output(self) -> Optional[str]:
        """Raw kernel thermal level, or None."""
        pass

    # ==========================================
    # Utility Methods
    # ==========================================

    def _run(self, command: List[str], timeout: Optional[float]) -> Optional[str]:
        """Run through the injected runner; stdout on success, else None."""
        result = self._runner(command, timeout=timeout)
        if not result.get('ok'):
            return None
        return result.get('stdout', '')

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} platform={self.platform_name}>"
