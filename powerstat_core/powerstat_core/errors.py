"""Error types surfaced by the collectors."""


class TelemetryError(Exception):
    """Base class for collector errors."""
    pass


class NoBatteryDataError(TelemetryError):
    """Raised when no battery source produced any record."""

    def __init__(self, message: str = "no battery data found"):
        super().__init__(message)


class BatteryCollectionError(TelemetryError):
    """Raised when an unexpected fault occurs while collecting batteries."""
    pass
