class ShapeshiftError(Exception):
    """Base class for layout failures."""


class ConfigurationError(ShapeshiftError, ValueError):
    """Raised when gutters or the item width make columns impossible."""


class MeasurementUnavailable(ShapeshiftError):
    """Raised when a single item cannot be measured."""

    def __init__(self, index: int, what: str, value):
        super().__init__(f"Item {index}: invalid {what} measurement {value!r}")
        self.index = index
        self.what = what
        self.value = value


class UnknownCommandError(ShapeshiftError, ValueError):
    """Raised for command names outside the public surface."""
