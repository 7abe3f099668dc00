"""Errors raised by the charging station engine."""


class ChargerMapError(Exception):
    """Base class for charger map errors."""


class InvalidCoordinatesError(ChargerMapError, ValueError):
    """Latitude or longitude outside the valid range."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Invalid coordinates: latitude={latitude} must be in [-90, 90], "
            f"longitude={longitude} must be in [-180, 180]"
        )


class InvalidPowerFilterError(ChargerMapError, ValueError):
    """Power filter threshold is negative or not a number."""

    def __init__(self, power_filter: float):
        self.power_filter = power_filter
        super().__init__(f"Invalid power filter: {power_filter} kW, must be >= 0")


class StationDataError(ChargerMapError):
    """Station dataset could not be read."""
