"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class OptionError(Exception):
    """Raised when the command line contains an unknown or misplaced word."""


class MissingLocationError(Exception):
    """Raised when no location argument is given and WET_LOCATION is unset."""


class TransportError(Exception):
    """Raised when an HTTP request fails or returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WeatherServiceError(Exception):
    """Raised when the weather service answers but cannot satisfy the request."""


class LocationNotFoundError(WeatherServiceError):
    """Raised when a location search yields no provider location id."""
