"""Error types for city weather lookups."""

from __future__ import annotations


class WeatherClientError(Exception):
    """Base error for weather lookup failures."""


class ConfigError(WeatherClientError):
    """Invalid or unreadable configuration."""


class CityValidationError(WeatherClientError):
    """City name was empty after trimming."""


class WeatherTransportError(WeatherClientError):
    """The weather request did not produce a usable response body."""


class WeatherTimeout(WeatherTransportError):
    """Timeout while waiting for the weather provider."""


class WeatherConnectionError(WeatherTransportError):
    """Network connection to the weather provider failed."""


class WeatherPayloadError(WeatherTransportError):
    """Response body could not be decoded or lacks required fields."""


class WeatherApiError(WeatherClientError):
    """Provider reported a non-success status in the response body."""

    def __init__(self, status: int | None, message: str) -> None:
        super().__init__(message)
        self.status = status


class CityNotFoundError(WeatherApiError):
    """Provider reported that the city does not exist (status 404)."""

    def __init__(self, message: str) -> None:
        super().__init__(404, message)
