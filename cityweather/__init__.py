"""City weather lookup: fetch current conditions and render them."""

__version__ = "0.1.0"

from .config import TEMPERATURE_UNIT, WEATHER_API_URL, WeatherConfig, load_config
from .display import (
    EMPTY_CITY_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    LOADING_MESSAGE,
    NOT_FOUND_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    DisplayState,
    Error,
    Loading,
    Success,
    render,
    render_text,
)
from .errors import (
    CityNotFoundError,
    CityValidationError,
    ConfigError,
    WeatherApiError,
    WeatherClientError,
    WeatherConnectionError,
    WeatherPayloadError,
    WeatherTimeout,
    WeatherTransportError,
)
from .http import WeatherHttpClient
from .protocol import WeatherReport, interpret_response, normalize_status
from .session import OutputRegion, WeatherLookup

__all__ = [
    "EMPTY_CITY_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
    "LOADING_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "TEMPERATURE_UNIT",
    "TRANSPORT_ERROR_MESSAGE",
    "WEATHER_API_URL",
    "CityNotFoundError",
    "CityValidationError",
    "ConfigError",
    "DisplayState",
    "Error",
    "Loading",
    "OutputRegion",
    "Success",
    "WeatherApiError",
    "WeatherClientError",
    "WeatherConfig",
    "WeatherConnectionError",
    "WeatherHttpClient",
    "WeatherLookup",
    "WeatherPayloadError",
    "WeatherReport",
    "WeatherTimeout",
    "WeatherTransportError",
    "__version__",
    "interpret_response",
    "load_config",
    "normalize_status",
    "render",
    "render_text",
]
