"""Configuration for the weather lookup.

The endpoint, credential and unit setting are fixed for the lifetime of the
process. Values come from the module defaults, an optional YAML file and
finally the environment:

    api_url: https://api.openweathermap.org/data/2.5/weather
    api_key: <openweathermap key>
    request_timeout: 10
    host: 127.0.0.1
    port: 8080
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

_LOGGER = logging.getLogger(__name__)

WEATHER_API_URL = "https://api.openweathermap.org/data/2.5/weather"
TEMPERATURE_UNIT = "metric"
DEFAULT_API_KEY = ""
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

ENV_API_KEY = "CITYWEATHER_API_KEY"
ENV_API_URL = "CITYWEATHER_API_URL"


@dataclass(frozen=True)
class WeatherConfig:
    """Read-only settings for the weather provider and the page server.

    Attributes:
        api_url: Base endpoint of the current-weather API.
        api_key: Static credential sent as ``appid``.
        units: Unit specifier sent as ``units``. Only ``metric`` is supported.
        request_timeout: Total request timeout in seconds, None for no timeout.
        host: Interface the page server binds to.
        port: Port the page server listens on.
    """

    api_url: str = WEATHER_API_URL
    api_key: str = DEFAULT_API_KEY
    units: str = TEMPERATURE_UNIT
    request_timeout: float | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if self.units != TEMPERATURE_UNIT:
            raise ConfigError(
                f"Unsupported units {self.units!r}, only {TEMPERATURE_UNIT!r} is allowed"
            )
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigError("request_timeout must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> WeatherConfig:
        """Build a config from a parsed YAML mapping."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        try:
            return cls(**dict(data))
        except TypeError as err:
            raise ConfigError(f"Invalid config: {err}") from err


def load_config(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> WeatherConfig:
    """Load configuration from an optional YAML file and the environment.

    Args:
        path: YAML file to read. Missing path means defaults only.
        environ: Environment mapping, defaults to ``os.environ``.

    Returns:
        The resolved WeatherConfig.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    env = os.environ if environ is None else environ
    config = WeatherConfig()

    if path is not None:
        config_path = Path(path)
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except OSError as err:
            raise ConfigError(f"Cannot read config file {config_path}") from err
        except yaml.YAMLError as err:
            raise ConfigError(f"Invalid YAML in {config_path}") from err
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        config = WeatherConfig.from_mapping(raw)

    overrides: dict[str, str] = {}
    if env.get(ENV_API_KEY):
        overrides["api_key"] = env[ENV_API_KEY]
    if env.get(ENV_API_URL):
        overrides["api_url"] = env[ENV_API_URL]
    if overrides:
        config = replace(config, **overrides)

    if not config.api_key:
        _LOGGER.warning(
            "No API key configured, set %s or api_key in the config file",
            ENV_API_KEY,
        )
    return config
