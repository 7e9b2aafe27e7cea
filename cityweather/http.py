"""HTTP client for the OpenWeatherMap current-weather endpoint."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import aiohttp

from .config import WeatherConfig
from .errors import (
    WeatherConnectionError,
    WeatherPayloadError,
    WeatherTimeout,
)


class WeatherHttpClient:
    """HTTP client wrapper for the current-weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: WeatherConfig,
    ) -> None:
        self._session = session
        self._config = config

    @property
    def config(self) -> WeatherConfig:
        return self._config

    def build_url(self, city: str) -> str:
        """Build the request URL for a city.

        The city is percent-encoded the way a browser's encodeURIComponent
        would, so "São Paulo, BR" becomes "S%C3%A3o%20Paulo%2C%20BR".
        """
        return (
            f"{self._config.api_url}"
            f"?q={quote(city, safe='')}"
            f"&appid={quote(self._config.api_key, safe='')}"
            f"&units={self._config.units}"
        )

    async def fetch_weather(self, city: str) -> dict[str, Any]:
        """Issue one GET for the city and return the decoded JSON body.

        The body is decoded whatever the HTTP status is: the provider reports
        errors such as an unknown city inside the body's ``cod`` field.

        Raises:
            WeatherTimeout: If the request times out.
            WeatherConnectionError: If the network request fails.
            WeatherPayloadError: If the body is not a JSON object.
        """
        url = self.build_url(city)
        try:
            async with self._session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self._config.request_timeout),
            ) as resp:
                data = await resp.json(content_type=None)
        except TimeoutError as err:
            raise WeatherTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError("Weather request failed") from err
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise WeatherPayloadError("Weather response is not valid JSON") from err

        if not isinstance(data, dict):
            raise WeatherPayloadError("Weather response is not a JSON object")
        return data
