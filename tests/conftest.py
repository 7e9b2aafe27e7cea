"""Pytest configuration and fixtures for cityweather tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from cityweather.config import WeatherConfig
from cityweather.http import WeatherHttpClient

LONDON_RESPONSE: dict[str, Any] = {
    "cod": 200,
    "weather": [{"main": "Clouds"}],
    "main": {"temp": 15.4, "humidity": 72},
    "name": "London",
    "sys": {"country": "GB"},
}


@pytest.fixture
def config() -> WeatherConfig:
    """Config with a test credential and the default endpoint."""
    return WeatherConfig(api_key="test-key")


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def client(mock_session: MagicMock, config: WeatherConfig) -> WeatherHttpClient:
    """WeatherHttpClient wired to the mock session."""
    return WeatherHttpClient(mock_session, config)


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception to raise from json() call instead

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
