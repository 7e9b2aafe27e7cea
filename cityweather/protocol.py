"""Interpretation of current-weather response bodies.

The provider reports its status in the body's ``cod`` field, sometimes as a
number (200) and sometimes as text ("404"). The status is normalized to an
int once, right after decoding, and every comparison uses that value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .errors import CityNotFoundError, WeatherApiError, WeatherPayloadError

STATUS_OK = 200
STATUS_NOT_FOUND = 404

NOT_FOUND_MESSAGE = "City not found! Please check the spelling and try again."
GENERIC_ERROR_MESSAGE = "An error occurred while fetching weather data."


@dataclass(frozen=True)
class WeatherReport:
    """Display fields extracted from a successful response.

    Attributes:
        condition: Condition label of the first weather entry (e.g. "Clouds").
        temperature: Temperature rounded to the nearest integer, in Celsius.
        humidity: Relative humidity percentage.
        city: City name as resolved by the provider.
        country: Country code (e.g. "GB").
    """

    condition: str
    temperature: int
    humidity: int
    city: str
    country: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "condition": self.condition,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "city": self.city,
            "country": self.country,
        }


def normalize_status(cod: Any) -> int | None:
    """Coerce the provider's ``cod`` field to an int.

    Text must be the exact decimal form: " 200 " and "0200" are not 200.
    Returns None when the value is missing or not a whole number.
    """
    if isinstance(cod, bool):
        return None
    if isinstance(cod, int):
        return cod
    if isinstance(cod, float):
        return int(cod) if cod.is_integer() else None
    if isinstance(cod, str):
        if cod.isascii() and cod.isdigit() and cod == str(int(cod)):
            return int(cod)
    return None


def round_temperature(value: float) -> int:
    """Round to the nearest integer with halves going up (15.5 -> 16, -2.5 -> -2).

    Raises:
        WeatherPayloadError: If the value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise WeatherPayloadError(
            f"Weather response has a non-finite temperature: {value!r}"
        )
    return math.floor(value + 0.5)


def interpret_response(data: dict[str, Any]) -> WeatherReport:
    """Classify a decoded response body and extract its display fields.

    Raises:
        CityNotFoundError: Status is 404.
        WeatherApiError: Status is anything other than 200.
        WeatherPayloadError: Status is 200 but required fields are missing or
            the temperature is not a finite number.
    """
    status = normalize_status(data.get("cod"))
    if status == STATUS_NOT_FOUND:
        raise CityNotFoundError(NOT_FOUND_MESSAGE)
    if status != STATUS_OK:
        raise WeatherApiError(status, GENERIC_ERROR_MESSAGE)

    try:
        main = data["main"]
        return WeatherReport(
            condition=data["weather"][0]["main"],
            temperature=round_temperature(main["temp"]),
            humidity=main["humidity"],
            city=data["name"],
            country=data["sys"]["country"],
        )
    except (KeyError, IndexError, TypeError) as err:
        raise WeatherPayloadError(
            f"Weather response is missing required fields: {err!r}"
        ) from err
