"""Tests for response interpretation and status normalization."""

from __future__ import annotations

import json
import math
from typing import Any

import pytest

from cityweather.errors import CityNotFoundError, WeatherApiError, WeatherPayloadError
from cityweather.protocol import (
    GENERIC_ERROR_MESSAGE,
    NOT_FOUND_MESSAGE,
    WeatherReport,
    interpret_response,
    normalize_status,
    round_temperature,
)

from .conftest import LONDON_RESPONSE


class TestNormalizeStatus:
    """The cod field arrives as a number or as text."""

    @pytest.mark.parametrize(
        ("cod", "expected"),
        [
            (200, 200),
            ("200", 200),
            ("404", 404),
            (404, 404),
            (401.0, 401),
            ("500", 500),
        ],
    )
    def test_numeric_and_text_forms(self, cod: Any, expected: int) -> None:
        assert normalize_status(cod) == expected

    @pytest.mark.parametrize(
        "cod",
        [
            None, "", "OK", "2OO", True, 200.5, "²", [200],
            " 200 ", "0200", "+200", "200\n",
        ],
    )
    def test_unusable_values(self, cod: Any) -> None:
        assert normalize_status(cod) is None


class TestRoundTemperature:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(15.4, 15), (15.5, 16), (15.6, 16), (-2.5, -2), (-2.6, -3), (0, 0), (22.5, 23)],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert round_temperature(value) == expected

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises_payload_error(self, value: float) -> None:
        with pytest.raises(WeatherPayloadError, match="non-finite temperature"):
            round_temperature(value)


class TestInterpretResponse:
    """Classification of decoded response bodies."""

    def test_london_example(self) -> None:
        report = interpret_response(LONDON_RESPONSE)

        assert report == WeatherReport(
            condition="Clouds",
            temperature=15,
            humidity=72,
            city="London",
            country="GB",
        )

    def test_text_status_200(self) -> None:
        report = interpret_response({**LONDON_RESPONSE, "cod": "200"})
        assert report.city == "London"

    def test_first_condition_is_used(self) -> None:
        data = {**LONDON_RESPONSE, "weather": [{"main": "Rain"}, {"main": "Mist"}]}
        assert interpret_response(data).condition == "Rain"

    @pytest.mark.parametrize("cod", [404, "404"])
    def test_not_found(self, cod: Any) -> None:
        with pytest.raises(CityNotFoundError) as exc_info:
            interpret_response({"cod": cod})
        assert str(exc_info.value) == NOT_FOUND_MESSAGE
        assert exc_info.value.status == 404

    def test_not_found_ignores_other_fields(self) -> None:
        with pytest.raises(CityNotFoundError):
            interpret_response({**LONDON_RESPONSE, "cod": "404"})

    @pytest.mark.parametrize("cod", [401, "401", 429, "500", None, "bogus"])
    def test_other_statuses_are_generic(self, cod: Any) -> None:
        with pytest.raises(WeatherApiError) as exc_info:
            interpret_response({**LONDON_RESPONSE, "cod": cod})
        assert not isinstance(exc_info.value, CityNotFoundError)
        assert str(exc_info.value) == GENERIC_ERROR_MESSAGE

    def test_missing_status_is_generic(self) -> None:
        data = {k: v for k, v in LONDON_RESPONSE.items() if k != "cod"}
        with pytest.raises(WeatherApiError) as exc_info:
            interpret_response(data)
        assert exc_info.value.status is None

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_temperature_is_payload_error(self, literal: str) -> None:
        data = json.loads(
            '{"cod": 200, "weather": [{"main": "Clouds"}], '
            f'"main": {{"temp": {literal}, "humidity": 72}}, '
            '"name": "London", "sys": {"country": "GB"}}'
        )
        with pytest.raises(WeatherPayloadError, match="non-finite temperature"):
            interpret_response(data)

    @pytest.mark.parametrize(
        "data",
        [
            {"cod": 200},
            {**LONDON_RESPONSE, "weather": []},
            {**LONDON_RESPONSE, "main": {"humidity": 50}},
            {**LONDON_RESPONSE, "sys": None},
        ],
    )
    def test_success_with_missing_fields(self, data: dict[str, Any]) -> None:
        with pytest.raises(WeatherPayloadError, match="missing required fields"):
            interpret_response(data)

    def test_report_to_dict(self) -> None:
        assert interpret_response(LONDON_RESPONSE).to_dict() == {
            "condition": "Clouds",
            "temperature": 15,
            "humidity": 72,
            "city": "London",
            "country": "GB",
        }
