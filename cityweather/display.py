"""Display states for the output region and their rendering.

The output region shows exactly one of three views at a time. Each state is
an immutable value and ``render`` is a pure function of it, so whoever owns
the region can replace its whole content from a single call site.
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, select_autoescape

from .protocol import GENERIC_ERROR_MESSAGE, NOT_FOUND_MESSAGE, WeatherReport

LOADING_MESSAGE = "Loading weather data..."
EMPTY_CITY_MESSAGE = "Please enter a city name!"
TRANSPORT_ERROR_MESSAGE = (
    "Error fetching weather data! Please check your internet connection and try again."
)

__all__ = [
    "EMPTY_CITY_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
    "LOADING_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "TRANSPORT_ERROR_MESSAGE",
    "DisplayState",
    "Error",
    "Loading",
    "Success",
    "render",
    "render_page",
    "render_text",
]


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Success:
    """Weather summary for a resolved city."""

    report: WeatherReport


@dataclass(frozen=True)
class Error:
    """A user-facing error message."""

    message: str


DisplayState = Loading | Success | Error

_ENV = Environment(
    loader=PackageLoader("cityweather", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(state: DisplayState) -> str:
    """Render the HTML fragment that replaces the output region's content."""
    template = _ENV.get_template("result.html")
    return template.render(state=_template_context(state)).strip()


def render_page(state: DisplayState | None, city: str = "") -> str:
    """Render the full page with the output region filled from ``state``."""
    template = _ENV.get_template("page.html")
    result = render(state) if state is not None else ""
    return template.render(city=city, result=result)


def render_text(state: DisplayState) -> str:
    """Render the same view as plain text lines."""
    if isinstance(state, Loading):
        return LOADING_MESSAGE
    if isinstance(state, Error):
        return state.message
    report = state.report
    return "\n".join(
        [
            report.condition,
            f"{report.temperature}°C",
            f"Humidity: {report.humidity}%",
            f"City: {report.city}, {report.country}",
        ]
    )


def _template_context(state: DisplayState) -> dict[str, object]:
    if isinstance(state, Loading):
        return {"kind": "loading", "message": LOADING_MESSAGE}
    if isinstance(state, Error):
        return {"kind": "error", "message": state.message}
    return {"kind": "success", **state.report.to_dict()}
