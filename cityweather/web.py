"""aiohttp page serving the city input, search button and result region.

The form submits on button click and on Enter inside the input, so both
triggers reach the same handler. Each page request gets its own output
region; the HTTP client and its ClientSession are shared by the app.
"""

from __future__ import annotations

import logging

import aiohttp
from aiohttp import web

from .config import WeatherConfig
from .display import render_page
from .http import WeatherHttpClient
from .session import WeatherLookup

_LOGGER = logging.getLogger(__name__)

CLIENT_KEY = web.AppKey("weather_client", WeatherHttpClient)
CONFIG_KEY = web.AppKey("weather_config", WeatherConfig)
SESSION_KEY = web.AppKey("client_session", aiohttp.ClientSession)

CITY_PARAM = "city"


async def _lookup(request: web.Request, city: str) -> WeatherLookup:
    lookup = WeatherLookup(request.app[CLIENT_KEY])
    await lookup.submit(city)
    return lookup


async def handle_page(request: web.Request) -> web.Response:
    """Render the page, running a lookup when the form was submitted."""
    if CITY_PARAM not in request.query:
        return web.Response(text=render_page(None), content_type="text/html")

    city = request.query[CITY_PARAM]
    lookup = await _lookup(request, city)
    return web.Response(
        text=render_page(lookup.region.state, city=city),
        content_type="text/html",
    )


async def handle_fragment(request: web.Request) -> web.Response:
    """Render only the output region's content for a city."""
    lookup = await _lookup(request, request.query.get(CITY_PARAM, ""))
    return web.Response(text=lookup.region.html, content_type="text/html")


def create_app(
    config: WeatherConfig,
    session: aiohttp.ClientSession | None = None,
) -> web.Application:
    """Create the page application.

    Args:
        config: Weather provider and server settings.
        session: ClientSession to use for outbound requests. When omitted the
            app creates one on startup and closes it on cleanup.
    """
    app = web.Application()
    app[CONFIG_KEY] = config
    if session is not None:
        app[SESSION_KEY] = session
        app[CLIENT_KEY] = WeatherHttpClient(session, config)
    else:
        app.cleanup_ctx.append(_client_session_ctx)

    app.router.add_get("/", handle_page)
    app.router.add_get("/weather", handle_fragment)
    return app


async def _client_session_ctx(app: web.Application):
    session = aiohttp.ClientSession()
    app[SESSION_KEY] = session
    app[CLIENT_KEY] = WeatherHttpClient(session, app[CONFIG_KEY])
    _LOGGER.debug("Weather client session opened")
    yield
    await session.close()
    _LOGGER.debug("Weather client session closed")
