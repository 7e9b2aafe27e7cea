"""Lookup controller: input capture, fetch, interpretation and rendering.

A submission walks through a fixed sequence:

    trim input -> Loading -> fetch -> interpret -> Success | Error

Every step that resolves a request ends in ``WeatherLookup._show``, the only
place that writes to the output region. Requests are never cancelled. When a
second city is submitted before the first one resolves, whichever response
arrives last is what the region shows ("last response wins").
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable

from .display import (
    EMPTY_CITY_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    DisplayState,
    Error,
    Loading,
    Success,
    render,
)
from .errors import (
    CityNotFoundError,
    CityValidationError,
    WeatherApiError,
    WeatherTransportError,
)
from .http import WeatherHttpClient
from .protocol import interpret_response

_LOGGER = logging.getLogger(__name__)

MAX_REGION_HISTORY = 32


class OutputRegion:
    """The single render target holding one display state at a time.

    ``replace`` overwrites the state and its rendered HTML together; nothing
    is ever merged into existing content.
    """

    def __init__(self, *, history_size: int = MAX_REGION_HISTORY) -> None:
        self._state: DisplayState | None = None
        self._html = ""
        self._history: deque[DisplayState] = deque(maxlen=history_size)
        self._callbacks: list[Callable[[DisplayState], None]] = []

    @property
    def state(self) -> DisplayState | None:
        """Currently rendered state, None before the first render."""
        return self._state

    @property
    def html(self) -> str:
        return self._html

    @property
    def history(self) -> list[DisplayState]:
        """States rendered so far, oldest first."""
        return list(self._history)

    def on_state_changed(self, callback: Callable[[DisplayState], None]) -> None:
        """Register a callback invoked after every replacement."""
        self._callbacks.append(callback)

    def replace(self, state: DisplayState) -> None:
        self._html = render(state)
        self._state = state
        self._history.append(state)
        for callback in self._callbacks:
            callback(state)


def validate_city(raw_text: str) -> str:
    """Trim the input and reject empty city names.

    Raises:
        CityValidationError: If nothing is left after trimming.
    """
    city = raw_text.strip()
    if not city:
        raise CityValidationError(EMPTY_CITY_MESSAGE)
    return city


class WeatherLookup:
    """Runs weather lookups and renders their outcome into an output region.

    Usage:
        lookup = WeatherLookup(WeatherHttpClient(session, config))
        await lookup.submit("London")
        print(lookup.region.html)
    """

    def __init__(
        self,
        client: WeatherHttpClient,
        region: OutputRegion | None = None,
    ) -> None:
        self._client = client
        self.region = region if region is not None else OutputRegion()

        self._issued = 0
        self._tasks: set[asyncio.Task[DisplayState]] = set()

    @property
    def latest_request_id(self) -> int:
        """Id of the most recently issued network request, 0 if none."""
        return self._issued

    def on_state_changed(self, callback: Callable[[DisplayState], None]) -> None:
        """Register a callback for display state changes."""
        self.region.on_state_changed(callback)

    async def submit(self, raw_text: str) -> DisplayState:
        """Handle one submission of the city input.

        Returns the state the submission resolved to. Errors are rendered,
        never raised.
        """
        try:
            city = validate_city(raw_text)
        except CityValidationError as err:
            _LOGGER.debug("Rejected empty city input")
            return self._show(Error(str(err)))

        self._issued += 1
        request_id = self._issued
        self._show(Loading())
        state = await self._resolve(city)
        if request_id != self._issued:
            _LOGGER.debug(
                "Request %d for %r resolved after newer request %d, overwriting",
                request_id,
                city,
                self._issued,
            )
        return self._show(state)

    def submit_nowait(self, raw_text: str) -> asyncio.Task[DisplayState]:
        """Schedule a submission on the running loop and return its task.

        Mirrors an event handler: the caller does not wait for the request,
        and the result is rendered when the task completes.
        """
        task = asyncio.get_running_loop().create_task(self.submit(raw_text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _resolve(self, city: str) -> DisplayState:
        try:
            data = await self._client.fetch_weather(city)
            report = interpret_response(data)
        except CityNotFoundError as err:
            _LOGGER.info("City not found: %r", city)
            return Error(str(err))
        except WeatherApiError as err:
            _LOGGER.info("Weather API returned status %s for %r", err.status, city)
            return Error(str(err))
        except WeatherTransportError:
            _LOGGER.exception("Weather API error for %r", city)
            return Error(TRANSPORT_ERROR_MESSAGE)
        _LOGGER.debug("Weather for %r: %s", city, report)
        return Success(report)

    def _show(self, state: DisplayState) -> DisplayState:
        self.region.replace(state)
        return state
