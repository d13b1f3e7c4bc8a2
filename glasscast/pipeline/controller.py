"""Interaction controller: user input to fetch cycles and view renders."""

import asyncio
import dataclasses
import logging
from collections.abc import Callable, Coroutine
from datetime import datetime
from enum import StrEnum
from typing import Any

from glasscast.config.schema import AppConfig
from glasscast.ingest.forecast_client import ForecastClient
from glasscast.ingest.geocoding_client import GeocodingClient
from glasscast.models.common import utc_now
from glasscast.models.errors import WidgetError
from glasscast.models.location import Location
from glasscast.models.view import ViewState
from glasscast.reporting import presenter
from glasscast.signal.alignment import local_now, validate_bundle

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong."


class ControllerState(StrEnum):
    IDLE = "idle"
    SUGGESTIONS_SHOWN = "suggestions-shown"


class View:
    """The container the widget renders into.

    Holds exactly one ViewState. Every render replaces it wholesale.
    """

    def __init__(self, state: ViewState | None = None):
        self.state = state or ViewState()
        self.render_count = 0

    def render(self, state: ViewState) -> None:
        self.state = state
        self.render_count += 1


class InteractionController:
    """Wires search input, suggestion picks and outside clicks to fetch cycles.

    Must be driven from inside a running asyncio loop. Fetch cycles and
    suggestion requests run as tasks so input keeps being accepted while
    they are outstanding. Overlapping cycles are not cancelled; a cycle that
    finishes after a newer one has started does not render.
    """

    def __init__(
        self,
        geocoder: GeocodingClient,
        forecaster: ForecastClient,
        view: View | None = None,
        config: AppConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.view = view or View()
        self.config = config or AppConfig()
        self.clock = clock
        self.state = ControllerState.IDLE
        self._debounce: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()
        self._cycle_token = 0
        self._suggest_token = 0

    @classmethod
    def from_config(
        cls, config: AppConfig, view: View | None = None
    ) -> "InteractionController":
        api = config.api
        geocoder = GeocodingClient(
            base_url=api.geocoding_url,
            timeout=api.timeout_seconds,
            language=api.language,
            min_query_length=config.widget.min_query_length,
            suggestion_limit=config.widget.suggestion_limit,
        )
        forecaster = ForecastClient(base_url=api.forecast_url, timeout=api.timeout_seconds)
        return cls(geocoder, forecaster, view=view, config=config)

    # --- Events ---

    def start(self) -> asyncio.Task:
        """Load the default city; runs once when the widget is shown."""
        return self._schedule(self._run_cycle(query=self.config.widget.default_city))

    def submit(self, text: str) -> asyncio.Task | None:
        query = text.strip()
        if not query:
            return None
        return self._schedule(self._run_cycle(query=query))

    def input(self, text: str) -> None:
        """Record a keystroke and restart the suggestion debounce timer."""
        self._render(input_value=text)
        self._suggest_token += 1
        if self._debounce is not None:
            self._debounce.cancel()
        delay = self.config.widget.debounce_ms / 1000
        loop = asyncio.get_running_loop()
        self._debounce = loop.call_later(delay, self._on_debounce, text)

    def pick(self, location: Location) -> asyncio.Task:
        """Fetch for a picked suggestion using its coordinates as-is."""
        return self._schedule(self._run_cycle(location=location))

    def click_outside(self) -> None:
        self._suggest_token += 1
        self._hide_suggestions()

    # --- Lifecycle ---

    async def wait_idle(self) -> None:
        """Wait for every outstanding cycle and suggestion request."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        if self._debounce is not None:
            self._debounce.cancel()
            self._debounce = None

    # --- Internals ---

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _render(self, **changes: Any) -> None:
        self.view.render(dataclasses.replace(self.view.state, **changes))

    def _hide_suggestions(self) -> None:
        self.state = ControllerState.IDLE
        if self.view.state.suggestions_visible:
            self._render(suggestions=[], suggestions_visible=False)

    def _on_debounce(self, text: str) -> None:
        self._debounce = None
        query = text.strip()
        if len(query) < self.config.widget.min_query_length:
            self._hide_suggestions()
            return
        self._schedule(self._load_suggestions(query))

    async def _load_suggestions(self, query: str) -> None:
        token = self._suggest_token
        try:
            locations = await self.geocoder.suggest(query)
        except WidgetError as e:
            logger.warning("Suggestions for %r unavailable: %s", query, e)
            locations = []

        if token != self._suggest_token:
            logger.debug("Suggestions for %r superseded, not rendering", query)
            return
        if not locations:
            self._hide_suggestions()
            return
        self._render(
            suggestions=presenter.suggestion_rows(locations),
            suggestions_visible=True,
        )
        self.state = ControllerState.SUGGESTIONS_SHOWN

    async def _run_cycle(
        self, query: str | None = None, location: Location | None = None
    ) -> None:
        """Resolve (unless a location is given), fetch and render."""
        self._cycle_token += 1
        token = self._cycle_token
        self._suggest_token += 1
        self.state = ControllerState.IDLE
        self._render(
            current=presenter.loading_panel(),
            suggestions=[],
            suggestions_visible=False,
            input_value="",
        )
        logger.info("Cycle %d started for %s", token, location.name if location else query)

        try:
            if location is None:
                location = await self.geocoder.resolve(query)
            bundle = await self.forecaster.fetch_forecast(
                location.latitude, location.longitude
            )
            validate_bundle(bundle)
        except WidgetError as e:
            if token == self._cycle_token:
                logger.info("Cycle %d failed: %s", token, e)
                self._render(current=presenter.error_panel(str(e)))
            return
        except Exception:
            logger.exception("Cycle %d crashed", token)
            if token == self._cycle_token:
                self._render(current=presenter.error_panel(GENERIC_ERROR_MESSAGE))
            return

        if token != self._cycle_token:
            logger.debug("Cycle %d superseded by %d, not rendering", token, self._cycle_token)
            return

        now = local_now(bundle.utc_offset_seconds, self.clock())
        background, background_url = presenter.background_for(
            bundle.current.weather_code, self.config.backgrounds
        )
        self._render(
            current=presenter.current_panel(location.name, bundle.current),
            hourly=presenter.hourly_panel(
                bundle.hourly, now, self.config.widget.hourly_window
            ),
            daily=presenter.daily_panel(bundle.daily),
            background=background,
            background_url=background_url,
        )
        logger.info(
            "Cycle %d rendered %s (%s)", token, location.name, background.value
        )
