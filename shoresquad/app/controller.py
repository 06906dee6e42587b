"""App controller: loads forecast and events, and runs UI commands.

Weather and events are independent LOADING -> READY | ERROR state machines.
Commands are serialized through one asyncio lock so each runs to completion
before the next one starts.
"""

import asyncio
import logging
from typing import Protocol

from shoresquad.app.notifications import NotificationCenter
from shoresquad.app.signup import SignupError, validate_email
from shoresquad.config.schema import AppConfig
from shoresquad.events.catalog import EmptyCatalogError, EventCatalog, NotFoundError
from shoresquad.events.source import EventSource, build_event_source
from shoresquad.models.common import Phase
from shoresquad.models.event import Event
from shoresquad.models.forecast import Forecast
from shoresquad.models.notification import NotificationLevel
from shoresquad.weather.client import (
    EmptyPayload,
    ProviderUnavailable,
    WeatherClient,
)
from shoresquad.weather.normalizer import ForecastNormalizer

logger = logging.getLogger(__name__)

WEATHER_UNAVAILABLE_MSG = "Weather unavailable. Tap to retry."
EVENTS_FAILED_MSG = "Failed to load events. Please try again later."
LOAD_MORE_FAILED_MSG = "Couldn't load more events. Please try again."
LOADED_MORE_MSG = "Loaded more cleanup events! 🏄‍♀️"
NO_MORE_MSG = "No more cleanup events right now."


class WeatherProvider(Protocol):
    async def fetch_forecast(self) -> dict: ...


class AppController:
    def __init__(
        self,
        weather_provider: WeatherProvider,
        event_source: EventSource,
        config: AppConfig | None = None,
        normalizer: ForecastNormalizer | None = None,
    ):
        self.config = config or AppConfig()
        self.weather_provider = weather_provider
        self.event_source = event_source
        self.normalizer = normalizer or ForecastNormalizer(
            self.config.weather, self.config.defaults
        )
        self.catalog = EventCatalog()
        self.notifications = NotificationCenter(self.config.notifications.max_active)

        self.weather_phase = Phase.LOADING
        self.events_phase = Phase.LOADING
        self.forecast: Forecast | None = None
        self.loading_more = False
        self._commands = asyncio.Lock()

    @classmethod
    def from_config(cls, config: AppConfig) -> "AppController":
        return cls(
            WeatherClient(config.weather),
            build_event_source(config.events),
            config=config,
        )

    async def close(self) -> None:
        if isinstance(self.weather_provider, WeatherClient):
            await self.weather_provider.close()

    async def init(self) -> None:
        """Start both subsystems; neither blocks the other."""
        self.weather_phase = Phase.LOADING
        self.events_phase = Phase.LOADING
        await asyncio.gather(self.refresh_weather(), self.load_events())
        logger.info(
            "Init complete: weather=%s events=%s (%d events)",
            self.weather_phase, self.events_phase, len(self.catalog),
        )

    # --- Weather ---

    async def refresh_weather(self) -> bool:
        """Fetch and normalize the forecast. Returns True when READY."""
        self.weather_phase = Phase.LOADING
        try:
            raw = await self.weather_provider.fetch_forecast()
            if not _has_items(raw):
                raise EmptyPayload("Forecast payload has no items")
            forecast = self.normalizer.normalize(raw)
        except EmptyPayload as e:
            logger.warning("Weather unavailable (empty payload): %s", e)
            return self._weather_failed()
        except ProviderUnavailable as e:
            logger.warning(
                "Weather unavailable (provider error, status=%s): %s",
                e.status_code, e,
            )
            return self._weather_failed()
        except Exception:
            logger.exception("Weather unavailable (unexpected failure)")
            return self._weather_failed()

        self.forecast = forecast
        self.weather_phase = Phase.READY
        return True

    def _weather_failed(self) -> bool:
        self.forecast = None
        self.weather_phase = Phase.ERROR
        self.notifications.push(
            WEATHER_UNAVAILABLE_MSG, NotificationLevel.ERROR, retryable=True
        )
        return False

    # --- Events ---

    @property
    def events_empty(self) -> bool:
        return self.events_phase == Phase.READY and len(self.catalog) == 0

    def current_view(self) -> list[Event]:
        return self.catalog.current_view()

    async def load_events(self) -> None:
        """Fetch the first page of events into the catalog."""
        had_events = len(self.catalog) > 0
        try:
            events = await self.event_source.fetch_initial()
            self.catalog.load(events)
        except EmptyCatalogError:
            logger.info("No events on first load, showing empty state")
        except Exception:
            logger.exception("Failed to load events")
            self.notifications.push(EVENTS_FAILED_MSG, NotificationLevel.ERROR)
            if not had_events:
                self.events_phase = Phase.ERROR
                return
        self.events_phase = Phase.READY

    def _accepting(self, command: str) -> bool:
        if self.events_phase != Phase.READY:
            logger.warning(
                "Ignoring %s while events are %s", command, self.events_phase
            )
            return False
        return True

    async def set_filter(self, tag: str) -> list[Event] | None:
        if not self._accepting("set_filter"):
            return None
        async with self._commands:
            return self.catalog.set_filter(tag)

    async def join(self, event_id: int) -> Event | None:
        """Join an event. Unknown ids are ignored."""
        if not self._accepting("join"):
            return None
        async with self._commands:
            await self._latency(self.config.events.join_delay_ms)
            try:
                event = self.catalog.join(event_id)
            except NotFoundError:
                logger.warning("Join ignored: event %d not in catalog", event_id)
                return None
            self.notifications.push(
                f'Successfully joined "{event.title}"! 🌊', NotificationLevel.SUCCESS
            )
            return event

    async def load_more(self) -> list[Event] | None:
        """Append the next page of events without clearing the current view."""
        if not self._accepting("load_more"):
            return None
        async with self._commands:
            self.loading_more = True
            try:
                more = await self.event_source.fetch_more()
            except Exception:
                logger.exception("Failed to load more events")
                self.notifications.push(LOAD_MORE_FAILED_MSG, NotificationLevel.ERROR)
                return self.catalog.current_view()
            finally:
                self.loading_more = False

            view = self.catalog.append(more)
            if more:
                self.notifications.push(LOADED_MORE_MSG, NotificationLevel.INFO)
            else:
                self.notifications.push(NO_MORE_MSG, NotificationLevel.INFO)
            return view

    # --- Squad signup ---

    async def signup(self, email: str) -> str | None:
        """Sign up for the squad. Returns an error message, or None on success."""
        try:
            email = validate_email(email)
        except SignupError as e:
            return str(e)
        await self._latency(self.config.events.join_delay_ms)
        self.notifications.push(
            f"Welcome to ShoreSquad, {email}! 🚀", NotificationLevel.SUCCESS
        )
        return None

    def dismiss_notification(self, notification_id: int) -> bool:
        return self.notifications.dismiss(notification_id)

    @staticmethod
    async def _latency(delay_ms: int) -> None:
        if delay_ms:
            await asyncio.sleep(delay_ms / 1000)


def _has_items(raw: object) -> bool:
    if not isinstance(raw, dict):
        return False
    items = raw.get("items")
    return isinstance(items, list) and len(items) > 0
