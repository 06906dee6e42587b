"""Event sources: where the catalog's records come from."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Protocol

import yaml

from shoresquad.config.defaults import default_initial_events, default_more_events
from shoresquad.config.schema import EventsConfig, EventSourceKind
from shoresquad.models.common import ShoreSquadError
from shoresquad.models.event import Event

logger = logging.getLogger(__name__)


class EventSourceError(ShoreSquadError):
    """Raised when an event source cannot produce records."""


class EventSource(Protocol):
    async def fetch_initial(self) -> list[Event]: ...

    async def fetch_more(self) -> list[Event]: ...


class PagedEventSource:
    """Serves a first page, then each "more" page once, with simulated latency."""

    def __init__(
        self,
        initial: list[Event],
        more_pages: list[list[Event]],
        delay_ms: int = 0,
    ):
        self._initial = initial
        self._more_pages = more_pages
        self._next_page = 0
        self.delay_ms = delay_ms

    async def fetch_initial(self) -> list[Event]:
        await self._latency()
        self._next_page = 0
        return list(self._initial)

    async def fetch_more(self) -> list[Event]:
        await self._latency()
        if self._next_page >= len(self._more_pages):
            logger.info("No more event pages")
            return []
        page = self._more_pages[self._next_page]
        self._next_page += 1
        return list(page)

    async def _latency(self) -> None:
        if self.delay_ms:
            await asyncio.sleep(self.delay_ms / 1000)


class SeedEventSource(PagedEventSource):
    """Built-in demo events."""

    def __init__(self, delay_ms: int = 0):
        super().__init__(
            default_initial_events(), [default_more_events()], delay_ms=delay_ms
        )


class FileEventSource(PagedEventSource):
    """Events read from a YAML file with `initial:` and `more:` pages.

    `more` may be a single list of events or a list of pages.
    """

    def __init__(self, path: str | Path, delay_ms: int = 0):
        self.path = Path(path)
        super().__init__([], [], delay_ms=delay_ms)

    async def fetch_initial(self) -> list[Event]:
        self._initial, self._more_pages = _load_pages(self.path)
        return await super().fetch_initial()


def build_event_source(config: EventsConfig) -> PagedEventSource:
    if config.source == EventSourceKind.FILE:
        return FileEventSource(config.source_path, delay_ms=config.fetch_delay_ms)
    return SeedEventSource(delay_ms=config.fetch_delay_ms)


def parse_event(raw: dict[str, Any]) -> Event:
    """Build an Event from a record, accepting short or long field names."""
    try:
        return Event(
            id=int(raw["id"]),
            title=str(raw["title"]),
            date_label=str(raw.get("date_label", raw.get("date", ""))),
            location_label=str(raw.get("location_label", raw.get("location", ""))),
            participant_count=int(
                raw.get("participant_count", raw.get("participants", 0))
            ),
            weather_badge=str(raw.get("weather_badge", raw.get("weather", ""))),
            category=str(raw["category"]),
            featured=bool(raw.get("featured", False)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise EventSourceError(f"Invalid event record {raw!r}: {e}") from e


def _load_pages(path: Path) -> tuple[list[Event], list[list[Event]]]:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise EventSourceError(f"Cannot read events file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise EventSourceError(f"Events file {path} must contain a mapping")

    initial = [parse_event(r) for r in raw.get("initial") or []]
    more = raw.get("more") or []
    if more and all(isinstance(r, dict) for r in more):
        more = [more]
    more_pages = [[parse_event(r) for r in page] for page in more]
    return initial, more_pages
