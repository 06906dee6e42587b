"""Event catalog: the authoritative, mutable list of cleanup events."""

import logging
from collections.abc import Iterable

from shoresquad.models.common import ShoreSquadError
from shoresquad.models.event import ALL_FILTER, Event

logger = logging.getLogger(__name__)


class NotFoundError(ShoreSquadError):
    """Raised when an event id is not in the catalog."""

    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class EmptyCatalogError(ShoreSquadError):
    """Raised when the first load of a catalog supplies no events."""


class EventCatalog:
    """Owns the event list and the active filter.

    Views are always recomputed from (events, active_filter); there is no
    cached filtered list that could go stale after a mutation.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._index: dict[int, Event] = {}
        self._loaded = False
        self.active_filter = ALL_FILTER

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def load(self, initial: Iterable[Event]) -> list[Event]:
        """Replace all events and reset the filter to "all"."""
        initial = list(initial)
        if not initial and not self._loaded:
            raise EmptyCatalogError("First load supplied no events")
        self._events = []
        self._index = {}
        self._add(initial)
        self._loaded = True
        self.active_filter = ALL_FILTER
        logger.info("Catalog loaded with %d events", len(self._events))
        return self.current_view()

    def append(self, more: Iterable[Event]) -> list[Event]:
        """Add events to the end. The active filter is kept."""
        added = self._add(more)
        logger.info("Appended %d events (total %d)", added, len(self._events))
        return self.current_view()

    def set_filter(self, tag: str) -> list[Event]:
        self.active_filter = tag
        return self.current_view()

    def join(self, event_id: int) -> Event:
        """Add one participant to an event."""
        event = self.get(event_id)
        event.participant_count += 1
        logger.debug(
            "Joined event %d, now %d participants", event_id, event.participant_count
        )
        return event

    def get(self, event_id: int) -> Event:
        try:
            return self._index[event_id]
        except KeyError:
            raise NotFoundError(event_id) from None

    def current_view(self) -> list[Event]:
        if self.active_filter == ALL_FILTER:
            return list(self._events)
        return [e for e in self._events if e.category == self.active_filter]

    def featured(self) -> Event | None:
        """First featured event in stored order."""
        return next((e for e in self._events if e.featured), None)

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(e.category for e in self._events))

    def _add(self, events: Iterable[Event]) -> int:
        added = 0
        for event in events:
            if event.id in self._index:
                logger.warning("Skipping duplicate event id %d", event.id)
                continue
            self._events.append(event)
            self._index[event.id] = event
            added += 1
        return added
