"""Built-in cleanup events served by the seed event source."""

from shoresquad.models.event import Event


def default_initial_events() -> list[Event]:
    """First page of events. Fresh objects on every call."""
    return [
        Event(
            id=1,
            title="Pasir Ris Beach Cleanup",
            date_label="Dec 15",
            location_label="Pasir Ris Beach, Singapore",
            participant_count=18,
            weather_badge="☀️ 26°C",
            category="weekend",
            featured=True,
        ),
        Event(
            id=2,
            title="East Coast Park Morning Clean",
            date_label="Dec 18",
            location_label="East Coast Park, Singapore",
            participant_count=8,
            weather_badge="🌤️ 26°C",
            category="today",
        ),
        Event(
            id=3,
            title="Changi Beach Environmental Action",
            date_label="Dec 20",
            location_label="Changi Beach, Singapore",
            participant_count=15,
            weather_badge="⛅ 23°C",
            category="nearby",
        ),
    ]


def default_more_events() -> list[Event]:
    """The "load more" page."""
    return [
        Event(
            id=4,
            title="Marina Bay Sunrise Cleanup",
            date_label="Dec 22",
            location_label="Marina Bay, Singapore",
            participant_count=6,
            weather_badge="🌅 25°C",
            category="weekend",
        ),
        Event(
            id=5,
            title="Pulau Ubin Adventure Clean",
            date_label="Dec 25",
            location_label="Pulau Ubin, Singapore",
            participant_count=20,
            weather_badge="☀️ 27°C",
            category="nearby",
        ),
    ]
