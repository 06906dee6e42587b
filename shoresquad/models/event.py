"""Cleanup event records."""

from dataclasses import dataclass

# Reserved filter tag meaning "no restriction"; never a stored category.
ALL_FILTER = "all"


@dataclass
class Event:
    id: int
    title: str
    date_label: str
    location_label: str
    participant_count: int
    weather_badge: str
    category: str
    featured: bool = False

    def __post_init__(self) -> None:
        if self.participant_count < 0:
            raise ValueError(
                f"Event {self.id}: participant_count must be >= 0, "
                f"got {self.participant_count}"
            )
        if self.category == ALL_FILTER:
            raise ValueError(
                f"Event {self.id}: '{ALL_FILTER}' is reserved and cannot be a category"
            )
