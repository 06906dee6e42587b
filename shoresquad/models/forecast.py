"""Normalized forecast view models."""

from dataclasses import dataclass
from enum import StrEnum


class Icon(StrEnum):
    STORMY = "stormy"
    HEAVY_RAIN = "heavy_rain"
    LIGHT_RAIN = "light_rain"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    SUNNY = "sunny"
    HAZE = "haze"
    PARTLY_SUNNY = "partly_sunny"


ICON_EMOJI: dict[Icon, str] = {
    Icon.STORMY: "⛈️",
    Icon.HEAVY_RAIN: "🌧️",
    Icon.LIGHT_RAIN: "🌦️",
    Icon.PARTLY_CLOUDY: "⛅",
    Icon.CLOUDY: "☁️",
    Icon.SUNNY: "☀️",
    Icon.HAZE: "🌫️",
    Icon.PARTLY_SUNNY: "🌤️",
}


class PeriodLabel(StrEnum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"
    SOON = "Soon"


@dataclass(frozen=True)
class Condition:
    icon: Icon
    short_label: str
    rain_summary: str


@dataclass(frozen=True)
class Range:
    low: int
    high: int

    @classmethod
    def ordered(cls, low: int, high: int) -> "Range":
        """Build a range, swapping the bounds if they arrive inverted."""
        if low > high:
            low, high = high, low
        return cls(low=low, high=high)


@dataclass(frozen=True)
class ForecastPeriod:
    label: PeriodLabel
    region_text: str
    icon: Icon
    short_label: str


@dataclass(frozen=True)
class Forecast:
    temperature_c: int
    temperature_range_c: Range
    condition_text: str
    condition_icon: Icon
    condition_label: str
    rain_summary: str
    humidity_range_pct: Range
    periods: tuple[ForecastPeriod, ...]
