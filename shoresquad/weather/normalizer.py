"""Forecast normalizer: turns a raw 24-hour forecast payload into a Forecast.

Never raises on malformed input; every missing or unusable field falls
back to a documented default. Callers must only pass payloads that have
already been checked for at least one forecast item.
"""

import logging
import math
import re
from typing import Any

from shoresquad.config.schema import DefaultsConfig, WeatherConfig
from shoresquad.models.forecast import Forecast, ForecastPeriod, PeriodLabel, Range
from shoresquad.weather.conditions import classify

logger = logging.getLogger(__name__)

NO_FORECAST_TEXT = "No forecast available"
DEFAULT_REGION_TEXT = "Fair"

# Matches the hour in "2024-12-15T07:00:00+08:00" as well as bare "T07:00".
_HOUR_RE = re.compile(r"T(\d{1,2}):")


class ForecastNormalizer:
    def __init__(
        self,
        weather: WeatherConfig | None = None,
        defaults: DefaultsConfig | None = None,
    ):
        self.weather = weather or WeatherConfig()
        self.defaults = defaults or DefaultsConfig()

    @property
    def region_priority(self) -> tuple[str, ...]:
        return (self.weather.primary_region, self.weather.fallback_region)

    def normalize(self, raw: dict) -> Forecast:
        items = raw.get("items") if isinstance(raw, dict) else None
        item = items[0] if isinstance(items, list) and items else {}
        if not isinstance(item, dict):
            item = {}

        general = _as_dict(item.get("general"))
        text = _text(general.get("forecast")) or NO_FORECAST_TEXT

        temperature = _as_dict(general.get("temperature"))
        temp_range = Range.ordered(
            _int_or(temperature.get("low"), self.defaults.temperature_low_c),
            _int_or(temperature.get("high"), self.defaults.temperature_high_c),
        )
        humidity = _as_dict(general.get("relative_humidity"))
        humidity_range = Range.ordered(
            _int_or(humidity.get("low"), self.defaults.humidity_low_pct),
            _int_or(humidity.get("high"), self.defaults.humidity_high_pct),
        )

        raw_periods = item.get("periods")
        if not isinstance(raw_periods, list):
            raw_periods = []
        periods = tuple(
            self._period(p) for p in raw_periods[: self.weather.max_periods]
        )

        condition = classify(text)
        forecast = Forecast(
            temperature_c=_midpoint(temp_range),
            temperature_range_c=temp_range,
            condition_text=text,
            condition_icon=condition.icon,
            condition_label=condition.short_label,
            rain_summary=condition.rain_summary,
            humidity_range_pct=humidity_range,
            periods=periods,
        )
        logger.debug(
            "Normalized forecast: %s %d°C, %d periods",
            forecast.condition_icon, forecast.temperature_c, len(periods),
        )
        return forecast

    def _period(self, raw: Any) -> ForecastPeriod:
        raw = _as_dict(raw)
        start = _as_dict(raw.get("time")).get("start")
        regions = _as_dict(raw.get("regions"))
        region_text = DEFAULT_REGION_TEXT
        for name in self.region_priority:
            value = _text(regions.get(name))
            if value:
                region_text = value
                break
        condition = classify(region_text)
        return ForecastPeriod(
            label=period_label(start),
            region_text=region_text,
            icon=condition.icon,
            short_label=condition.short_label,
        )


def normalize(raw: dict) -> Forecast:
    """Normalize with default configuration."""
    return ForecastNormalizer().normalize(raw)


def period_label(start: Any) -> PeriodLabel:
    """Bucket a period start timestamp into a time-of-day label."""
    if not isinstance(start, str):
        return PeriodLabel.SOON
    m = _HOUR_RE.search(start)
    if m is None:
        return PeriodLabel.SOON
    hour = int(m.group(1))
    if hour > 23:
        return PeriodLabel.SOON
    if 6 <= hour < 12:
        return PeriodLabel.MORNING
    if 12 <= hour < 18:
        return PeriodLabel.AFTERNOON
    if 18 <= hour < 21:
        return PeriodLabel.EVENING
    return PeriodLabel.NIGHT


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _midpoint(r: Range) -> int:
    # Integer form of round_half_up((low + high) / 2); exact for any int size.
    return (r.low + r.high + 1) // 2


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    """Accept either a plain string or a {"text": ...} object."""
    if isinstance(value, dict):
        value = value.get("text")
    if isinstance(value, str):
        return value.strip()
    return ""


def _int_or(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return default
    if isinstance(value, float) and math.isfinite(value):
        return round_half_up(value)
    return default
