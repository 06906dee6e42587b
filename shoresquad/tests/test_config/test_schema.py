"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from shoresquad.config.schema import (
    AppConfig,
    DefaultsConfig,
    EventsConfig,
    EventSourceKind,
    WeatherConfig,
)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.weather.primary_region == "east"
        assert config.weather.fallback_region == "central"
        assert config.weather.max_periods == 4
        assert config.events.source == EventSourceKind.SEED

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            WeatherConfig(primary_region="east", bogus=True)


class TestDefaultsConfig:
    def test_fallback_values(self):
        d = DefaultsConfig()
        assert (d.temperature_low_c, d.temperature_high_c) == (24, 32)
        assert (d.humidity_low_pct, d.humidity_high_pct) == (60, 95)

    def test_humidity_bounds(self):
        with pytest.raises(ValidationError):
            DefaultsConfig(humidity_high_pct=120)


class TestWeatherConfig:
    def test_max_periods_capped_at_four(self):
        with pytest.raises(ValidationError):
            WeatherConfig(max_periods=5)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            WeatherConfig(timeout=0)


class TestEventsConfig:
    def test_file_source_requires_path(self):
        with pytest.raises(ValidationError, match="source_path"):
            EventsConfig(source="file")

    def test_file_source_with_path(self):
        config = EventsConfig(source="file", source_path="events.yaml")
        assert config.source == EventSourceKind.FILE

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            EventsConfig(join_delay_ms=-1)
