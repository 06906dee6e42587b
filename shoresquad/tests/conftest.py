"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from shoresquad.config.schema import AppConfig, EventsConfig
from shoresquad.models.event import Event

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def _make_event(event_id: int, category: str = "today", **kwargs) -> Event:
    fields = {
        "title": f"Cleanup {event_id}",
        "date_label": "Dec 15",
        "location_label": "East Coast Park, Singapore",
        "participant_count": 5,
        "weather_badge": "☀️ 26°C",
    }
    fields.update(kwargs)
    return Event(id=event_id, category=category, **fields)


@pytest.fixture
def make_event():
    """Factory for events with sensible display fields."""
    return _make_event


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def thundery_payload() -> dict:
    with open(FIXTURE_DIR / "forecast_thundery.json") as f:
        return json.load(f)


@pytest.fixture
def empty_payload() -> dict:
    with open(FIXTURE_DIR / "forecast_empty.json") as f:
        return json.load(f)


@pytest.fixture
def fast_config() -> AppConfig:
    """Default config with all simulated latency removed."""
    return AppConfig(events=EventsConfig(fetch_delay_ms=0, join_delay_ms=0))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "weather": {"primary_region": "west"},
        "events": {"fetch_delay_ms": 0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
