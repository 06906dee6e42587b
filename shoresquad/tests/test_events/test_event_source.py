"""Tests for seed and file event sources."""

from pathlib import Path

import pytest

from shoresquad.config.schema import EventsConfig
from shoresquad.events.source import (
    EventSourceError,
    FileEventSource,
    SeedEventSource,
    build_event_source,
    parse_event,
)


class TestSeedEventSource:
    @pytest.mark.asyncio
    async def test_initial_page(self):
        events = await SeedEventSource().fetch_initial()
        assert [e.id for e in events] == [1, 2, 3]
        assert events[0].featured is True

    @pytest.mark.asyncio
    async def test_more_then_exhausted(self):
        source = SeedEventSource()
        await source.fetch_initial()
        assert [e.id for e in await source.fetch_more()] == [4, 5]
        assert await source.fetch_more() == []

    @pytest.mark.asyncio
    async def test_fresh_objects(self):
        first = await SeedEventSource().fetch_initial()
        first[0].participant_count += 100
        second = await SeedEventSource().fetch_initial()
        assert second[0].participant_count == 18


class TestFileEventSource:
    @pytest.mark.asyncio
    async def test_pages(self, fixtures_dir: Path):
        source = FileEventSource(fixtures_dir / "events.yaml")
        initial = await source.fetch_initial()
        assert [e.id for e in initial] == [10, 11]
        assert initial[0].location_label == "Sentosa, Singapore"
        assert initial[1].participant_count == 3
        assert [e.id for e in await source.fetch_more()] == [12]
        assert [e.id for e in await source.fetch_more()] == [13]
        assert await source.fetch_more() == []

    @pytest.mark.asyncio
    async def test_flat_more_list(self, tmp_path: Path):
        path = tmp_path / "events.yaml"
        path.write_text(
            "initial:\n"
            "  - {id: 1, title: A, category: today}\n"
            "more:\n"
            "  - {id: 2, title: B, category: weekend}\n"
            "  - {id: 3, title: C, category: nearby}\n"
        )
        source = FileEventSource(path)
        await source.fetch_initial()
        assert [e.id for e in await source.fetch_more()] == [2, 3]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path):
        source = FileEventSource(tmp_path / "missing.yaml")
        with pytest.raises(EventSourceError):
            await source.fetch_initial()

    @pytest.mark.asyncio
    async def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "events.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(EventSourceError):
            await FileEventSource(path).fetch_initial()


class TestParseEvent:
    def test_short_field_names(self):
        event = parse_event(
            {
                "id": "7",
                "title": "Beach",
                "date": "Dec 1",
                "location": "Changi",
                "participants": 4,
                "weather": "☀️",
                "category": "today",
            }
        )
        assert event.id == 7
        assert event.date_label == "Dec 1"
        assert event.participant_count == 4

    def test_missing_required_field(self):
        with pytest.raises(EventSourceError):
            parse_event({"id": 1, "title": "No category"})

    def test_reserved_category(self):
        with pytest.raises(EventSourceError):
            parse_event({"id": 1, "title": "X", "category": "all"})


class TestBuildEventSource:
    def test_seed_default(self):
        assert isinstance(build_event_source(EventsConfig()), SeedEventSource)

    def test_file(self, fixtures_dir: Path):
        config = EventsConfig(source="file", source_path=str(fixtures_dir / "events.yaml"))
        source = build_event_source(config)
        assert isinstance(source, FileEventSource)
