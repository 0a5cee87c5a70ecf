"""
Tests for reading events from YAML files.
"""

import pendulum
import pytest

from calgrid.repository.event import EventFileRepository

EVENTS_YAML = """\
events:
  - id: standup
    title: Standup
    day: 2026-10-19
    start_time: "09:00"
    end_time: "09:30"
    category:
      name: work
      color: "#3B82F6"
  - id: lunch
    day: "2026-10-20"
    start_time: "12:00"
    end_time: "13:00"
    color: "#22C55E"
"""


class TestEventFileRepository:
    def test_reads_events(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text(EVENTS_YAML)

        events = EventFileRepository(path).events

        assert [event["id"] for event in events] == ["standup", "lunch"]
        standup = events[0]
        assert standup["day"] == pendulum.date(2026, 10, 19)
        assert standup["start_time"] == "09:00"
        assert standup["category"] == {
            "id": "work",
            "name": "work",
            "color": "#3B82F6",
            "icon": None,
        }
        assert events[1]["title"] is None
        assert events[1]["category"] is None
        assert events[1]["color"] == "#22C55E"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text("")

        assert EventFileRepository(path).events == []

    def test_missing_events_list(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text("- id: a\n")

        with pytest.raises(ValueError):
            EventFileRepository(path).events

    @pytest.mark.parametrize(
        "content, message",
        [
            ("events:\n  - just a string\n", "Event #0 must be a mapping"),
            (
                "events:\n"
                "  - {id: a, start_time: '09:00', end_time: '10:00'}\n"
                "  - {id: b, start_time: '09:00', end_time: '10:00', category: work}\n",
                "Category of event #1 must be a mapping",
            ),
            ("events:\n  - {id: a, start_time: '09:00'}\n", "Event #0 has no end_time"),
            (
                "events:\n"
                "  - {id: a, day: 5, start_time: '09:00', end_time: '10:00'}\n",
                "Date must be YYYY-MM-DD",
            ),
        ],
    )
    def test_malformed_entries_name_their_position(self, tmp_path, content, message):
        path = tmp_path / "events.yaml"
        path.write_text(content)

        with pytest.raises(ValueError, match=message):
            EventFileRepository(path).events
