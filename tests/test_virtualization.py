"""
Unit tests for the virtual scroll window.
"""

import pytest

from calgrid.errors import InvalidViewport
from calgrid.service.calendar_configuration import build_calendar_configuration
from calgrid.service.time_slot import generate_time_slots
from calgrid.service.virtualization import (
    compute_virtual_window,
    event_slot_span,
    events_in_window,
    index_events_by_slot,
    scroll_offset_for_index,
    scroll_offset_for_time,
    total_height,
    virtual_items,
)


class TestComputeVirtualWindow:
    """Tests for the mounted index range."""

    def test_covers_viewport_plus_overscan(self):
        window = compute_virtual_window(
            item_count=100,
            item_height=20,
            container_height=200,
            scroll_offset=400,
            overscan=2,
        )

        assert window == {"start_index": 18, "end_index": 32}
        assert window["start_index"] <= 20 - 2
        assert window["end_index"] >= 29 + 2

    def test_top_of_list_is_clipped(self):
        window = compute_virtual_window(100, 20, 200, 0, overscan=5)

        assert window == {"start_index": 0, "end_index": 15}

    def test_bottom_of_list_is_clipped(self):
        window = compute_virtual_window(100, 20, 200, 1800, overscan=5)

        assert window == {"start_index": 85, "end_index": 99}

    def test_scrolled_past_the_end(self):
        window = compute_virtual_window(10, 20, 200, 5000, overscan=2)

        assert window is not None
        assert 0 <= window["start_index"] <= window["end_index"] <= 9

    def test_viewport_larger_than_list(self):
        assert compute_virtual_window(5, 20, 1000, 0) == {
            "start_index": 0,
            "end_index": 4,
        }

    def test_default_overscan(self):
        assert compute_virtual_window(100, 20, 200, 400) == {
            "start_index": 15,
            "end_index": 35,
        }

    def test_empty_list(self):
        assert compute_virtual_window(0, 20, 200, 0) is None

    @pytest.mark.parametrize(
        "item_height, container_height, scroll_offset, overscan",
        [
            (0, 200, 0, 2),
            (-5, 200, 0, 2),
            (20, -1, 0, 2),
            (20, 200, -1, 2),
            (20, 200, 0, -1),
        ],
    )
    def test_invalid_viewport(
        self, item_height, container_height, scroll_offset, overscan
    ):
        with pytest.raises(InvalidViewport):
            compute_virtual_window(
                100, item_height, container_height, scroll_offset, overscan
            )


class TestVirtualItems:
    def test_item_spans(self):
        items = virtual_items({"start_index": 3, "end_index": 5}, 20)

        assert items == [
            {"index": 3, "start": 60, "end": 80},
            {"index": 4, "start": 80, "end": 100},
            {"index": 5, "start": 100, "end": 120},
        ]

    def test_no_window(self):
        assert virtual_items(None, 20) == []

    def test_total_height(self):
        assert total_height(37, 24) == 888

    def test_scroll_offset_for_index(self):
        assert scroll_offset_for_index(10, 24) == 240
        assert scroll_offset_for_index(-3, 24) == 0


class TestScrollOffsetForTime:
    """Default grid starts at 05:00 with 30 minute rows of 24px."""

    @pytest.fixture
    def config(self):
        return build_calendar_configuration()

    def test_centres_the_time(self, config):
        assert scroll_offset_for_time(17, 0, config, 24, 600) == 276

    def test_never_negative(self, config):
        assert scroll_offset_for_time(9, 0, config, 24, 600) == 0

    def test_before_the_grid(self, config):
        assert scroll_offset_for_time(4, 30, config, 24, 600) is None


class TestEventsInWindow:
    """Slots run 09:00..12:00 at 30 minutes, indexed 0..6."""

    @pytest.fixture
    def slots(self):
        return generate_time_slots(
            build_calendar_configuration({"start_hour": 9, "end_hour": 12})
        )

    @pytest.fixture
    def events(self, make_event):
        return [
            make_event("c", "11:00", "12:00"),
            make_event("b", "09:15", "10:15"),
            make_event("f", "12:00", "13:00"),
            make_event("a", "09:00", "09:30"),
            make_event("d", "07:00", "08:00"),
            make_event("e", "08:30", "09:45"),
        ]

    def _ids(self, events):
        return [event["id"] for event in events]

    def test_slot_spans(self, make_event, slots):
        assert event_slot_span(make_event("a", "09:00", "09:30"), slots) == (0, 0)
        assert event_slot_span(make_event("b", "09:15", "10:15"), slots) == (0, 2)
        assert event_slot_span(make_event("e", "08:30", "09:45"), slots) == (0, 1)
        assert event_slot_span(make_event("g", "11:45", "23:00"), slots) == (5, 6)
        assert event_slot_span(make_event("d", "07:00", "09:00"), slots) is None
        assert event_slot_span(make_event("a", "09:00", "10:00"), []) is None

    def test_index_by_start_slot(self, events, slots):
        index = index_events_by_slot(events, slots)

        assert {slot: self._ids(found) for slot, found in index.items()} == {
            0: ["e", "a", "b"],
            4: ["c"],
            6: ["f"],
        }

    @pytest.mark.parametrize(
        "start_index, end_index, expected",
        [
            (0, 0, ["e", "a", "b"]),
            (2, 3, ["b"]),
            (3, 4, ["c"]),
            (5, 6, ["c", "f"]),
            (0, 6, ["e", "a", "b", "c", "f"]),
        ],
    )
    def test_events_overlapping_the_window(
        self, events, slots, start_index, end_index, expected
    ):
        window = {"start_index": start_index, "end_index": end_index}

        assert self._ids(events_in_window(events, window, slots)) == expected

    def test_follows_the_computed_window(self, events, slots):
        window = compute_virtual_window(
            len(slots),
            item_height=24,
            container_height=24,
            scroll_offset=96,
            overscan=0,
        )

        assert window == {"start_index": 4, "end_index": 5}
        assert self._ids(events_in_window(events, window, slots)) == ["c"]

    def test_no_window(self, events, slots):
        assert events_in_window(events, None, slots) == []
