"""
Unit tests for overlap detection and grouping.
"""

import itertools

import pendulum
import pytest

from calgrid.errors import (
    DuplicateEventId,
    InvalidTimeFormat,
    InvalidTimeRange,
    MixedDayEvents,
)
from calgrid.service.overlap import (
    events_overlap,
    filter_events_for_day,
    group_overlapping_events,
    resolve_overlaps,
    times_overlap,
)


class TestTimesOverlap:
    """Tests for the half-open interval test."""

    def test_partial_overlap(self):
        assert times_overlap("09:00", "10:00", "09:30", "10:30") is True

    def test_containment(self):
        assert times_overlap("09:00", "12:00", "10:00", "11:00") is True

    def test_back_to_back_does_not_overlap(self):
        assert times_overlap("09:00", "10:00", "10:00", "11:00") is False
        assert times_overlap("10:00", "11:00", "09:00", "10:00") is False

    def test_disjoint(self):
        assert times_overlap("09:00", "10:00", "11:00", "12:00") is False

    def test_single_digit_hours(self):
        assert times_overlap("9:00", "9:45", "9:30", "10:00") is True

    @pytest.mark.parametrize("bad", ["9", "09:60", "25:00", "ab:cd", "", "09:00pm"])
    def test_malformed_time_is_rejected(self, bad):
        with pytest.raises(InvalidTimeFormat):
            times_overlap(bad, "10:00", "09:00", "10:00")

    def test_events_overlap(self, make_event):
        assert events_overlap(
            make_event("a", "09:00", "10:00"), make_event("b", "09:59", "10:30")
        )


class TestGroupOverlappingEvents:
    """Tests for connected-component grouping."""

    def test_transitive_grouping(self, make_event):
        """A-B and B-C overlap but A-C do not: still one group."""
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:30", "11:00"),
            make_event("c", "10:30", "12:00"),
        ]

        assert not events_overlap(events[0], events[2])
        assert group_overlapping_events(events) == [["a", "b", "c"]]

    def test_groups_partition_the_day(self, make_event):
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:30", "10:30"),
            make_event("c", "11:00", "12:00"),
            make_event("d", "13:00", "14:00"),
            make_event("e", "13:15", "13:45"),
        ]

        groups = group_overlapping_events(events)

        assert groups == [["a", "b"], ["c"], ["d", "e"]]
        members = [event_id for group in groups for event_id in group]
        assert sorted(members) == ["a", "b", "c", "d", "e"]

    def test_result_does_not_depend_on_input_order(self, make_event):
        """A chain that a single left-to-right scan splits apart in some orders."""
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "11:00", "12:00"),
            make_event("c", "09:30", "11:30"),
            make_event("d", "14:00", "15:00"),
        ]

        expected = group_overlapping_events(events)
        assert expected == [["a", "c", "b"], ["d"]]

        for permutation in itertools.permutations(events):
            assert group_overlapping_events(list(permutation)) == expected

    def test_members_ordered_by_start_then_id(self, make_event):
        events = [
            make_event("z", "09:00", "10:00"),
            make_event("b", "09:00", "10:00"),
            make_event("a", "09:30", "10:00"),
        ]

        assert group_overlapping_events(events) == [["b", "z", "a"]]

    def test_empty_input(self):
        assert group_overlapping_events([]) == []

    def test_mixed_days_are_rejected(self, make_event):
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:00", "10:00", day=pendulum.date(2026, 10, 20)),
        ]

        with pytest.raises(MixedDayEvents) as exc_info:
            group_overlapping_events(events)
        assert exc_info.value.days == ["2026-10-19", "2026-10-20"]

    def test_duplicate_ids_are_rejected(self, make_event):
        with pytest.raises(DuplicateEventId):
            group_overlapping_events(
                [make_event("a", "09:00", "10:00"), make_event("a", "11:00", "12:00")]
            )

    def test_event_ending_before_it_starts_is_rejected(self, make_event):
        with pytest.raises(InvalidTimeRange):
            group_overlapping_events([make_event("a", "10:00", "09:00")])

    def test_zero_length_event_is_rejected(self, make_event):
        with pytest.raises(InvalidTimeRange):
            group_overlapping_events([make_event("a", "10:00", "10:00")])

    def test_malformed_time_is_rejected(self, make_event):
        with pytest.raises(InvalidTimeFormat):
            group_overlapping_events([make_event("a", "10:00", "1O:30")])

    def test_event_may_end_at_midnight(self, make_event):
        events = [
            make_event("a", "23:00", "24:00"),
            make_event("b", "23:30", "24:00"),
        ]

        assert group_overlapping_events(events) == [["a", "b"]]


class TestResolveOverlaps:
    """Tests for the event id to group mapping."""

    def test_singletons_have_no_entry(self, make_event):
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:30", "10:30"),
            make_event("c", "11:00", "12:00"),
        ]

        overlaps = resolve_overlaps(events)

        assert overlaps == {"a": ["a", "b"], "b": ["a", "b"]}
        assert "c" not in overlaps

    def test_no_overlaps(self, make_event):
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "10:00", "11:00"),
        ]

        assert resolve_overlaps(events) == {}


class TestFilterEventsForDay:
    def test_keeps_only_the_requested_day(self, make_event, day):
        other_day = pendulum.date(2026, 10, 20)
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:00", "10:00", day=other_day),
            make_event("c", "11:00", "12:00"),
        ]

        assert [event["id"] for event in filter_events_for_day(events, day)] == [
            "a",
            "c",
        ]
        assert [event["id"] for event in filter_events_for_day(events, other_day)] == [
            "b"
        ]
