# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import TypeAlias

from calgrid.errors import DuplicateEventId, InvalidTimeRange, MixedDayEvents
from calgrid.model.entity_id import EntityId
from calgrid.model.event import Event
from calgrid.time import date_to_str, time_to_minutes

logger = logging.getLogger(__name__)

OverlapGroup: TypeAlias = list[EntityId]


def times_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    """
    Check whether two wall-clock ranges share at least one instant.

    Ranges are half-open, so a range ending at 10:00 does not overlap one
    starting at 10:00.

    Raises:
        InvalidTimeFormat: If any of the times is not "HH:MM"
    """
    return time_to_minutes(start_a) < time_to_minutes(end_b) and time_to_minutes(
        start_b
    ) < time_to_minutes(end_a)


def events_overlap(event_a: Event, event_b: Event) -> bool:
    return times_overlap(
        event_a["start_time"],
        event_a["end_time"],
        event_b["start_time"],
        event_b["end_time"],
    )


def filter_events_for_day(events: list[Event], day: datetime.date) -> list[Event]:
    """
    Filter events to only those scheduled on the specified day.

    Args:
        events: List of events spanning any number of days
        day: The day to keep

    Returns:
        The events of that day, in their original order
    """
    return [event for event in events if event["day"] == day]


def _validated_spans(events: list[Event]) -> dict[EntityId, tuple[int, int]]:
    days = sorted({date_to_str(event["day"]) for event in events})
    if len(days) > 1:
        raise MixedDayEvents(days)

    spans: dict[EntityId, tuple[int, int]] = {}
    for event in events:
        if event["id"] in spans:
            raise DuplicateEventId(event["id"])

        start = time_to_minutes(event["start_time"])
        end = time_to_minutes(event["end_time"])
        if start >= end:
            raise InvalidTimeRange(event["id"], event["start_time"], event["end_time"])

        spans[event["id"]] = (start, end)

    return spans


class _DisjointSet:
    def __init__(self, members: list[EntityId]) -> None:
        self._parent: dict[EntityId, EntityId] = {member: member for member in members}

    def find(self, member: EntityId) -> EntityId:
        root = member
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[member] != root:
            self._parent[member], member = root, self._parent[member]

        return root

    def union(self, member_a: EntityId, member_b: EntityId) -> None:
        root_a = self.find(member_a)
        root_b = self.find(member_b)
        if root_a == root_b:
            return
        # Keep the smaller id as root so the structure does not depend on call order
        if root_b < root_a:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a


def group_overlapping_events(events: list[Event]) -> list[OverlapGroup]:
    """
    Partition one day's events into overlap groups.

    A group is a connected component of the overlap relation: if A overlaps B
    and B overlaps C, all three share a group even when A and C do not
    overlap. Members of each group are ordered by (start, id) and groups are
    ordered by their first member, so permuting the input never changes the
    result.

    Args:
        events: The events of a single calendar day

    Returns:
        Every group, singletons included

    Raises:
        MixedDayEvents: If the events span more than one day
        DuplicateEventId: If two events share an id
        InvalidTimeFormat: If an event time is not "HH:MM"
        InvalidTimeRange: If an event does not start before it ends
    """
    spans = _validated_spans(events)
    ids = list(spans.keys())
    disjoint_set = _DisjointSet(ids)

    for i, id_a in enumerate(ids):
        start_a, end_a = spans[id_a]
        for id_b in ids[i + 1 :]:
            start_b, end_b = spans[id_b]
            if start_a < end_b and start_b < end_a:
                disjoint_set.union(id_a, id_b)

    members_by_root: dict[EntityId, list[EntityId]] = {}
    for event_id in ids:
        members_by_root.setdefault(disjoint_set.find(event_id), []).append(event_id)

    groups = [
        sorted(members, key=lambda event_id: (spans[event_id][0], event_id))
        for members in members_by_root.values()
    ]
    groups.sort(key=lambda group: (spans[group[0]][0], group[0]))

    logger.debug(
        "grouped %d events into %d overlap groups", len(events), len(groups)
    )
    return groups


def resolve_overlaps(events: list[Event]) -> dict[EntityId, OverlapGroup]:
    """
    Map each overlapping event to its overlap group.

    Events that overlap nothing have no entry.
    """
    overlaps: dict[EntityId, OverlapGroup] = {}
    for group in group_overlapping_events(events):
        if len(group) < 2:
            continue
        for event_id in group:
            overlaps[event_id] = group
    return overlaps
