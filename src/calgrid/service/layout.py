# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional

from calgrid.model.column_assignment import ColumnAssignment
from calgrid.model.entity_id import EntityId
from calgrid.model.event import Event
from calgrid.service.overlap import filter_events_for_day, group_overlapping_events
from calgrid.time import time_to_minutes


def assign_columns(group: list[Event]) -> dict[EntityId, ColumnAssignment]:
    """
    Give every event of one overlap group its own column.

    Events are ordered by start time, ties broken by id, and take columns
    0..k-1 in that order; each is 1/k of the available width. A column is
    never reused by a later event of the same group, even once its first
    occupant has ended.

    Args:
        group: The events of a single overlap group

    Returns:
        Column assignment keyed by event id
    """
    total_columns = len(group)
    if total_columns == 0:
        return {}

    ordered = sorted(
        group, key=lambda event: (time_to_minutes(event["start_time"]), event["id"])
    )

    width_fraction = 1 / total_columns
    layout: dict[EntityId, ColumnAssignment] = {}
    for column, event in enumerate(ordered):
        layout[event["id"]] = {
            "event_id": event["id"],
            "column": column,
            "total_columns": total_columns,
            "width_fraction": width_fraction,
        }
    return layout


def calculate_day_layout(
    events: list[Event],
    day: Optional[datetime.date] = None,
    show_overlapping: bool = True,
) -> dict[EntityId, ColumnAssignment]:
    """
    Compute the side-by-side layout of a day's overlapping events.

    Args:
        events: Events to lay out; all of one day unless day is given
        day: When set, events of other days are filtered out first
        show_overlapping: When False no columns are assigned and every event
            renders at full width

    Returns:
        Column assignment for every event that overlaps another one; events
        without an entry render at full width

    Raises:
        MixedDayEvents: If the events span more than one day and no day is given
        DuplicateEventId: If two events share an id
        InvalidTimeFormat: If an event time is not "HH:MM"
        InvalidTimeRange: If an event does not start before it ends
    """
    if day is not None:
        events = filter_events_for_day(events, day)

    # Grouping validates every event, including on the empty-layout paths
    groups = group_overlapping_events(events)
    if not show_overlapping:
        return {}

    events_by_id = {event["id"]: event for event in events}

    layout: dict[EntityId, ColumnAssignment] = {}
    for group in groups:
        if len(group) < 2:
            continue
        layout.update(assign_columns([events_by_id[event_id] for event_id in group]))
    return layout


def get_overlap_count(
    layout: dict[EntityId, ColumnAssignment], event_id: EntityId
) -> int:
    assignment = layout.get(event_id)
    return assignment["total_columns"] if assignment is not None else 1


def has_overlaps(layout: dict[EntityId, ColumnAssignment]) -> bool:
    return len(layout) > 0


def describe_layout(
    layout: dict[EntityId, ColumnAssignment], events: list[Event]
) -> list[dict[str, Any]]:
    """Flatten a layout into display rows ordered by start time."""
    events_by_id = {event["id"]: event for event in events}

    details: list[dict[str, Any]] = []
    for event_id, assignment in layout.items():
        event = events_by_id.get(event_id)
        if event is None:
            continue
        details.append(
            {
                "event_id": event_id,
                "title": event["title"] or "[no title]",
                "time": f"{event['start_time']}-{event['end_time']}",
                "start": time_to_minutes(event["start_time"]),
                "column": assignment["column"],
                "total_columns": assignment["total_columns"],
                "width": f"{assignment['width_fraction'] * 100:.1f}%",
            }
        )

    details.sort(key=lambda row: (row["start"], row["column"]))
    return details
