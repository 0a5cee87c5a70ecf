# SPDX-License-Identifier: MIT

from typing import Optional

from calgrid.model.calendar_configuration import CalendarConfiguration
from calgrid.model.column_assignment import ColumnAssignment
from calgrid.model.entity_id import EntityId
from calgrid.model.event import Event
from calgrid.model.event_block import EventBlock
from calgrid.model.time_slot import TimeSlot
from calgrid.time import time_to_minutes

# Smallest block height that stays readable and tappable
DESKTOP_MIN_BLOCK_HEIGHT = 24
MOBILE_MIN_BLOCK_HEIGHT = 44


def find_slot_index(slots: list[TimeSlot], time_str: str) -> Optional[int]:
    """Index of the slot containing the given time, or None before the grid."""
    return slot_index_at(slots, time_to_minutes(time_str))


def slot_index_at(slots: list[TimeSlot], minutes: int) -> Optional[int]:
    """
    Index of the slot containing a minute of the day.

    Times past the last slot belong to the last slot.
    """
    found: Optional[int] = None
    for slot in slots:
        if slot["hour"] * 60 + slot["minute"] > minutes:
            break
        found = slot["index"]
    return found


def compute_event_block(
    event: Event,
    config: CalendarConfiguration,
    item_height: float,
    assignment: Optional[ColumnAssignment] = None,
    is_mobile: bool = False,
) -> EventBlock:
    """
    Place an event on the slot grid.

    The block starts at the event's offset from start_hour and spans as many
    slot heights as its duration covers, but never less than the minimum
    block height. Overlapping events are narrowed to their column.

    Raises:
        InvalidTimeFormat: If an event time is not "HH:MM"
    """
    start = time_to_minutes(event["start_time"])
    end = time_to_minutes(event["end_time"])
    interval = config["interval_minutes"]

    grid_start = config["start_hour"] * 60
    top = (start - grid_start) / interval * item_height

    min_height = MOBILE_MIN_BLOCK_HEIGHT if is_mobile else DESKTOP_MIN_BLOCK_HEIGHT
    height = max((end - start) / interval * item_height, min_height)

    if assignment is None:
        left_fraction = 0.0
        width_fraction = 1.0
    else:
        left_fraction = assignment["column"] * assignment["width_fraction"]
        width_fraction = assignment["width_fraction"]

    return {
        "event_id": event["id"],
        "top": top,
        "height": height,
        "left_fraction": left_fraction,
        "width_fraction": width_fraction,
    }


def compute_day_blocks(
    events: list[Event],
    layout: dict[EntityId, ColumnAssignment],
    config: CalendarConfiguration,
    item_height: float,
    is_mobile: bool = False,
) -> dict[EntityId, EventBlock]:
    return {
        event["id"]: compute_event_block(
            event, config, item_height, layout.get(event["id"]), is_mobile
        )
        for event in events
    }
