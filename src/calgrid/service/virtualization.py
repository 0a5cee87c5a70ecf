# SPDX-License-Identifier: MIT

import math
from typing import Optional

from calgrid.errors import InvalidViewport
from calgrid.model.calendar_configuration import CalendarConfiguration
from calgrid.model.event import Event
from calgrid.model.time_slot import TimeSlot
from calgrid.model.virtual_window import VirtualItem, VirtualWindow
from calgrid.service.geometry import slot_index_at
from calgrid.time import time_to_minutes

DEFAULT_OVERSCAN = 5


def compute_virtual_window(
    item_count: int,
    item_height: float,
    container_height: float,
    scroll_offset: float,
    overscan: int = DEFAULT_OVERSCAN,
) -> Optional[VirtualWindow]:
    """
    Compute the contiguous range of item indices that must be mounted.

    The range covers every item whose pixel span intersects the viewport
    [scroll_offset, scroll_offset + container_height] plus up to overscan
    items on each side, clipped to the list.

    Args:
        item_count: Total number of items in the list
        item_height: Pixel height of one item
        container_height: Pixel height of the scroll viewport
        scroll_offset: Current scroll position in pixels
        overscan: Extra items to mount beyond each edge of the viewport

    Returns:
        The inclusive index range, or None for an empty list

    Raises:
        InvalidViewport: If item_height is not positive or any other
            measurement is negative
    """
    if item_height <= 0:
        raise InvalidViewport(f"Item height must be positive, got {item_height}")
    if container_height < 0:
        raise InvalidViewport(
            f"Container height must not be negative, got {container_height}"
        )
    if scroll_offset < 0:
        raise InvalidViewport(
            f"Scroll offset must not be negative, got {scroll_offset}"
        )
    if overscan < 0:
        raise InvalidViewport(f"Overscan must not be negative, got {overscan}")
    if item_count <= 0:
        return None

    last_index = item_count - 1

    visible_start = min(last_index, math.floor(scroll_offset / item_height))
    visible_end = min(
        last_index, math.ceil((scroll_offset + container_height) / item_height)
    )

    return {
        "start_index": max(0, visible_start - overscan),
        "end_index": min(last_index, visible_end + overscan),
    }


def virtual_items(
    window: Optional[VirtualWindow], item_height: float
) -> list[VirtualItem]:
    """Pixel spans of every item in the window."""
    if window is None:
        return []
    return [
        {
            "index": index,
            "start": index * item_height,
            "end": (index + 1) * item_height,
        }
        for index in range(window["start_index"], window["end_index"] + 1)
    ]


def total_height(item_count: int, item_height: float) -> float:
    return item_count * item_height


def scroll_offset_for_index(index: int, item_height: float) -> float:
    return max(0, index) * item_height


def scroll_offset_for_time(
    hour: int,
    minute: int,
    config: CalendarConfiguration,
    item_height: float,
    container_height: float,
) -> Optional[float]:
    """
    Scroll offset that centres a wall-clock time in the viewport.

    Returns:
        The offset in pixels (never negative), or None when the time lies
        before the first displayed hour
    """
    minutes_from_start = hour * 60 + minute - config["start_hour"] * 60
    if minutes_from_start < 0:
        return None

    pixels_per_minute = item_height / config["interval_minutes"]
    position = minutes_from_start * pixels_per_minute
    return max(0.0, position - container_height / 2)


def event_slot_span(event: Event, slots: list[TimeSlot]) -> Optional[tuple[int, int]]:
    """
    First and last slot index an event covers on the grid.

    An event starting before the grid starts in the first slot and one running
    past the grid ends in the last slot.

    Returns:
        The inclusive index span, or None when the event ends before the
        first slot or the grid is empty

    Raises:
        InvalidTimeFormat: If an event time is not "HH:MM"
    """
    start = time_to_minutes(event["start_time"])
    end = time_to_minutes(event["end_time"])

    # The end minute itself belongs to the next slot
    last = slot_index_at(slots, max(start, end - 1))
    if last is None:
        return None

    first = slot_index_at(slots, start)
    return (first if first is not None else 0, last)


def _by_start(events: list[Event]) -> list[Event]:
    return sorted(
        events, key=lambda event: (time_to_minutes(event["start_time"]), event["id"])
    )


def index_events_by_slot(
    events: list[Event], slots: list[TimeSlot]
) -> dict[int, list[Event]]:
    """
    Group events under the slot they start in.

    Events within a slot are ordered by start time, then id. Events that end
    before the grid are left out.
    """
    index: dict[int, list[Event]] = {}
    for event in _by_start(events):
        span = event_slot_span(event, slots)
        if span is None:
            continue
        index.setdefault(span[0], []).append(event)
    return index


def events_in_window(
    events: list[Event],
    window: Optional[VirtualWindow],
    slots: list[TimeSlot],
) -> list[Event]:
    """
    Events that must be mounted to render a window of slot rows.

    An event is mounted when any slot it covers lies inside the window, so a
    long event that started above the window still renders.

    Returns:
        The events ordered by start time, then id
    """
    if window is None:
        return []

    mounted: list[Event] = []
    for event in _by_start(events):
        span = event_slot_span(event, slots)
        if span is None:
            continue
        first, last = span
        if first <= window["end_index"] and last >= window["start_index"]:
            mounted.append(event)
    return mounted
