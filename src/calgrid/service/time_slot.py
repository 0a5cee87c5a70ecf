# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias

import pendulum

from calgrid.model.calendar_configuration import CalendarConfiguration
from calgrid.model.event import Event
from calgrid.model.time_slot import TimeSlot
from calgrid.service.calendar_configuration import validate_calendar_configuration
from calgrid.time import datetime_to_minutes, format_time

ScheduleDensity: TypeAlias = Literal["low", "medium", "high"]

# Slot height in pixels at a 30 minute interval
DESKTOP_BASE_ITEM_HEIGHT = 24
MOBILE_BASE_ITEM_HEIGHT = 32

# The final hour only emits slots starting before this minute
LAST_HOUR_MINUTE_LIMIT = 30

_ITEM_HEIGHT_SCALE = {15: 0.5, 30: 1.0, 60: 2.0}


def generate_time_slots(config: CalendarConfiguration) -> list[TimeSlot]:
    """
    Generate the rows of the calendar grid.

    Every hour from start_hour to end_hour (inclusive) is split into
    60 / interval_minutes slots. The final hour only keeps slots that start
    before its half-hour mark, so the grid ends by end_hour:30 for intervals
    up to 30 minutes.

    Args:
        config: The calendar configuration

    Returns:
        The slots in display order, indexed from 0

    Raises:
        InvalidCalendarConfiguration: If the configuration is invalid
    """
    validate_calendar_configuration(config)

    interval = config["interval_minutes"]
    slots_per_hour = 60 // interval

    slots: list[TimeSlot] = []
    for hour in range(config["start_hour"], config["end_hour"] + 1):
        for slot_in_hour in range(slots_per_hour):
            minute = slot_in_hour * interval
            if hour == config["end_hour"] and minute >= LAST_HOUR_MINUTE_LIMIT:
                continue
            slots.append(
                {
                    "hour": hour,
                    "minute": minute,
                    "display": format_time(hour, minute),
                    "index": len(slots),
                }
            )

    return slots


def get_item_height(config: CalendarConfiguration, is_mobile: bool = False) -> float:
    """Pixel height of one slot row; shorter intervals get shorter rows."""
    base_height = MOBILE_BASE_ITEM_HEIGHT if is_mobile else DESKTOP_BASE_ITEM_HEIGHT
    return base_height * _ITEM_HEIGHT_SCALE.get(config["interval_minutes"], 1.0)


def calculate_schedule_density(
    events: list[Event], day: pendulum.Date, config: CalendarConfiguration
) -> ScheduleDensity:
    """
    Classify how busy a day is from the number of events per displayed hour.

    Returns:
        "high" above 0.5 events per hour, "medium" above 0.2, else "low"
    """
    day_event_count = sum(1 for event in events if event["day"] == day)
    if day_event_count == 0:
        return "low"

    total_hours = max(1, config["end_hour"] - config["start_hour"])
    density = day_event_count / total_hours

    if density > 0.5:
        return "high"
    if density > 0.2:
        return "medium"
    return "low"


def get_current_time_slot_index(
    slots: list[TimeSlot], now: pendulum.DateTime
) -> int:
    """Index of the first slot at or after the current time, or -1 past the grid."""
    current_minutes = datetime_to_minutes(now)
    for slot in slots:
        if slot["hour"] * 60 + slot["minute"] >= current_minutes:
            return slot["index"]
    return -1
