# SPDX-License-Identifier: MIT

import datetime
import re
from typing import cast

import pendulum

from calgrid.errors import InvalidTimeFormat

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string to a pendulum.Date."""
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    return cast(pendulum.Date, parsed)


def date_from_value(value: str | datetime.date) -> pendulum.Date:
    """Accept either a 'YYYY-MM-DD' string or a date (as produced by YAML)."""
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value).date()
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise ValueError(f"Date must be YYYY-MM-DD, got {value!r}")
    return date_from_str(value)


def date_to_str(date: datetime.date) -> str:
    return date.isoformat()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def time_to_minutes(time_str: str) -> int:
    """
    Convert a wall-clock "HH:MM" string to minutes since midnight.

    "24:00" is accepted as the end-of-day marker.

    Raises:
        InvalidTimeFormat: If the string is not a valid wall-clock time
    """
    if not isinstance(time_str, str):
        raise InvalidTimeFormat(time_str)

    time_match = _TIME_PATTERN.match(time_str.strip())
    if not time_match:
        raise InvalidTimeFormat(time_str)

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    if hour == 24 and minute == 0:
        return MINUTES_PER_DAY
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(time_str)

    return hour * 60 + minute


def format_time(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def datetime_to_minutes(datetime: pendulum.DateTime) -> int:
    """Wall-clock minutes since midnight in the datetime's own timezone."""
    return datetime.hour * 60 + datetime.minute
