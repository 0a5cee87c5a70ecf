# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

IntervalMinutes: TypeAlias = Literal[15, 30, 60]

INTERVAL_MINUTES_CHOICES: tuple[int, ...] = (15, 30, 60)


class CalendarConfiguration(TypedDict):
    interval_minutes: IntervalMinutes
    start_hour: int
    end_hour: int
    auto_height: bool
    show_overlapping: bool
