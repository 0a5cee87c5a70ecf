# SPDX-License-Identifier: MIT

from typing import TypedDict


class TimeSlot(TypedDict):
    hour: int
    minute: int
    display: str
    index: int
