# SPDX-License-Identifier: MIT

from typing import TypedDict


class VirtualWindow(TypedDict):
    # Inclusive on both ends
    start_index: int
    end_index: int


class VirtualItem(TypedDict):
    index: int
    start: float
    end: float
