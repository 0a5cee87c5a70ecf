# SPDX-License-Identifier: MIT

from typing import TypedDict


class ColorPalette(TypedDict):
    base: str
    light: str
    dark: str
    darker: str
    opacity: dict[int, str]
    contrast: str


class ColorCacheStats(TypedDict):
    size: int
    keys: list[str]
    memory_estimate_kb: float
