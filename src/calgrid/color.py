# SPDX-License-Identifier: MIT

import math
import re
from typing import TypeAlias

from calgrid.errors import InvalidColorFormat
from calgrid.model.color_palette import ColorPalette

Rgb: TypeAlias = tuple[float, float, float]

WHITE = "#FFFFFF"
BLACK = "#000000"

# Alpha stops, in percent, of the opacity variants of a palette
OPACITY_STOPS = (10, 20, 30, 50, 70, 90)

LIGHT_FACTOR = 0.2
DARK_FACTOR = 0.2
DARKER_FACTOR = 0.4

# Bases at or below this relative luminance get white text
CONTRAST_LUMINANCE_THRESHOLD = 0.5

DEFAULT_BASE_COLOR = "#6B7280"

PRESET_COLORS = [
    "#EF4444",
    "#F97316",
    "#EAB308",
    "#22C55E",
    "#06B6D4",
    "#3B82F6",
    "#8B5CF6",
    "#EC4899",
    "#6B7280",
    "#1F2937",
]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def parse_hex_color(color: str) -> tuple[int, int, int]:
    """
    Parse a hex color ("#3B82F6", "3b82f6" or "#38F") into RGB channels.

    Raises:
        InvalidColorFormat: If the value is not a hex color
    """
    if not isinstance(color, str):
        raise InvalidColorFormat(color)

    match = _HEX_PATTERN.match(color.strip())
    if not match:
        raise InvalidColorFormat(color)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(digit * 2 for digit in digits)

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def normalize_color(color: str) -> str:
    """Return the canonical '#RRGGBB' form of a hex color."""
    return rgb_to_hex(parse_hex_color(color))


def _round_channel(value: float) -> int:
    # Half-up rounding, clamped to a valid channel
    return max(0, min(255, math.floor(value + 0.5)))


def rgb_to_hex(rgb: Rgb) -> str:
    red, green, blue = (_round_channel(channel) for channel in rgb)
    return f"#{red:02X}{green:02X}{blue:02X}"


def lighten(rgb: Rgb, factor: float) -> Rgb:
    """Move every channel toward 255 by the given fraction."""
    red, green, blue = rgb
    return (
        min(255.0, red + (255 - red) * factor),
        min(255.0, green + (255 - green) * factor),
        min(255.0, blue + (255 - blue) * factor),
    )


def darken(rgb: Rgb, factor: float) -> Rgb:
    """Move every channel toward 0 by the given fraction."""
    red, green, blue = rgb
    return (
        max(0.0, red * (1 - factor)),
        max(0.0, green * (1 - factor)),
        max(0.0, blue * (1 - factor)),
    )


def rgba(rgb: Rgb, opacity_percent: int) -> str:
    red, green, blue = (_round_channel(channel) for channel in rgb)
    return f"rgba({red}, {green}, {blue}, {opacity_percent / 100:g})"


def relative_luminance(rgb: Rgb) -> float:
    red, green, blue = rgb
    return (0.299 * red + 0.587 * green + 0.114 * blue) / 255


def contrast_color(rgb: Rgb) -> str:
    if relative_luminance(rgb) <= CONTRAST_LUMINANCE_THRESHOLD:
        return WHITE
    return BLACK


def derive_palette(color: str) -> ColorPalette:
    """
    Derive the full display palette of a base color.

    Raises:
        InvalidColorFormat: If the base color cannot be parsed
    """
    channels = parse_hex_color(color)
    rgb: Rgb = (float(channels[0]), float(channels[1]), float(channels[2]))

    return {
        "base": rgb_to_hex(rgb),
        "light": rgb_to_hex(lighten(rgb, LIGHT_FACTOR)),
        "dark": rgb_to_hex(darken(rgb, DARK_FACTOR)),
        "darker": rgb_to_hex(darken(rgb, DARKER_FACTOR)),
        "opacity": {stop: rgba(rgb, stop) for stop in OPACITY_STOPS},
        "contrast": contrast_color(rgb),
    }


def default_palette() -> ColorPalette:
    """The neutral gray palette used whenever a base color is unusable."""
    return {
        "base": DEFAULT_BASE_COLOR,
        "light": "#9CA3AF",
        "dark": "#4B5563",
        "darker": "#374151",
        "opacity": {
            stop: f"rgba(107, 114, 128, {stop / 100:g})" for stop in OPACITY_STOPS
        },
        "contrast": WHITE,
    }
