# SPDX-License-Identifier: MIT

from calgrid.model.color_palette import ColorPalette


def palette_style(palette: ColorPalette) -> str:
    """Rich style drawing text in the palette's contrast color on its base."""
    return f"bold {palette['contrast']} on {palette['base']}"


def format_pixels(value: float) -> str:
    if value == int(value):
        return f"{int(value)}px"
    return f"{value:.1f}px"


def format_enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"
