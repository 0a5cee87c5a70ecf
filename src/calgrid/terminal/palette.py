# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from calgrid.model.color_palette import ColorPalette
from calgrid.view import state as view_state
from calgrid.view.view.views.palette import palettes_view


def palette(
    colors: Annotated[
        list[str],
        typer.Argument(
            help="hex colors such as '#3B82F6'; unparsable colors show the default palette"
        ),
    ],
) -> None:
    """Show the palettes derived for the given colors."""
    cache = view_state.get_palette_cache()
    palettes: dict[str, ColorPalette] = {}
    for color in colors:
        palettes[color] = cache.get(color)

    palettes_view(palettes, cache.stats())
