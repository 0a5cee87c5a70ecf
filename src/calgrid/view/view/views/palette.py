# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from calgrid.color import OPACITY_STOPS
from calgrid.model.color_palette import ColorCacheStats, ColorPalette
from calgrid.view.view.util import palette_style
from calgrid.view.view.views.header import header


def _swatch(color: str) -> Text:
    swatch = Text()
    swatch.append("  ", style=f"on {color}")
    swatch.append(f" {color}")
    return swatch


def palettes_view(palettes: dict[str, ColorPalette], stats: ColorCacheStats) -> None:
    """
    Display derived palettes side by side with the cache statistics.

    Args:
        palettes: Palettes keyed by the color that was requested
        stats: Statistics of the cache the palettes came from
    """
    header("palette")

    palettes_table = Table(box=box.SIMPLE)
    palettes_table.add_column("requested")
    palettes_table.add_column("base")
    palettes_table.add_column("light")
    palettes_table.add_column("dark")
    palettes_table.add_column("darker")
    palettes_table.add_column("contrast")

    for requested, palette in palettes.items():
        palettes_table.add_row(
            Text(f" {requested} ", style=palette_style(palette)),
            _swatch(palette["base"]),
            _swatch(palette["light"]),
            _swatch(palette["dark"]),
            _swatch(palette["darker"]),
            palette["contrast"],
        )

    opacity_table = Table(box=box.SIMPLE, title="opacity")
    opacity_table.add_column("requested")
    for stop in OPACITY_STOPS:
        opacity_table.add_column(f"{stop}%")
    for requested, palette in palettes.items():
        opacity_table.add_row(
            requested, *[palette["opacity"][stop] for stop in OPACITY_STOPS]
        )

    console = Console()
    console.print(palettes_table)
    console.print(opacity_table)
    console.print(
        f"cache: {stats['size']} palettes, ~{stats['memory_estimate_kb']:.1f} KB\n"
    )
