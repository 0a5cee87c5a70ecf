# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from calgrid.model.virtual_window import VirtualItem, VirtualWindow
from calgrid.view.view.util import format_pixels
from calgrid.view.view.views.header import header


def virtual_window_view(
    item_count: int,
    window: Optional[VirtualWindow],
    items: list[VirtualItem],
    scroll_offset: float,
    container_height: float,
) -> None:
    header("window", f"{item_count} items")

    console = Console()

    if window is None:
        console.print("\n[dim]nothing to mount[/dim]\n")
        return

    viewport_end = scroll_offset + container_height

    items_table = Table(box=box.SIMPLE)
    items_table.add_column("index", justify="right")
    items_table.add_column("start", justify="right")
    items_table.add_column("end", justify="right")
    items_table.add_column("visible")

    for item in items:
        visible = item["start"] < viewport_end and item["end"] > scroll_offset
        items_table.add_row(
            str(item["index"]),
            format_pixels(item["start"]),
            format_pixels(item["end"]),
            "[green]yes[/green]" if visible else "[dim]overscan[/dim]",
        )

    console.print(items_table)
    console.print(
        f"mounting {window['end_index'] - window['start_index'] + 1} of {item_count} "
        f"items ({window['start_index']}..{window['end_index']})\n"
    )
