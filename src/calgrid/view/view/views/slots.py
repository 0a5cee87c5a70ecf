# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from calgrid.model.calendar_configuration import CalendarConfiguration
from calgrid.model.time_slot import TimeSlot
from calgrid.view.view.util import format_pixels
from calgrid.view.view.views.header import header


def time_slots_view(
    slots: list[TimeSlot],
    config: CalendarConfiguration,
    item_height: float,
    current_index: Optional[int] = None,
) -> None:
    """
    Display the slot grid of a configuration.

    Args:
        slots: The generated slots
        config: The configuration they were generated from
        item_height: Pixel height of one slot row
        current_index: Index of the slot holding the current time, if any
    """
    header(
        "slots",
        f"{config['interval_minutes']} min, "
        f"{slots[0]['display']}-{slots[-1]['display']}",
    )

    slots_table = Table(box=box.SIMPLE)
    slots_table.add_column("index", justify="right")
    slots_table.add_column("time")
    slots_table.add_column("top", justify="right")

    for slot in slots:
        if current_index is not None and slot["index"] == current_index:
            time_style = "bold black on bright_cyan"
        # Highlight lunch time (12:00-12:59)
        elif slot["hour"] == 12:
            time_style = "bold black on yellow"
        elif slot["minute"] == 0:
            time_style = "bold"
        else:
            time_style = "dim"

        slots_table.add_row(
            str(slot["index"]),
            f"[{time_style}]{slot['display']}[/{time_style}]",
            format_pixels(slot["index"] * item_height),
        )

    console = Console()
    console.print(slots_table)
    console.print(
        f"{len(slots)} slots, {format_pixels(len(slots) * item_height)} total height\n"
    )
