# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from calgrid.model.calendar_configuration import CalendarConfiguration
from calgrid.model.column_assignment import ColumnAssignment
from calgrid.model.entity_id import EntityId
from calgrid.model.event import Event
from calgrid.model.event_block import EventBlock
from calgrid.model.time_slot import TimeSlot
from calgrid.service.category import event_palette, resolve_category
from calgrid.service.color_cache import ColorVariantCache
from calgrid.time import date_to_display_str, time_to_minutes
from calgrid.view.state import get_palette_cache
from calgrid.view.view.util import format_pixels, palette_style
from calgrid.view.view.views.header import header


def day_layout_view(
    day: pendulum.Date,
    events: list[Event],
    layout: dict[EntityId, ColumnAssignment],
    blocks: dict[EntityId, EventBlock],
    slots: list[TimeSlot],
    config: CalendarConfiguration,
    timeline_width: int = 40,
    cache: Optional[ColorVariantCache] = None,
) -> None:
    """
    Display the computed layout of one day.

    Args:
        day: The day being displayed
        events: The day's events
        layout: Column assignments of the overlapping events
        blocks: Pixel geometry of every event
        slots: The slot grid of the configuration
        config: The calendar configuration the layout was computed for
        timeline_width: Width in characters of the timeline drawing
        cache: Palette cache used to color the events, the view state's by
            default
    """
    if cache is None:
        cache = get_palette_cache()

    header("layout", date_to_display_str(day))

    console = Console()

    if not events:
        console.print("\n[dim]no events on this day[/dim]\n")
        return

    events_table = Table(box=box.SIMPLE)
    for column in [
        "id",
        "title",
        "category",
        "time",
        "column",
        "width",
        "top",
        "height",
    ]:
        events_table.add_column(column)

    ordered = sorted(
        events, key=lambda event: (time_to_minutes(event["start_time"]), event["id"])
    )
    for event in ordered:
        assignment = layout.get(event["id"])
        block = blocks[event["id"]]
        palette = event_palette(event, cache)

        events_table.add_row(
            Text(event["id"], style=palette_style(palette)),
            Text(event["title"] or "[no title]"),
            resolve_category(event)["name"],
            f"{event['start_time']}-{event['end_time']}",
            (
                f"{assignment['column'] + 1}/{assignment['total_columns']}"
                if assignment is not None
                else "-"
            ),
            f"{block['width_fraction'] * 100:.1f}%",
            format_pixels(block["top"]),
            format_pixels(block["height"]),
        )

    console.print(events_table)
    console.print(
        _render_timeline(ordered, blocks, slots, config, timeline_width, cache)
    )


def _render_timeline(
    events: list[Event],
    blocks: dict[EntityId, EventBlock],
    slots: list[TimeSlot],
    config: CalendarConfiguration,
    width: int,
    cache: ColorVariantCache,
) -> Text:
    interval = config["interval_minutes"]
    timeline = Text()

    for slot in slots:
        slot_start = slot["hour"] * 60 + slot["minute"]
        slot_end = slot_start + interval

        cells: list[Optional[Event]] = [None] * width
        for event in events:
            event_start = time_to_minutes(event["start_time"])
            event_end = time_to_minutes(event["end_time"])

            # Check if event overlaps with this time slot
            if not (event_start < slot_end and event_end > slot_start):
                continue

            block = blocks[event["id"]]
            first_cell = round(block["left_fraction"] * width)
            last_cell = round(
                (block["left_fraction"] + block["width_fraction"]) * width
            )
            for cell in range(first_cell, min(last_cell, width)):
                cells[cell] = event

        line = Text()
        if slot["minute"] == 0:
            line.append(f"{slot['display']} ", style="bold")
        else:
            line.append(f"{slot['display']} ", style="dim")
        line.append("│ ", style="bright_black")

        for cell_event in cells:
            if cell_event is None:
                line.append(" ")
            else:
                line.append("█", style=event_palette(cell_event, cache)["base"])

        timeline.append_text(line)
        timeline.append("\n")

    return timeline


def overlap_details_view(details: list[dict[str, object]]) -> None:
    console = Console()

    if not details:
        console.print("[dim]no overlapping events[/dim]\n")
        return

    details_table = Table(box=box.SIMPLE, title="overlaps")
    for column in ["title", "time", "column", "total_columns", "width"]:
        details_table.add_column(column)
    for row in details:
        details_table.add_row(
            Text(str(row["title"])),
            str(row["time"]),
            str(row["column"]),
            str(row["total_columns"]),
            str(row["width"]),
        )

    console.print(details_table)
