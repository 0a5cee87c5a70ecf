# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from calgrid.errors import CalgridError
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.repository.event import EventFileRepository
from calgrid.service.category import collect_event_colors
from calgrid.service.geometry import compute_day_blocks
from calgrid.service.layout import calculate_day_layout, describe_layout
from calgrid.service.overlap import filter_events_for_day
from calgrid.service.time_slot import generate_time_slots, get_item_height
from calgrid.terminal.parse import parse_date
from calgrid.view import state as view_state
from calgrid.view.view.views.layout import day_layout_view, overlap_details_view


def layout(
    events_file: Annotated[
        Path,
        typer.Argument(
            help="YAML file with a top-level 'events' list",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    day: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--day",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1 (defaults to every day in the file)",
        ),
    ] = None,
    details: Annotated[
        bool, typer.Option("--details", help="also list the overlap details")
    ] = False,
    width: Annotated[
        int, typer.Option("--width", "-w", min=10, help="timeline width in characters")
    ] = 40,
) -> None:
    """Show the column layout of the events of one or more days."""
    error_console = Console(stderr=True)
    config = CONFIGURATION_REPO.get_config()
    calendar_configuration = CONFIGURATION_REPO.get_calendar_configuration()
    item_height = get_item_height(calendar_configuration, config["is_mobile"])
    slots = generate_time_slots(calendar_configuration)

    try:
        events = EventFileRepository(events_file).events
    except (CalgridError, ValueError, KeyError) as e:
        error_console.print(
            f"Could not read {events_file}: {e}",
            style="red",
            markup=False,
            soft_wrap=True,
        )
        raise typer.Exit(1)

    if day is not None:
        days = [day]
    else:
        days = sorted({event["day"] for event in events})

    view_state.get_palette_cache().precompute(collect_event_colors(events))

    for current_day in days:
        day_events = filter_events_for_day(events, current_day)
        try:
            day_layout = calculate_day_layout(
                day_events,
                show_overlapping=calendar_configuration["show_overlapping"],
            )
            blocks = compute_day_blocks(
                day_events,
                day_layout,
                calendar_configuration,
                item_height,
                config["is_mobile"],
            )
        except CalgridError as e:
            error_console.print(
                f"{current_day.isoformat()}: {e}",
                style="red",
                markup=False,
                soft_wrap=True,
            )
            raise typer.Exit(1)

        day_layout_view(
            current_day,
            day_events,
            day_layout,
            blocks,
            slots,
            calendar_configuration,
            timeline_width=width,
        )
        if details:
            overlap_details_view(describe_layout(day_layout, day_events))
