# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from calgrid.errors import InvalidCalendarConfiguration
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.service.calendar_configuration import build_calendar_configuration
from calgrid.service.time_slot import (
    generate_time_slots,
    get_current_time_slot_index,
    get_item_height,
)
from calgrid.time import now_local
from calgrid.view.view.views.slots import time_slots_view


def slots(
    interval: Annotated[
        Optional[int],
        typer.Option("--interval", "-i", help="valid inputs: 15, 30, 60"),
    ] = None,
    start_hour: Annotated[
        Optional[int], typer.Option("--start-hour", "-s", min=0, max=23)
    ] = None,
    end_hour: Annotated[
        Optional[int], typer.Option("--end-hour", "-e", min=0, max=23)
    ] = None,
    mobile: Annotated[
        Optional[bool],
        typer.Option("--mobile/--desktop", help="row height for mobile or desktop"),
    ] = None,
) -> None:
    """Show the time slot grid for the stored configuration."""
    config = CONFIGURATION_REPO.get_config()
    overrides: dict[str, object] = dict(config)
    if interval is not None:
        overrides["interval_minutes"] = interval
    if start_hour is not None:
        overrides["start_hour"] = start_hour
    if end_hour is not None:
        overrides["end_hour"] = end_hour

    try:
        calendar_configuration = build_calendar_configuration(overrides)
    except InvalidCalendarConfiguration as e:
        raise typer.BadParameter(str(e))

    is_mobile = config["is_mobile"] if mobile is None else mobile
    slot_list = generate_time_slots(calendar_configuration)

    time_slots_view(
        slot_list,
        calendar_configuration,
        get_item_height(calendar_configuration, is_mobile),
        current_index=get_current_time_slot_index(slot_list, now_local()),
    )
