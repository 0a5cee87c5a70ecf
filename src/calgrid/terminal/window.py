# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from calgrid.errors import InvalidViewport
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.service.time_slot import get_item_height
from calgrid.service.virtualization import compute_virtual_window, virtual_items
from calgrid.view.view.views.window import virtual_window_view


def window(
    item_count: Annotated[int, typer.Argument(min=0, help="total number of items")],
    scroll_offset: Annotated[
        float, typer.Option("--scroll-offset", "-s", min=0, help="pixels")
    ] = 0,
    container_height: Annotated[
        float, typer.Option("--container-height", "-c", min=0, help="pixels")
    ] = 600,
    item_height: Annotated[
        Optional[float],
        typer.Option(
            "--item-height",
            "-i",
            help="pixels (defaults to the slot height of the stored configuration)",
        ),
    ] = None,
    overscan: Annotated[
        Optional[int],
        typer.Option("--overscan", "-o", min=0, help="extra items on each side"),
    ] = None,
) -> None:
    """Show which items of a long list are mounted for a scroll position."""
    config = CONFIGURATION_REPO.get_config()

    if item_height is None:
        item_height = get_item_height(
            CONFIGURATION_REPO.get_calendar_configuration(), config["is_mobile"]
        )
    if overscan is None:
        overscan = config["overscan"]

    try:
        virtual_window = compute_virtual_window(
            item_count, item_height, container_height, scroll_offset, overscan
        )
    except InvalidViewport as e:
        raise typer.BadParameter(str(e))

    virtual_window_view(
        item_count,
        virtual_window,
        virtual_items(virtual_window, item_height),
        scroll_offset,
        container_height,
    )
