# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from calgrid import configuration
from calgrid.errors import InvalidCalendarConfiguration
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.terminal.custom_typer import AliasedTyperGroup
from calgrid.terminal.parse import parse_color
from calgrid.view.view.util import format_enabled

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("interval_minutes", str(config["interval_minutes"]))
    table.add_row("start_hour", str(config["start_hour"]))
    table.add_row("end_hour", str(config["end_hour"]))
    table.add_row("auto_height", format_enabled(config["auto_height"]))
    table.add_row("show_overlapping", format_enabled(config["show_overlapping"]))
    table.add_row("overscan", str(config["overscan"]))
    table.add_row("is_mobile", format_enabled(config["is_mobile"]))
    table.add_row("show_header", format_enabled(config["show_header"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "precompute_colors",
        ", ".join(config["precompute_colors"])
        if config["precompute_colors"]
        else "None",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    interval_minutes: Annotated[
        Optional[int],
        typer.Option("--interval", "-i", help="valid inputs: 15, 30, 60"),
    ] = None,
    start_hour: Annotated[
        Optional[int], typer.Option("--start-hour", min=0, max=23)
    ] = None,
    end_hour: Annotated[
        Optional[int], typer.Option("--end-hour", min=0, max=23)
    ] = None,
    auto_height: Annotated[
        Optional[bool], typer.Option("--auto-height/--no-auto-height")
    ] = None,
    show_overlapping: Annotated[
        Optional[bool],
        typer.Option(
            "--show-overlapping/--no-show-overlapping",
            help="lay overlapping events out side by side",
        ),
    ] = None,
    overscan: Annotated[Optional[int], typer.Option("--overscan", min=0)] = None,
    is_mobile: Annotated[Optional[bool], typer.Option("--mobile/--desktop")] = None,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--no-show-header")
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"valid inputs: {', '.join(configuration.LOG_LEVELS)}",
        ),
    ] = None,
    precompute_colors: Annotated[
        Optional[list[str]],
        typer.Option(
            "--precompute-color",
            parser=parse_color,
            help="color warmed into the palette cache at startup (repeatable)",
        ),
    ] = None,
    remove_precompute_colors: Annotated[
        bool, typer.Option("--remove-precompute-colors")
    ] = False,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in configuration.LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(configuration.LOG_LEVELS)}"
        )

    try:
        CONFIGURATION_REPO.update_config(
            interval_minutes=interval_minutes,
            start_hour=start_hour,
            end_hour=end_hour,
            auto_height=auto_height,
            show_overlapping=show_overlapping,
            overscan=overscan,
            is_mobile=is_mobile,
            show_header=show_header,
            log_level=log_level,
            precompute_colors=precompute_colors,
            remove_precompute_colors=remove_precompute_colors,
        )
    except InvalidCalendarConfiguration as e:
        raise typer.BadParameter(str(e))

    view()
