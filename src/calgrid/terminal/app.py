# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from calgrid import configuration as app_configuration
from calgrid.log import configure_logging
from calgrid.terminal import configuration
from calgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from calgrid.terminal.layout import layout
from calgrid.terminal.palette import palette
from calgrid.terminal.slots import slots
from calgrid.terminal.window import window
from calgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="calgrid - Inspect calendar layouts, slot grids and palettes",
    no_args_is_help=True,
)
app.command(name="layout, l")(layout)
app.command(name="slots, s")(slots)
app.command(name="window, w")(window)
app.command(name="palette, p")(palette)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"Override the configured log level ({', '.join(app_configuration.LOG_LEVELS)})",
        ),
    ] = None,
) -> None:
    """
    calgrid - Inspect calendar layouts, slot grids and palettes

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if log_level is not None:
        configure_logging(log_level)


def run() -> None:
    app()
