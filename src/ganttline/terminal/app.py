# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from ganttline.logs import configure_logging
from ganttline.terminal import chart, configuration
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="ganttline - Pannable, zoomable gantt timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="show, sh")(chart.show)
app.command(name="ticks, t")(chart.ticks)
app.command(name="items, i")(chart.items)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    ganttline - Pannable, zoomable gantt timelines in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
