# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ganttline import configuration
from ganttline.model.chart_options import GRID_LINES
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.parse import parse_color

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("timezone", config["timezone"])
    table.add_row("chart_title", config["chart_title"] or "")
    table.add_row("timeline_months", str(config["timeline_months"]))
    table.add_row("pixels_per_day", str(config["pixels_per_day"]))
    table.add_row("min_zoom", str(config["min_zoom"]))
    table.add_row("max_zoom", str(config["max_zoom"]))
    table.add_row("row_height", str(config["row_height"]))
    table.add_row("bar_height", str(config["bar_height"]))
    table.add_row("padding", str(config["padding"]))
    table.add_row("grid_lines", config["grid_lines"])
    table.add_row("show_priority_column", _enabled(config["show_priority_column"]))
    table.add_row("screen_width", str(config["screen_width"]))
    table.add_row("screen_height", str(config["screen_height"]))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)

    colors = config["colors"]
    if colors:
        console.print("\n[bold]Priority Colors[/bold]")
        colors_table = Table()
        colors_table.add_column("Priority", style="cyan")
        colors_table.add_column("Color")
        for level, color in sorted(colors.items()):
            colors_table.add_row(level, f"[{color}]{color}[/{color}]")
        console.print(colors_table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above charts",
        ),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="Timezone item dates are read in"),
    ] = None,
    chart_title: Annotated[
        Optional[str],
        typer.Option("--chart-title", help="Title shown above charts (empty clears it)"),
    ] = None,
    timeline_months: Annotated[
        Optional[int],
        typer.Option("--timeline-months", help="Minimum timeline span in months"),
    ] = None,
    pixels_per_day: Annotated[
        Optional[float],
        typer.Option("--pixels-per-day", help="World pixels per day at zoom 100%"),
    ] = None,
    min_zoom: Annotated[
        Optional[float],
        typer.Option("--min-zoom", help="Lowest zoom level (1.0 = whole timeline)"),
    ] = None,
    max_zoom: Annotated[
        Optional[float],
        typer.Option("--max-zoom", help="Highest zoom level"),
    ] = None,
    row_height: Annotated[
        Optional[float], typer.Option("--row-height", help="Row height in pixels")
    ] = None,
    bar_height: Annotated[
        Optional[float], typer.Option("--bar-height", help="Bar height in pixels")
    ] = None,
    padding: Annotated[
        Optional[float],
        typer.Option("--padding", help="Padding above a bar within its row"),
    ] = None,
    grid_lines: Annotated[
        Optional[str],
        typer.Option(
            "--grid-lines", help="Grid lines: horizontal, vertical, both or none"
        ),
    ] = None,
    show_priority_column: Annotated[
        Optional[bool],
        typer.Option(
            "--show-priority-column/--no-show-priority-column",
            help="Show the priority badge column",
        ),
    ] = None,
    colors: Annotated[
        Optional[list[str]],
        typer.Option(
            "--color",
            help="Priority color as LEVEL=COLOR (accepts multiple)",
        ),
    ] = None,
    remove_colors: Annotated[
        bool, typer.Option("--remove-colors", help="Remove all configured colors")
    ] = False,
    screen_width: Annotated[
        Optional[float],
        typer.Option("--screen-width", help="Default screen width in pixels"),
    ] = None,
    screen_height: Annotated[
        Optional[float],
        typer.Option("--screen-height", help="Default screen height in pixels"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if min_zoom is not None and min_zoom <= 0:
        raise typer.BadParameter("--min-zoom must be positive")
    if max_zoom is not None and max_zoom <= 0:
        raise typer.BadParameter("--max-zoom must be positive")
    if grid_lines is not None and grid_lines not in GRID_LINES:
        raise typer.BadParameter(
            f"--grid-lines must be one of: {', '.join(GRID_LINES)}"
        )

    current = CONFIGURATION_REPO.get_config()
    new_min_zoom = min_zoom if min_zoom is not None else current["min_zoom"]
    new_max_zoom = max_zoom if max_zoom is not None else current["max_zoom"]
    if new_min_zoom > new_max_zoom:
        raise typer.BadParameter(
            f"min zoom ({new_min_zoom}) must not exceed max zoom ({new_max_zoom})"
        )

    parsed_colors: Optional[dict[str, str]] = None
    if colors is not None:
        parsed_colors = dict(parse_color(color) for color in colors)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        timezone=timezone,
        chart_title=chart_title,
        timeline_months=timeline_months,
        pixels_per_day=pixels_per_day,
        min_zoom=min_zoom,
        max_zoom=max_zoom,
        row_height=row_height,
        bar_height=bar_height,
        padding=padding,
        grid_lines=grid_lines,  # type: ignore[arg-type]
        show_priority_column=show_priority_column,
        colors=parsed_colors,
        remove_colors=remove_colors,
        screen_width=screen_width,
        screen_height=screen_height,
    )
    CONFIGURATION_REPO.flush()

    view()
