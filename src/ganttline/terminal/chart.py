# SPDX-License-Identifier: MIT

import logging

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ganttline.configuration import chart_options_from_configuration
from ganttline.model.item import Item
from ganttline.model.render_frame import RenderFrame
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.repository.item import ItemFileError, ItemRepository
from ganttline.service.chart import GanttChart, sort_items_by_priority
from ganttline.terminal.parse import Action, parse_action
from ganttline.view.gantt import gantt_view, ticks_view
from ganttline.view.header import header
from ganttline.view.items import items_view

logger = logging.getLogger(__name__)

ItemsArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML file with a list of items (id, priority, name, start, end)",
    ),
]
ScreenWidthOption = Annotated[
    Optional[float],
    typer.Option("--screen-width", "-sw", help="Screen width in pixels"),
]
ScreenHeightOption = Annotated[
    Optional[float],
    typer.Option("--screen-height", "-sh", help="Screen height in pixels"),
]
ActionOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--action",
        "-a",
        help="Viewport action applied in order: zoom:D, zoom-at:D:X:Y, pan:DX[:DY], reset",
    ),
]


def apply_action(chart: GanttChart, action: Action) -> bool:
    """Apply one parsed action to the chart; return whether the view changed."""
    match action["kind"]:
        case "zoom":
            return chart.zoom(action["delta"])
        case "zoom-at":
            return chart.zoom_at_point(
                action["delta"], action["x"] or 0.0, action["y"] or 0.0
            )
        case "pan":
            return chart.pan(action["x"] or 0.0, action["y"] or 0.0)
        case "reset":
            chart.reset_zoom()
            return True
    raise ValueError(f"Unknown action: {action['kind']}")


def _load_items(items_path: Path, tz: str) -> list[Item]:
    try:
        return ItemRepository(items_path, tz=tz).get_all_items()
    except ItemFileError as e:
        raise typer.BadParameter(str(e), param_hint="ITEMS") from e


def _build_chart(
    items_path: Path,
    screen_width: Optional[float],
    screen_height: Optional[float],
    actions: Optional[list[str]],
    title: Optional[str] = None,
) -> tuple[GanttChart, RenderFrame]:
    config = CONFIGURATION_REPO.get_config()
    parsed_actions = [parse_action(action) for action in actions or []]

    options = chart_options_from_configuration(config)
    if title is not None:
        options["chart_title"] = title or None

    chart = GanttChart(
        _load_items(items_path, config["timezone"]),
        screen_width if screen_width is not None else config["screen_width"],
        screen_height if screen_height is not None else config["screen_height"],
        options=options,
    )
    for action in parsed_actions:
        if not apply_action(chart, action):
            logger.debug("Action %s left the view unchanged", action["kind"])

    frame = chart.last_frame if chart.last_frame is not None else chart.render()
    return chart, frame


def show(
    items_path: ItemsArgument,
    columns: Annotated[
        Optional[int],
        typer.Option(
            "--columns",
            "-c",
            help="Character width of the chart (defaults to the terminal width)",
        ),
    ] = None,
    screen_width: ScreenWidthOption = None,
    screen_height: ScreenHeightOption = None,
    actions: ActionOption = None,
    left_column_width: Annotated[
        int,
        typer.Option("--left-column-width", "-lw", help="Width of the item column"),
    ] = 24,
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="Title shown above the chart"),
    ] = None,
) -> None:
    """Draw the items as a gantt chart in the terminal."""
    chart, frame = _build_chart(
        items_path, screen_width, screen_height, actions, title=title
    )
    config = CONFIGURATION_REPO.get_config()

    header(items_path.name, f"zoom {frame['zoom_level']:.0%}")
    gantt_view(
        frame,
        chart.items,
        columns if columns is not None else Console().width,
        left_column_width=left_column_width,
        show_priority_column=config["show_priority_column"],
        colors=config["colors"],
    )


def ticks(
    items_path: ItemsArgument,
    screen_width: ScreenWidthOption = None,
    screen_height: ScreenHeightOption = None,
    actions: ActionOption = None,
) -> None:
    """List the primary and secondary ticks of the visible timeline."""
    _, frame = _build_chart(items_path, screen_width, screen_height, actions)

    header(items_path.name, "ticks")
    ticks_view(frame)


def items(items_path: ItemsArgument) -> None:
    """List the items in chart order with their detail lines."""
    config = CONFIGURATION_REPO.get_config()
    loaded = sort_items_by_priority(_load_items(items_path, config["timezone"]))

    header(items_path.name, f"{len(loaded)} items")
    items_view(loaded, colors=config["colors"])
