# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from ganttline.color import (
    CHART_TITLE_COLOR,
    GRID_LINE_COLOR,
    PRIMARY_LABEL_COLOR,
    SECONDARY_LABEL_COLOR,
    TODAY_MARKER_COLOR,
    get_priority_color,
    lighten_darken_color,
)
from ganttline.model.geometry import BarGeometry
from ganttline.model.item import Item, ItemId
from ganttline.model.render_frame import RenderFrame
from ganttline.model.tick import Tick
from ganttline.time import datetime_to_display_date_str

BAR_CHAR = "█"
PROGRESS_CHAR = "█"
PRIMARY_TICK_CHAR = "┬"
SECONDARY_TICK_CHAR = "╷"
TODAY_CHAR = "│"
BASELINE_CHAR = "─"
VERTICAL_GRID_CHAR = "┊"
HORIZONTAL_GRID_CHAR = "┈"


def to_column(x: float, screen_width: float, chart_columns: int) -> int:
    """Map a screen x in pixels to a character column of the chart area."""
    if screen_width <= 0:
        return 0
    return math.floor(x * chart_columns / screen_width)


def gantt_view(
    frame: RenderFrame,
    items: list[Item],
    columns: int,
    left_column_width: int = 24,
    show_priority_column: bool = True,
    colors: Optional[dict[str, str]] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Draw a render frame in the terminal.

    The screen width of the frame is mapped onto the character columns left
    after the item column. An optional title row comes first, then header
    rows with the kept primary and secondary labels; each visible item gets
    one row with its bar, progress, the today marker and the configured grid
    lines in empty cells.

    Args:
        frame: The frame produced by GanttChart.render()
        items: The chart's items, in row order
        columns: Total character width to draw
        left_column_width: Width of the priority/name column
        show_priority_column: Whether to prefix rows with the priority badge
        colors: Configured priority colors
        console: Console to print to (a new one by default)
    """
    if console is None:
        console = Console()

    console.print(
        build_gantt(
            frame,
            items,
            columns,
            left_column_width=left_column_width,
            show_priority_column=show_priority_column,
            colors=colors,
        )
    )


def build_gantt(
    frame: RenderFrame,
    items: list[Item],
    columns: int,
    left_column_width: int = 24,
    show_priority_column: bool = True,
    colors: Optional[dict[str, str]] = None,
) -> Group:
    chart_columns = max(1, columns - left_column_width)
    screen_width = frame["screen_width"]

    rows: list[Text] = []
    if frame["chart_title"]:
        rows.append(
            Text(" " * left_column_width)
            + Text(frame["chart_title"], style=CHART_TITLE_COLOR)
        )

    rows += [
        _build_label_row(
            frame["primary_labels"],
            screen_width,
            chart_columns,
            left_column_width,
            PRIMARY_LABEL_COLOR,
        ),
        _build_label_row(
            frame["secondary_labels"],
            screen_width,
            chart_columns,
            left_column_width,
            SECONDARY_LABEL_COLOR,
        ),
        _build_tick_row(
            frame["primary_ticks"],
            frame["secondary_ticks"],
            screen_width,
            chart_columns,
            left_column_width,
        ),
    ]

    grid_lines = frame["grid_lines"]
    grid_columns: set[int] = set()
    if grid_lines in ("vertical", "both"):
        grid_columns = {
            to_column(tick["x"], screen_width, chart_columns)
            for tick in frame["primary_ticks"]
        }
    horizontal_grid = grid_lines in ("horizontal", "both")

    items_by_id: dict[ItemId, Item] = {item["id"]: item for item in items}
    today_column: Optional[int] = None
    if frame["today_x"] is not None:
        today_column = to_column(frame["today_x"], screen_width, chart_columns)

    for bar in frame["bars"]:
        if bar["y"] + bar["height"] < 0 or bar["y"] > frame["screen_height"]:
            continue
        item = items_by_id.get(bar["item_id"])
        if item is None:
            continue
        rows.append(
            _build_bar_row(
                bar,
                item,
                screen_width,
                chart_columns,
                left_column_width,
                today_column,
                grid_columns,
                horizontal_grid,
                show_priority_column,
                colors,
            )
        )

    return Group(*rows)


def _build_label_row(
    labels: list[Tick],
    screen_width: float,
    chart_columns: int,
    left_column_width: int,
    style: str,
) -> Text:
    """Place labels centered on their tick column, skipping any that would overlap."""
    row = Text(" " * left_column_width)
    cells = [" "] * chart_columns
    last_end = -1

    for tick in labels:
        column = to_column(tick["x"], screen_width, chart_columns)
        if not 0 <= column < chart_columns or len(tick["label"]) > chart_columns:
            continue
        start = column - len(tick["label"]) // 2
        start = max(0, min(start, chart_columns - len(tick["label"])))
        if start <= last_end:
            continue
        for offset, char in enumerate(tick["label"]):
            cells[start + offset] = char
        last_end = start + len(tick["label"])

    row.append("".join(cells), style=style)
    return row


def _build_tick_row(
    primary_ticks: list[Tick],
    secondary_ticks: list[Tick],
    screen_width: float,
    chart_columns: int,
    left_column_width: int,
) -> Text:
    cells = [BASELINE_CHAR] * chart_columns
    for tick in secondary_ticks:
        column = to_column(tick["x"], screen_width, chart_columns)
        if 0 <= column < chart_columns:
            cells[column] = SECONDARY_TICK_CHAR
    for tick in primary_ticks:
        column = to_column(tick["x"], screen_width, chart_columns)
        if 0 <= column < chart_columns:
            cells[column] = PRIMARY_TICK_CHAR

    row = Text(" " * left_column_width)
    row.append("".join(cells), style=GRID_LINE_COLOR)
    return row


def _format_left_column(
    item: Item, left_column_width: int, show_priority_column: bool, color: str
) -> Text:
    text = Text()
    used = 0
    if show_priority_column:
        badge = f" {item['priority']:.1f} "
        text.append(badge, style=f"bold black on {color}")
        text.append(" ")
        used = len(badge) + 1

    name_width = max(0, left_column_width - used - 1)
    name = item["name"]
    if len(name) > name_width:
        name = name[: max(0, name_width - 1)] + "…" if name_width > 0 else ""
    text.append(name.ljust(name_width))
    text.append(" ")
    return text


def _build_bar_row(
    bar: BarGeometry,
    item: Item,
    screen_width: float,
    chart_columns: int,
    left_column_width: int,
    today_column: Optional[int],
    grid_columns: set[int],
    horizontal_grid: bool,
    show_priority_column: bool,
    colors: Optional[dict[str, str]],
) -> Text:
    color = item.get("color") or get_priority_color(item["priority"], colors)
    progress_color = lighten_darken_color(color, -20) if color.startswith("#") else color

    start_column = to_column(bar["x"], screen_width, chart_columns)
    end_column = max(
        start_column + 1, to_column(bar["x"] + bar["width"], screen_width, chart_columns)
    )
    progress_end_column = to_column(
        bar["x"] + bar["progress_width"], screen_width, chart_columns
    )

    row = _format_left_column(item, left_column_width, show_priority_column, color)
    for column in range(chart_columns):
        if start_column <= column < end_column:
            if bar["progress_width"] > 0 and column < progress_end_column:
                row.append(PROGRESS_CHAR, style=progress_color)
            else:
                row.append(BAR_CHAR, style=color)
        elif column == today_column:
            row.append(TODAY_CHAR, style=TODAY_MARKER_COLOR)
        elif column in grid_columns:
            row.append(VERTICAL_GRID_CHAR, style=GRID_LINE_COLOR)
        elif horizontal_grid:
            row.append(HORIZONTAL_GRID_CHAR, style=GRID_LINE_COLOR)
        else:
            row.append(" ")
    return row


def ticks_view(frame: RenderFrame, console: Optional[Console] = None) -> None:
    """Print the primary and secondary ticks of a frame as a table."""
    if console is None:
        console = Console()

    visible_range = frame["visible_range"]
    table = Table(
        title=(
            f"{datetime_to_display_date_str(visible_range['min_date'])} → "
            f"{datetime_to_display_date_str(visible_range['max_date'])}"
            f"  (zoom {frame['zoom_level']:.0%})"
        )
    )
    table.add_column("Tier", style="sandy_brown")
    table.add_column("Unit")
    table.add_column("x", justify="right")
    table.add_column("Label", style="bold cyan")
    table.add_column("Shown", justify="center")

    tiers = [
        ("primary", frame["primary_unit"], frame["primary_ticks"], frame["primary_labels"]),
        (
            "secondary",
            frame["secondary_unit"],
            frame["secondary_ticks"],
            frame["secondary_labels"],
        ),
    ]
    for tier, unit, ticks, labels in tiers:
        shown = {id(tick) for tick in labels}
        for tick in ticks:
            table.add_row(
                tier,
                unit or "",
                f"{tick['x']:.1f}",
                tick["label"],
                "✓" if id(tick) in shown else "",
            )

    console.print(table)
