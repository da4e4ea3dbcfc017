# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ganttline.color import get_priority_color
from ganttline.model.item import Item
from ganttline.time import datetime_to_display_date_str


def items_view(
    items: list[Item],
    colors: Optional[dict[str, str]] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the items with their dates, progress and detail lines."""
    if console is None:
        console = Console()

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Priority", justify="right")
    table.add_column("Name")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Progress", justify="right")
    table.add_column("Details")

    for item in items:
        color = item.get("color") or get_priority_color(item["priority"], colors)
        progress = item.get("progress")
        table.add_row(
            str(item["id"]),
            f"{item['priority']:g}",
            Text(item["name"], style=color),
            datetime_to_display_date_str(item["start"]),
            datetime_to_display_date_str(item["end"]),
            f"{progress:g}%" if progress is not None else "",
            "\n".join(item.get("item_list") or []),
        )

    console.print(table)
