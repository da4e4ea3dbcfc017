# SPDX-License-Identifier: MIT

import math
from typing import Optional

# Default palette per whole priority level
PRIORITY_PALETTE = {
    "1": "#38bdf8",
    "2": "#34d399",
    "3": "#fbbf24",
    "4": "#f472b6",
    "5": "#a78bfa",
}
DEFAULT_PRIORITY_COLOR = "#9ca3af"

TODAY_MARKER_COLOR = "bright_red"
GRID_LINE_COLOR = "grey35"
PRIMARY_LABEL_COLOR = "bold cyan"
CHART_TITLE_COLOR = "bold dark_orange"
SECONDARY_LABEL_COLOR = "cyan"


def priority_level(priority: float) -> str:
    return str(math.floor(priority))


def get_priority_color(
    priority: float, configured_colors: Optional[dict[str, str]] = None
) -> str:
    """Return the color for a priority, configured colors first.

    Colors are keyed by the whole priority level, so 2.0 and 2.7 share one.
    """
    level = priority_level(priority)
    if configured_colors and level in configured_colors:
        return configured_colors[level]
    return PRIORITY_PALETTE.get(level, DEFAULT_PRIORITY_COLOR)


def lighten_darken_color(color: str, percent: float) -> str:
    """Scale each channel of a "#rrggbb" color by ``percent`` (negative darkens)."""
    has_pound = color.startswith("#")
    value = int(color[1:] if has_pound else color, 16)

    channels = [(value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF]
    scaled = [
        min(255, max(0, round(channel * (1 + percent / 100)))) for channel in channels
    ]
    hex_color = "".join(f"{channel:02x}" for channel in scaled)
    return f"#{hex_color}" if has_pound else hex_color
