# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, TypeAlias

from ganttline.model.interval_thresholds import (
    IntervalThresholds,
    get_default_interval_thresholds,
)

GridLines: TypeAlias = Literal["horizontal", "vertical", "both", "none"]

GRID_LINES: list[GridLines] = ["horizontal", "vertical", "both", "none"]


class ChartOptions(TypedDict):
    chart_title: Optional[str]
    timeline_months: int
    pixels_per_day: float
    min_zoom: float
    max_zoom: float
    row_height: float
    bar_height: float
    padding: float
    margin_top: float
    margin_bottom: float
    grid_lines: GridLines
    show_priority_column: bool
    colors: Optional[dict[str, str]]
    interval_thresholds: IntervalThresholds


def get_default_chart_options() -> ChartOptions:
    return {
        "chart_title": None,
        "timeline_months": 12,
        "pixels_per_day": 30,
        "min_zoom": 0.2,
        "max_zoom": 5.0,
        "row_height": 40,
        "bar_height": 28,
        "padding": 6,
        "margin_top": 50,
        "margin_bottom": 30,
        "grid_lines": "vertical",
        "show_priority_column": True,
        "colors": None,
        "interval_thresholds": get_default_interval_thresholds(),
    }
