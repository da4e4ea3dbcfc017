# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from ganttline.model.chart_options import GridLines
from ganttline.model.date_range import DateRange
from ganttline.model.geometry import BarGeometry
from ganttline.model.tick import Tick
from ganttline.model.time_unit import TimeUnit
from ganttline.model.view_box import ViewBox


class RenderFrame(TypedDict):
    view_box: ViewBox
    zoom_level: float
    screen_width: float
    screen_height: float
    visible_range: DateRange
    primary_unit: Optional[TimeUnit]
    secondary_unit: Optional[TimeUnit]
    primary_ticks: list[Tick]
    secondary_ticks: list[Tick]
    primary_labels: list[Tick]
    secondary_labels: list[Tick]
    bars: list[BarGeometry]
    today_x: Optional[float]
    chart_title: Optional[str]
    grid_lines: GridLines
