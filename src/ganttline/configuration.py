# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import platformdirs

from ganttline.model.chart_options import (
    ChartOptions,
    GridLines,
    get_default_chart_options,
)

APP_NAME = "ganttline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    timezone: str
    chart_title: Optional[str]
    timeline_months: int
    pixels_per_day: float
    min_zoom: float
    max_zoom: float
    row_height: float
    bar_height: float
    padding: float
    grid_lines: GridLines
    show_priority_column: bool
    colors: Optional[dict[str, str]]
    screen_width: float
    screen_height: float


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "timezone": "local",
        "chart_title": None,
        "timeline_months": 12,
        "pixels_per_day": 30,
        "min_zoom": 0.2,
        "max_zoom": 5.0,
        "row_height": 40,
        "bar_height": 28,
        "padding": 6,
        "grid_lines": "vertical",
        "show_priority_column": True,
        "colors": None,
        "screen_width": 1000,
        "screen_height": 400,
    }


def chart_options_from_configuration(config: Configuration) -> ChartOptions:
    options = get_default_chart_options()
    options["chart_title"] = config["chart_title"]
    options["timeline_months"] = config["timeline_months"]
    options["pixels_per_day"] = config["pixels_per_day"]
    options["min_zoom"] = config["min_zoom"]
    options["max_zoom"] = config["max_zoom"]
    options["row_height"] = config["row_height"]
    options["bar_height"] = config["bar_height"]
    options["padding"] = config["padding"]
    options["grid_lines"] = config["grid_lines"]
    options["show_priority_column"] = config["show_priority_column"]
    options["colors"] = config["colors"]
    return options
