# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttline import configuration
from ganttline.model.chart_options import GridLines


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw_config: Any = None
        if configuration.APP_CONFIG_PATH.is_file():
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is not a mapping"
            )

        # Fill in keys added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in raw_config:
                raw_config[key] = value

        self._config = raw_config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        timezone: Optional[str] = None,
        chart_title: Optional[str] = None,
        timeline_months: Optional[int] = None,
        pixels_per_day: Optional[float] = None,
        min_zoom: Optional[float] = None,
        max_zoom: Optional[float] = None,
        row_height: Optional[float] = None,
        bar_height: Optional[float] = None,
        padding: Optional[float] = None,
        grid_lines: Optional[GridLines] = None,
        show_priority_column: Optional[bool] = None,
        colors: Optional[dict[str, str]] = None,
        remove_colors: bool = False,
        screen_width: Optional[float] = None,
        screen_height: Optional[float] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if timezone is not None:
            self.config["timezone"] = timezone
        if chart_title is not None:
            # An empty title clears it
            self.config["chart_title"] = chart_title or None
        if timeline_months is not None:
            self.config["timeline_months"] = timeline_months
        if pixels_per_day is not None:
            self.config["pixels_per_day"] = pixels_per_day
        if min_zoom is not None:
            self.config["min_zoom"] = min_zoom
        if max_zoom is not None:
            self.config["max_zoom"] = max_zoom
        if row_height is not None:
            self.config["row_height"] = row_height
        if bar_height is not None:
            self.config["bar_height"] = bar_height
        if padding is not None:
            self.config["padding"] = padding
        if grid_lines is not None:
            self.config["grid_lines"] = grid_lines
        if show_priority_column is not None:
            self.config["show_priority_column"] = show_priority_column
        if colors is not None:
            current_colors = self.config["colors"] or {}
            current_colors.update(colors)
            self.config["colors"] = current_colors
        if remove_colors:
            self.config["colors"] = None
        if screen_width is not None:
            self.config["screen_width"] = screen_width
        if screen_height is not None:
            self.config["screen_height"] = screen_height


CONFIGURATION_REPO = ConfigurationRepository()
