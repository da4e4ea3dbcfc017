# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Optional, Sequence, TypeAlias

import pendulum

from ganttline.color import get_priority_color
from ganttline.model.chart_options import (
    GRID_LINES,
    ChartOptions,
    get_default_chart_options,
)
from ganttline.model.date_range import DateRange
from ganttline.model.item import Item, ItemId
from ganttline.model.render_frame import RenderFrame
from ganttline.model.tick import Tick
from ganttline.time import duration_in_days, now_local
from ganttline.timeline.date_range import calculate_date_range
from ganttline.timeline.geometry import ItemGeometryIndex, compute_bar_geometry
from ganttline.timeline.interval import get_adaptive_intervals
from ganttline.timeline.label import layout_tick_labels
from ganttline.timeline.scale import XScale, create_x_inverse, create_x_scale
from ganttline.timeline.viewport import ViewportController

logger = logging.getLogger(__name__)

Renderer: TypeAlias = Callable[[RenderFrame], None]

# Options that change the date range or the world size
WORLD_OPTIONS = frozenset(
    {"timeline_months", "pixels_per_day", "row_height", "margin_top", "margin_bottom"}
)


def sort_items_by_priority(items: Sequence[Item]) -> list[Item]:
    return sorted(items, key=lambda item: item["priority"])


class GanttChart:
    """
    Ties the timeline engine together for one drawing region.

    Every state change (zoom, pan, reset, new items, resized screen) ends in
    render(), which derives the visible range, a fresh screen scale, ticks and
    bar geometry, and hands the resulting RenderFrame to each renderer.
    """

    def __init__(
        self,
        items: Sequence[Item],
        screen_width: float,
        screen_height: float,
        options: Optional[ChartOptions] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> None:
        self.options: ChartOptions = (
            deepcopy(options) if options is not None else get_default_chart_options()
        )
        self._now = now
        self._renderers: list[Renderer] = []
        self.geometry = ItemGeometryIndex()
        self.last_frame: Optional[RenderFrame] = None

        self._source_items = list(items)
        self.items = self.__preprocess_items(items)
        self.date_range = calculate_date_range(
            self.items, self.options["timeline_months"], now=self._now
        )
        world_width, world_height = self.__world_size(screen_width)
        self.viewport = ViewportController(
            world_width,
            world_height,
            screen_width,
            screen_height,
            min_zoom=self.options["min_zoom"],
            max_zoom=self.options["max_zoom"],
        )

    def __preprocess_items(self, items: Sequence[Item]) -> list[Item]:
        preprocessed: list[Item] = []
        for item in sort_items_by_priority(items):
            item_copy = item.copy()
            if not item_copy.get("color"):
                item_copy["color"] = get_priority_color(
                    item["priority"], self.options["colors"]
                )
            preprocessed.append(item_copy)
        return preprocessed

    def __world_size(self, screen_width: float) -> tuple[float, float]:
        days = duration_in_days(self.date_range["min_date"], self.date_range["max_date"])
        world_width = max(screen_width, days * self.options["pixels_per_day"])
        world_height = (
            self.options["margin_top"]
            + len(self.items) * self.options["row_height"]
            + self.options["margin_bottom"]
        )
        return world_width, world_height

    def add_renderer(self, renderer: Renderer) -> None:
        self._renderers.append(renderer)

    def remove_renderer(self, renderer: Renderer) -> None:
        self._renderers.remove(renderer)

    @property
    def zoom_level(self) -> float:
        return self.viewport.zoom_level

    def today(self) -> pendulum.DateTime:
        now = self._now if self._now is not None else now_local()
        return now.start_of("day")

    def screen_scale(self) -> XScale:
        """Map a date to a screen x for the current view box."""
        view_box = self.viewport.view_box
        ratio_x, _ = self.viewport.screen_to_world_ratio()
        return create_x_scale(
            self.date_range,
            self.viewport.world_width / ratio_x,
            -view_box["x"] / ratio_x,
        )

    def __visible_world_span(self) -> tuple[float, float]:
        view_box = self.viewport.view_box
        start = max(0.0, view_box["x"])
        end = min(self.viewport.world_width, view_box["x"] + view_box["width"])
        return start, end

    def visible_date_range(self) -> DateRange:
        """Dates covered by the view box, clipped to the overall range."""
        start, end = self.__visible_world_span()
        if end <= start:
            return {
                "min_date": self.date_range["min_date"],
                "max_date": self.date_range["max_date"],
            }
        inverse = create_x_inverse(self.date_range, self.viewport.world_width, 0)
        return {"min_date": inverse(start), "max_date": inverse(end)}

    def visible_screen_width(self) -> float:
        start, end = self.__visible_world_span()
        ratio_x, _ = self.viewport.screen_to_world_ratio()
        return max(0.0, end - start) / ratio_x

    def render(self) -> RenderFrame:
        visible_range = self.visible_date_range()
        visible_width = self.visible_screen_width()
        scale = self.screen_scale()
        thresholds = self.options["interval_thresholds"]

        intervals = get_adaptive_intervals(
            visible_range["min_date"],
            visible_range["max_date"],
            visible_width,
            thresholds,
        )
        primary = intervals.get("primary")
        secondary = intervals.get("secondary")

        primary_ticks: list[Tick] = []
        secondary_ticks: list[Tick] = []
        if primary is not None:
            primary_ticks = primary.get_ticks(
                visible_range["min_date"],
                visible_range["max_date"],
                scale,
                visible_width,
            )
        if secondary is not None:
            secondary_ticks = secondary.get_ticks(
                visible_range["min_date"],
                visible_range["max_date"],
                scale,
                visible_width,
            )
        labels = layout_tick_labels(primary_ticks, secondary_ticks, thresholds)

        view_box = self.viewport.view_box
        _, ratio_y = self.viewport.screen_to_world_ratio()
        bars = [
            compute_bar_geometry(
                item,
                index,
                scale,
                row_height=self.options["row_height"],
                bar_height=self.options["bar_height"],
                padding=self.options["padding"],
                margin_top=self.options["margin_top"],
                y_offset=view_box["y"],
                y_ratio=ratio_y,
            )
            for index, item in enumerate(self.items)
        ]
        self.geometry.update(bars)

        today = self.today()
        today_x: Optional[float] = None
        if visible_range["min_date"] <= today <= visible_range["max_date"]:
            today_x = scale(today)

        frame: RenderFrame = {
            "view_box": view_box,
            "zoom_level": self.viewport.zoom_level,
            "screen_width": self.viewport.screen_width,
            "screen_height": self.viewport.screen_height,
            "visible_range": visible_range,
            "primary_unit": primary.unit if primary is not None else None,
            "secondary_unit": secondary.unit if secondary is not None else None,
            "primary_ticks": primary_ticks,
            "secondary_ticks": secondary_ticks,
            "primary_labels": labels["primary"],
            "secondary_labels": labels["secondary"],
            "bars": bars,
            "today_x": today_x,
            "chart_title": self.options["chart_title"],
            "grid_lines": self.options["grid_lines"],
        }
        self.last_frame = frame

        for renderer in self._renderers:
            renderer(frame)

        logger.debug(
            "Chart rendered at zoom %.3f with %d items (%s/%s)",
            frame["zoom_level"],
            len(bars),
            frame["primary_unit"],
            frame["secondary_unit"],
        )
        return frame

    def __rebuild_world(self) -> None:
        self.date_range = calculate_date_range(
            self.items, self.options["timeline_months"], now=self._now
        )
        world_width, world_height = self.__world_size(self.viewport.screen_width)
        self.viewport.resize_world(world_width, world_height)

    def update_items(self, items: Sequence[Item]) -> None:
        self._source_items = list(items)
        self.items = self.__preprocess_items(items)
        self.__rebuild_world()
        self.render()

    def update_options(self, **changes: Any) -> None:
        """
        Merge option changes into the chart and re-render.

        Changes to the range or world size rebuild the world and reset the
        viewport. New colors recolor the items and new zoom limits re-clamp
        the current zoom level.

        Raises:
            ValueError: On unknown option names, an unknown grid line mode
                or a min_zoom above max_zoom
        """
        unknown = set(changes) - set(self.options)
        if unknown:
            raise ValueError(f"Unknown chart options: {', '.join(sorted(unknown))}")

        options = deepcopy(self.options)
        options.update(deepcopy(changes))  # type: ignore[typeddict-item]
        if options["grid_lines"] not in GRID_LINES:
            raise ValueError(f"Unknown grid lines: {options['grid_lines']}")
        if options["min_zoom"] > options["max_zoom"]:
            raise ValueError("min_zoom must not exceed max_zoom")
        self.options = options

        if "colors" in changes:
            self.items = self.__preprocess_items(self._source_items)
        if WORLD_OPTIONS & changes.keys():
            self.__rebuild_world()
        if {"min_zoom", "max_zoom"} & changes.keys():
            self.viewport.min_zoom = options["min_zoom"]
            self.viewport.max_zoom = options["max_zoom"]
            self.viewport.zoom(0)

        logger.debug("Chart options updated: %s", ", ".join(sorted(changes)))
        self.render()

    def resize(self, screen_width: float, screen_height: float) -> None:
        self.viewport.resize_screen(screen_width, screen_height)
        self.render()

    def zoom(self, delta: float) -> bool:
        changed = self.viewport.zoom(delta)
        if changed:
            self.render()
        return changed

    def zoom_at_point(self, delta: float, screen_x: float, screen_y: float) -> bool:
        changed = self.viewport.zoom_at_point(delta, screen_x, screen_y)
        if changed:
            self.render()
        return changed

    def pan(self, dx_screen: float, dy_screen: float) -> bool:
        changed = self.viewport.pan(dx_screen, dy_screen)
        if changed:
            self.render()
        return changed

    def reset_zoom(self) -> None:
        self.viewport.reset_zoom()
        self.render()

    def get_item(self, item_id: ItemId) -> Optional[Item]:
        for item in self.items:
            if item["id"] == item_id:
                return item
        return None

    def item_at(self, screen_x: float, screen_y: float) -> Optional[Item]:
        item_id = self.geometry.item_at(screen_x, screen_y)
        if item_id is None:
            return None
        return self.get_item(item_id)
