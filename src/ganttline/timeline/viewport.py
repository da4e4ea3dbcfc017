# SPDX-License-Identifier: MIT

import logging
import math

from ganttline.model.view_box import ViewBox

logger = logging.getLogger(__name__)

MIN_VIEW_BOX_SIZE = 1.0


class ViewportController:
    """
    Pan/zoom state of the timeline: a ViewBox in world pixels shown on a
    screen rectangle.

    ``zoom_level`` is ``world_width / view_box["width"]``, so 1 means the
    whole world width is visible. Every mutation is followed by constrain()
    before the new box can be read.
    """

    def __init__(
        self,
        world_width: float,
        world_height: float,
        screen_width: float,
        screen_height: float,
        min_zoom: float = 0.2,
        max_zoom: float = 5.0,
    ) -> None:
        self.world_width = world_width
        self.world_height = world_height
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self._view_box: ViewBox = {"x": 0, "y": 0, "width": 1, "height": 1}
        self.reset_zoom()

    @property
    def view_box(self) -> ViewBox:
        return {
            "x": self._view_box["x"],
            "y": self._view_box["y"],
            "width": self._view_box["width"],
            "height": self._view_box["height"],
        }

    @property
    def zoom_level(self) -> float:
        return self.world_width / self._view_box["width"]

    def screen_to_world_ratio(self) -> tuple[float, float]:
        """World pixels per screen pixel along x and y."""
        ratio_x = (
            self._view_box["width"] / self.screen_width if self.screen_width > 0 else 1.0
        )
        ratio_y = (
            self._view_box["height"] / self.screen_height
            if self.screen_height > 0
            else 1.0
        )
        return ratio_x, ratio_y

    def screen_to_world(self, screen_x: float, screen_y: float) -> tuple[float, float]:
        ratio_x, ratio_y = self.screen_to_world_ratio()
        return (
            self._view_box["x"] + screen_x * ratio_x,
            self._view_box["y"] + screen_y * ratio_y,
        )

    def world_to_screen(self, world_x: float, world_y: float) -> tuple[float, float]:
        ratio_x, ratio_y = self.screen_to_world_ratio()
        return (
            (world_x - self._view_box["x"]) / ratio_x,
            (world_y - self._view_box["y"]) / ratio_y,
        )

    def zoom(self, delta: float) -> bool:
        """Zoom anchored at the center of the screen."""
        return self.zoom_at_point(delta, self.screen_width / 2, self.screen_height / 2)

    def zoom_at_point(self, delta: float, anchor_x: float, anchor_y: float) -> bool:
        """
        Zoom by ``delta`` keeping the anchor's world point under the anchor.

        The target zoom level is ``zoom_level * (1 + delta)`` clamped to
        ``[min_zoom, max_zoom]``. The box height scales with the width.

        Args:
            delta: Relative zoom change, positive to zoom in
            anchor_x: Anchor x in screen pixels
            anchor_y: Anchor y in screen pixels

        Returns:
            True if the view box changed, False if the zoom was already at the
            requested (clamped) level
        """
        factor = 1 + delta
        target_zoom = self.zoom_level * factor if factor > 0 else self.min_zoom
        new_zoom = min(self.max_zoom, max(self.min_zoom, target_zoom))
        new_width = self.world_width / new_zoom

        current_width = self._view_box["width"]
        if math.isclose(new_width, current_width, rel_tol=1e-12, abs_tol=0.0):
            logger.debug("Zoom is a no-op at zoom level %.3f", self.zoom_level)
            return False

        anchor_world_x, anchor_world_y = self.screen_to_world(anchor_x, anchor_y)
        relative_x = anchor_x / self.screen_width if self.screen_width > 0 else 0.5
        relative_y = anchor_y / self.screen_height if self.screen_height > 0 else 0.5

        new_height = self._view_box["height"] * new_width / current_width

        self._view_box["x"] = anchor_world_x - relative_x * new_width
        self._view_box["y"] = anchor_world_y - relative_y * new_height
        self._view_box["width"] = new_width
        self._view_box["height"] = new_height

        self.constrain()
        logger.debug("Zoomed to %.3f, view box %s", self.zoom_level, self._view_box)
        return True

    def pan(self, dx_screen: float, dy_screen: float) -> bool:
        """
        Move the view by a screen-space drag.

        Dragging right (positive ``dx_screen``) moves the visible window
        left. Returns True if the view box moved.
        """
        ratio_x, ratio_y = self.screen_to_world_ratio()
        previous_x = self._view_box["x"]
        previous_y = self._view_box["y"]

        self._view_box["x"] -= dx_screen * ratio_x
        self._view_box["y"] -= dy_screen * ratio_y

        self.constrain()
        return (
            self._view_box["x"] != previous_x or self._view_box["y"] != previous_y
        )

    def reset_zoom(self) -> None:
        """Show the full world width at the screen height, or the world height if lower."""
        self._view_box = {
            "x": 0,
            "y": 0,
            "width": self.world_width,
            "height": (
                min(self.screen_height, self.world_height)
                if self.screen_height > 0
                else self.world_height
            ),
        }
        self.constrain()

    def resize_screen(self, screen_width: float, screen_height: float) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.constrain()

    def resize_world(self, world_width: float, world_height: float) -> None:
        self.world_width = world_width
        self.world_height = world_height
        self.reset_zoom()

    def constrain(self) -> None:
        """Clamp the view box to the world, centering it on oversized axes."""
        view_box = self._view_box
        if view_box["width"] <= 0:
            view_box["width"] = MIN_VIEW_BOX_SIZE
        if view_box["height"] <= 0:
            view_box["height"] = MIN_VIEW_BOX_SIZE

        if view_box["width"] > self.world_width:
            view_box["x"] = (self.world_width - view_box["width"]) / 2
        else:
            view_box["x"] = max(
                0, min(view_box["x"], self.world_width - view_box["width"])
            )

        if view_box["height"] > self.world_height:
            view_box["y"] = (self.world_height - view_box["height"]) / 2
        else:
            view_box["y"] = max(
                0, min(view_box["y"], self.world_height - view_box["height"])
            )
