# SPDX-License-Identifier: MIT

from typing import Iterator, Optional

from ganttline.model.geometry import BarGeometry
from ganttline.model.item import Item, ItemId
from ganttline.timeline.scale import XScale

MIN_BAR_WIDTH = 1.0

LABEL_TEXT_PADDING = 4
MIN_WIDTH_FOR_ANY_TEXT = 5
MIN_WIDTH_FOR_ELLIPSIS = 15
CHAR_WIDTH_APPROXIMATION = 7


def fit_label(name: str, bar_width: float) -> str:
    """
    Fit an item name inside a bar of ``bar_width`` pixels.

    Bars narrower than MIN_WIDTH_FOR_ANY_TEXT get no label. Names too long
    for the bar are cut and end with "..." when there is room for at least
    MIN_WIDTH_FOR_ELLIPSIS pixels of text, otherwise they are dropped.
    """
    if bar_width < MIN_WIDTH_FOR_ANY_TEXT:
        return ""

    available = bar_width - 2 * LABEL_TEXT_PADDING
    if len(name) * CHAR_WIDTH_APPROXIMATION <= available:
        return name
    if available < MIN_WIDTH_FOR_ELLIPSIS:
        return ""

    max_chars = int(
        (available - CHAR_WIDTH_APPROXIMATION * 2) // CHAR_WIDTH_APPROXIMATION
    )
    return name[: max(1, max_chars)] + "..."


def compute_bar_geometry(
    item: Item,
    row_index: int,
    scale: XScale,
    row_height: float,
    bar_height: float,
    padding: float,
    margin_top: float,
    y_offset: float = 0,
    y_ratio: float = 1,
) -> BarGeometry:
    """
    Screen geometry of an item's bar.

    ``y_offset`` is the world y at the top of the screen and ``y_ratio`` the
    world pixels per screen pixel vertically. Width is floored at
    MIN_BAR_WIDTH so same-day and inverted items stay visible.
    """
    x = scale(item["start"])
    width = max(scale(item["end"]) - x, MIN_BAR_WIDTH)

    progress = item.get("progress")
    progress_width = 0.0
    if progress is not None and 0 <= progress <= 100:
        progress_width = progress / 100 * width

    world_y = margin_top + row_index * row_height + padding
    ratio = y_ratio if y_ratio > 0 else 1

    return {
        "item_id": item["id"],
        "x": x,
        "y": (world_y - y_offset) / ratio,
        "width": width,
        "height": bar_height / ratio,
        "progress_width": progress_width,
        "label": fit_label(item["name"], width),
    }


class ItemGeometryIndex:
    """Last computed bar geometry per item id, for pointer hit-testing."""

    def __init__(self) -> None:
        self._geometry: dict[ItemId, BarGeometry] = {}

    def __len__(self) -> int:
        return len(self._geometry)

    def __iter__(self) -> Iterator[BarGeometry]:
        return iter(self._geometry.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._geometry

    def clear(self) -> None:
        self._geometry.clear()

    def update(self, bars: list[BarGeometry]) -> None:
        self._geometry = {bar["item_id"]: bar for bar in bars}

    def get(self, item_id: ItemId) -> Optional[BarGeometry]:
        return self._geometry.get(item_id)

    def item_at(self, x: float, y: float) -> Optional[ItemId]:
        """Id of the last drawn bar containing the screen point, if any."""
        hit: Optional[ItemId] = None
        for bar in self._geometry.values():
            if (
                bar["x"] <= x <= bar["x"] + bar["width"]
                and bar["y"] <= y <= bar["y"] + bar["height"]
            ):
                hit = bar["item_id"]
        return hit
