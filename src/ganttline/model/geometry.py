# SPDX-License-Identifier: MIT

from typing import TypedDict

from ganttline.model.item import ItemId


class BarGeometry(TypedDict):
    item_id: ItemId
    x: float
    y: float
    width: float
    height: float
    progress_width: float
    label: str
