# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict, TypeAlias

import pendulum

ItemId: TypeAlias = int | str


class Item(TypedDict):
    id: ItemId
    priority: float
    name: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    progress: NotRequired[Optional[float]]
    item_list: NotRequired[Optional[list[str]]]
    color: NotRequired[Optional[str]]
