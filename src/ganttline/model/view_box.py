# SPDX-License-Identifier: MIT

from typing import TypedDict


class ViewBox(TypedDict):
    x: float
    y: float
    width: float
    height: float
