# SPDX-License-Identifier: MIT

from typing import TypedDict


class Tick(TypedDict):
    x: float
    label: str
    is_major: bool
