# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias

TimeUnit: TypeAlias = Literal["year", "month", "week", "day", "hour"]
