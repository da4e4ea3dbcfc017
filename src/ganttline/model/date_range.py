# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateRange(TypedDict):
    min_date: pendulum.DateTime
    max_date: pendulum.DateTime
