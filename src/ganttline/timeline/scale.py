# SPDX-License-Identifier: MIT

from typing import Callable, TypeAlias

import pendulum

from ganttline.model.date_range import DateRange
from ganttline.time import datetime_from_timestamp

XScale: TypeAlias = Callable[[pendulum.DateTime], float]
XInverse: TypeAlias = Callable[[float], pendulum.DateTime]


def create_x_scale(
    date_range: DateRange, available_width: float, left_margin: float
) -> XScale:
    """
    Create a linear function mapping a date to its x coordinate.

    A zero or negative duration, or a non-positive width, yields a constant
    function returning ``left_margin``.

    Args:
        date_range: The dates mapped onto ``[left_margin, left_margin + available_width]``
        available_width: Pixel width covered by the range
        left_margin: Pixel offset of ``date_range["min_date"]``

    Returns:
        A pure function of a date
    """
    min_timestamp = date_range["min_date"].timestamp()
    total_seconds = date_range["max_date"].timestamp() - min_timestamp

    if total_seconds <= 0 or available_width <= 0:
        return lambda _date: left_margin

    def scale(date: pendulum.DateTime) -> float:
        ratio = (date.timestamp() - min_timestamp) / total_seconds
        return left_margin + ratio * available_width

    return scale


def create_x_inverse(
    date_range: DateRange, available_width: float, left_margin: float
) -> XInverse:
    """Inverse of create_x_scale: map an x coordinate back to a date."""
    min_date = date_range["min_date"]
    min_timestamp = min_date.timestamp()
    total_seconds = date_range["max_date"].timestamp() - min_timestamp

    if total_seconds <= 0 or available_width <= 0:
        return lambda _x: min_date

    def inverse(x: float) -> pendulum.DateTime:
        ratio = (x - left_margin) / available_width
        return datetime_from_timestamp(min_timestamp + ratio * total_seconds, min_date)

    return inverse
