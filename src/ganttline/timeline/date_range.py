# SPDX-License-Identifier: MIT

import datetime
import logging
import math
from typing import Optional, Sequence

import pendulum

from ganttline.model.date_range import DateRange
from ganttline.model.item import Item
from ganttline.time import DAYS_PER_MONTH, duration_in_months, now_local

logger = logging.getLogger(__name__)

BUFFER_DAYS = 15


def calculate_date_range(
    items: Sequence[Item],
    min_months: int = 12,
    now: Optional[pendulum.DateTime] = None,
) -> DateRange:
    """
    Derive the overall timeline domain for a set of items.

    The extreme start/end dates are pushed outward by ``BUFFER_DAYS`` on each
    side. If the buffered span is shorter than ``min_months`` (in average
    months), ``max_date`` is moved forward by whole calendar months until the
    span reaches ``min_months``.

    With no items, a ``min_months`` wide range centered on ``now`` is used
    instead, buffered the same way.

    Args:
        items: Items to cover
        min_months: Minimum span of the result in months
        now: Reference time for the empty case (defaults to the local now)

    Returns:
        A DateRange with min_date strictly before max_date
    """
    if len(items) == 0:
        center = now if now is not None else now_local()
        half_span_days = max(min_months, 0) * DAYS_PER_MONTH / 2
        half_span = datetime.timedelta(days=half_span_days + BUFFER_DAYS)
        min_date = center - half_span
        max_date = center + half_span
        logger.debug("Empty item set, range centered on %s", center)
        return {"min_date": min_date, "max_date": max_date}

    dates = [item["start"] for item in items] + [item["end"] for item in items]
    task_min = min(dates)
    task_max = max(dates)

    min_date = task_min.subtract(days=BUFFER_DAYS)
    max_date = task_max.add(days=BUFFER_DAYS)

    span_months = duration_in_months(min_date, max_date)
    if span_months < min_months:
        shortfall = math.ceil(min_months - span_months)
        max_date = max_date.add(months=shortfall)
        # Short calendar months (February) can leave the span just under
        while duration_in_months(min_date, max_date) < min_months:
            max_date = max_date.add(months=1)

    logger.debug("Date range calculated: %s -> %s", min_date, max_date)
    return {"min_date": min_date, "max_date": max_date}
