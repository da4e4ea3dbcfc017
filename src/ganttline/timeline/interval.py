# SPDX-License-Identifier: MIT

import math
from abc import ABC, abstractmethod
from typing import Optional, TypedDict

import pendulum

from ganttline.model.interval_thresholds import (
    IntervalThresholds,
    get_default_interval_thresholds,
)
from ganttline.model.tick import Tick
from ganttline.model.time_unit import TimeUnit
from ganttline.time import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    duration_in_days,
)
from ganttline.timeline.scale import XScale


class AdaptiveIntervals(TypedDict, total=False):
    primary: "TimeInterval"
    secondary: "TimeInterval"


def pixels_per_day(
    min_date: pendulum.DateTime, max_date: pendulum.DateTime, available_width: float
) -> Optional[float]:
    """Horizontal density of a range, or None when the range or width is degenerate."""
    days = duration_in_days(min_date, max_date)
    if days <= 0 or available_width <= 0:
        return None
    return available_width / days


def snap_step(raw_step: int, preferred_steps: list[int]) -> int:
    """Round ``raw_step`` up to the next preferred step.

    Past the largest preferred step, multiples of it are used.
    """
    for step in preferred_steps:
        if step >= raw_step:
            return step
    largest = preferred_steps[-1]
    return math.ceil(raw_step / largest) * largest


def min_step(pixels_per_unit: float, min_pixels: float) -> int:
    """Smallest whole step giving ``step * pixels_per_unit >= min_pixels``."""
    if pixels_per_unit >= min_pixels:
        return 1
    return max(1, math.ceil(min_pixels / pixels_per_unit))


class TimeInterval(ABC):
    unit: TimeUnit
    is_major: bool = False

    def __init__(self, thresholds: Optional[IntervalThresholds] = None) -> None:
        self.thresholds = (
            thresholds if thresholds is not None else get_default_interval_thresholds()
        )

    def get_ticks(
        self,
        min_date: pendulum.DateTime,
        max_date: pendulum.DateTime,
        scale: XScale,
        available_width: float,
    ) -> list[Tick]:
        density = pixels_per_day(min_date, max_date, available_width)
        if density is None:
            return []

        step = self.step(density)
        label_format = self.label_format(density, step)

        ticks: list[Tick] = []
        current = self.anchor(min_date, step)
        while current <= max_date:
            if current >= min_date:
                ticks.append(
                    {
                        "x": scale(current),
                        "label": current.format(label_format),
                        "is_major": self.is_major,
                    }
                )
            current = self.advance(current, step)
        return ticks

    @abstractmethod
    def step(self, pixels_per_day: float) -> int: ...

    @abstractmethod
    def label_format(self, pixels_per_day: float, step: int) -> str: ...

    @abstractmethod
    def anchor(self, min_date: pendulum.DateTime, step: int) -> pendulum.DateTime: ...

    @abstractmethod
    def advance(self, current: pendulum.DateTime, step: int) -> pendulum.DateTime: ...


class YearInterval(TimeInterval):
    unit: TimeUnit = "year"
    is_major = True

    def step(self, pixels_per_day: float) -> int:
        return min_step(
            pixels_per_day * DAYS_PER_YEAR,
            self.thresholds["min_pixels_for_major_label"],
        )

    def label_format(self, pixels_per_day: float, step: int) -> str:
        return "YYYY"

    def anchor(self, min_date: pendulum.DateTime, step: int) -> pendulum.DateTime:
        year_start = min_date.start_of("year")
        return year_start.set(year=(year_start.year // step) * step)

    def advance(self, current: pendulum.DateTime, step: int) -> pendulum.DateTime:
        return current.add(years=step)


class MonthInterval(TimeInterval):
    unit: TimeUnit = "month"
    is_major = True

    def step(self, pixels_per_day: float) -> int:
        raw_step = min_step(
            pixels_per_day * DAYS_PER_MONTH,
            self.thresholds["min_pixels_for_major_label"],
        )
        return snap_step(raw_step, self.thresholds["month_steps"])

    def label_format(self, pixels_per_day: float, step: int) -> str:
        pixels_per_month = pixels_per_day * DAYS_PER_MONTH
        if pixels_per_month > 70:
            return "MMMM YYYY"
        if pixels_per_month > 40:
            return "MMM YYYY"
        return "MMM"

    def anchor(self, min_date: pendulum.DateTime, step: int) -> pendulum.DateTime:
        month_start = min_date.start_of("month")
        # Months are counted from year 0 so steps past 12 land on whole years
        # that are multiples of step // 12, like YearInterval
        offset = (month_start.year * 12 + month_start.month - 1) % step
        return month_start.subtract(months=offset)

    def advance(self, current: pendulum.DateTime, step: int) -> pendulum.DateTime:
        return current.add(months=step)


class WeekInterval(TimeInterval):
    unit: TimeUnit = "week"

    def step(self, pixels_per_day: float) -> int:
        return min_step(
            pixels_per_day * DAYS_PER_WEEK, self.thresholds["min_pixels_for_label"]
        )

    def label_format(self, pixels_per_day: float, step: int) -> str:
        return "MMM D"

    def anchor(self, min_date: pendulum.DateTime, step: int) -> pendulum.DateTime:
        monday = min_date.start_of("week")
        offset = (monday.toordinal() // DAYS_PER_WEEK) % step
        return monday.subtract(weeks=offset)

    def advance(self, current: pendulum.DateTime, step: int) -> pendulum.DateTime:
        return current.add(weeks=step)


class DayInterval(TimeInterval):
    unit: TimeUnit = "day"

    def step(self, pixels_per_day: float) -> int:
        raw_step = min_step(pixels_per_day, self.thresholds["min_pixels_for_day_number"])
        return min(raw_step, self.thresholds["max_day_step"])

    def label_format(self, pixels_per_day: float, step: int) -> str:
        if step > 3 or pixels_per_day > 60:
            return "MMM D"
        return "D"

    def anchor(self, min_date: pendulum.DateTime, step: int) -> pendulum.DateTime:
        midnight = min_date.start_of("day")
        return midnight.subtract(days=midnight.toordinal() % step)

    def advance(self, current: pendulum.DateTime, step: int) -> pendulum.DateTime:
        return current.add(days=step)


class HourInterval(TimeInterval):
    unit: TimeUnit = "hour"

    def step(self, pixels_per_day: float) -> int:
        raw_step = min_step(
            pixels_per_day / HOURS_PER_DAY, self.thresholds["min_pixels_for_label"]
        )
        return snap_step(raw_step, self.thresholds["hour_steps"])

    def label_format(self, pixels_per_day: float, step: int) -> str:
        return "HH:mm"

    def anchor(self, min_date: pendulum.DateTime, step: int) -> pendulum.DateTime:
        hour_start = min_date.start_of("hour")
        return hour_start.subtract(hours=hour_start.hour % step)

    def advance(self, current: pendulum.DateTime, step: int) -> pendulum.DateTime:
        return current.add(hours=step)


def interval_factory(
    unit: TimeUnit, thresholds: Optional[IntervalThresholds] = None
) -> TimeInterval:
    match unit:
        case "year":
            return YearInterval(thresholds)
        case "month":
            return MonthInterval(thresholds)
        case "week":
            return WeekInterval(thresholds)
        case "day":
            return DayInterval(thresholds)
        case "hour":
            return HourInterval(thresholds)
    raise ValueError(f"Unknown time unit: {unit}")


def get_adaptive_intervals(
    min_visible_date: pendulum.DateTime,
    max_visible_date: pendulum.DateTime,
    available_width: float,
    thresholds: Optional[IntervalThresholds] = None,
) -> AdaptiveIntervals:
    """
    Choose the primary and optional secondary granularity for a visible range.

    The primary unit follows the horizontal density, coarsest first. A finer
    secondary unit is only attached when its average width leaves room for a
    label; otherwise it is left out.

    Args:
        min_visible_date: Left edge of the visible range
        max_visible_date: Right edge of the visible range
        available_width: Pixel width of the visible range
        thresholds: Density thresholds and label widths (defaults apply when None)

    Returns:
        AdaptiveIntervals, empty for a degenerate range or width
    """
    if thresholds is None:
        thresholds = get_default_interval_thresholds()

    density = pixels_per_day(min_visible_date, max_visible_date, available_width)
    if density is None:
        return {}

    min_label = thresholds["min_pixels_for_label"]

    if density < thresholds["year_below_pixels_per_day"]:
        if density * DAYS_PER_YEAR / 12 > min_label:
            return {
                "primary": YearInterval(thresholds),
                "secondary": MonthInterval(thresholds),
            }
        return {"primary": YearInterval(thresholds)}

    if density < thresholds["month_below_pixels_per_day"]:
        if density * DAYS_PER_MONTH / 4 > min_label:
            return {
                "primary": MonthInterval(thresholds),
                "secondary": WeekInterval(thresholds),
            }
        return {"primary": MonthInterval(thresholds)}

    if density < thresholds["week_below_pixels_per_day"]:
        if density > thresholds["min_pixels_for_day_number"]:
            return {
                "primary": WeekInterval(thresholds),
                "secondary": DayInterval(thresholds),
            }
        return {"primary": WeekInterval(thresholds)}

    if density / HOURS_PER_DAY > min_label:
        return {
            "primary": DayInterval(thresholds),
            "secondary": HourInterval(thresholds),
        }
    return {"primary": DayInterval(thresholds)}
