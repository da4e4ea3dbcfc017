# SPDX-License-Identifier: MIT

from typing import TypedDict


class IntervalThresholds(TypedDict):
    # Pixels per day below which a tier switches to the coarser unit
    year_below_pixels_per_day: float
    month_below_pixels_per_day: float
    week_below_pixels_per_day: float
    min_pixels_for_label: float
    min_pixels_for_major_label: float
    min_pixels_for_day_number: float
    max_day_step: int
    month_steps: list[int]
    hour_steps: list[int]
    primary_char_width: float
    secondary_char_width: float
    label_padding: float


def get_default_interval_thresholds() -> IntervalThresholds:
    return {
        "year_below_pixels_per_day": 2,
        "month_below_pixels_per_day": 25,
        "week_below_pixels_per_day": 100,
        "min_pixels_for_label": 50,
        "min_pixels_for_major_label": 70,
        "min_pixels_for_day_number": 20,
        "max_day_step": 10,
        "month_steps": [1, 3, 6, 12],
        "hour_steps": [1, 2, 3, 6, 12],
        "primary_char_width": 7,
        "secondary_char_width": 6,
        "label_padding": 5,
    }
