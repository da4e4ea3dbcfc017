# SPDX-License-Identifier: MIT

import math
from functools import reduce
from typing import Optional, Sequence, TypedDict

from ganttline.model.interval_thresholds import (
    IntervalThresholds,
    get_default_interval_thresholds,
)
from ganttline.model.tick import Tick


class LabelLayout(TypedDict):
    primary: list[Tick]
    secondary: list[Tick]


def estimate_label_width(label: str, char_width: float) -> float:
    return len(label) * char_width


def label_bounds(tick: Tick, char_width: float) -> tuple[float, float]:
    """Estimated (left, right) edges of a label centered on its tick."""
    half_width = estimate_label_width(tick["label"], char_width) / 2
    return tick["x"] - half_width, tick["x"] + half_width


def filter_label_collisions(
    ticks: Sequence[Tick], char_width: float, padding: float
) -> list[Tick]:
    """
    Keep the ticks whose labels can be drawn without overlapping.

    Walks the ticks left to right carrying the right edge of the last kept
    label; a label is kept only if its left edge lies beyond that edge plus
    ``padding``. The first tick is always kept.

    Args:
        ticks: Ticks of one tier, ordered by x
        char_width: Estimated pixel width of one label character
        padding: Minimum pixel gap between two kept labels

    Returns:
        The ticks whose labels should be drawn
    """

    def keep(
        accumulator: tuple[float, list[Tick]], tick: Tick
    ) -> tuple[float, list[Tick]]:
        last_end, kept = accumulator
        left, right = label_bounds(tick, char_width)
        if left > last_end + padding:
            return right, [*kept, tick]
        return accumulator

    initial: tuple[float, list[Tick]] = (-math.inf, [])
    _, kept = reduce(keep, ticks, initial)
    return kept


def layout_tick_labels(
    primary_ticks: Sequence[Tick],
    secondary_ticks: Sequence[Tick],
    thresholds: Optional[IntervalThresholds] = None,
) -> LabelLayout:
    if thresholds is None:
        thresholds = get_default_interval_thresholds()
    return {
        "primary": filter_label_collisions(
            primary_ticks,
            thresholds["primary_char_width"],
            thresholds["label_padding"],
        ),
        "secondary": filter_label_collisions(
            secondary_ticks,
            thresholds["secondary_char_width"],
            thresholds["label_padding"],
        ),
    }
