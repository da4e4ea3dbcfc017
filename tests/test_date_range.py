"""
Tests for the overall timeline domain.

Covers:
    - Buffering around the extreme item dates
    - Extension to the minimum span
    - The empty item set
"""

from __future__ import annotations

import pytest

from conftest import make_item, utc
from ganttline.time import duration_in_days, duration_in_months
from ganttline.timeline.date_range import BUFFER_DAYS, calculate_date_range


# =============================================================================
# Item Sets
# =============================================================================


class TestCalculateDateRange:
    """Tests for calculate_date_range() with items."""

    def test_short_item_gets_buffered(self):
        """A one-day item gets the buffer on both sides."""
        items = [make_item(start=utc(2024, 1, 1), end=utc(2024, 1, 2))]

        date_range = calculate_date_range(items, min_months=1)

        assert date_range["min_date"] == utc(2023, 12, 17)
        assert date_range["max_date"] >= utc(2024, 1, 17)

    def test_long_span_is_only_buffered(self):
        items = [
            make_item(1, start=utc(2024, 1, 1), end=utc(2024, 3, 1)),
            make_item(2, start=utc(2024, 6, 1), end=utc(2025, 6, 1)),
        ]

        date_range = calculate_date_range(items, min_months=12)

        assert date_range["min_date"] == utc(2023, 12, 17)
        assert date_range["max_date"] == utc(2025, 6, 16)

    def test_short_span_is_extended_to_min_months(self):
        items = [make_item(start=utc(2024, 1, 1), end=utc(2024, 1, 10))]

        date_range = calculate_date_range(items, min_months=12)

        assert date_range["min_date"] == utc(2023, 12, 17)
        assert duration_in_months(date_range["min_date"], date_range["max_date"]) >= 12
        assert date_range["max_date"] == utc(2024, 12, 25)

    def test_extremes_come_from_starts_and_ends(self):
        """An inverted item still contributes both of its dates."""
        items = [make_item(start=utc(2024, 5, 1), end=utc(2024, 2, 1))]

        date_range = calculate_date_range(items, min_months=0)

        assert date_range["min_date"] == utc(2024, 2, 1).subtract(days=BUFFER_DAYS)
        assert date_range["max_date"] == utc(2024, 5, 1).add(days=BUFFER_DAYS)

    def test_extension_across_february_reaches_min_months(self):
        """Adding a short calendar month still reaches the minimum span."""
        items = [make_item(start=utc(2023, 1, 25, 12), end=utc(2023, 1, 25, 23))]

        date_range = calculate_date_range(items, min_months=2)

        assert duration_in_months(date_range["min_date"], date_range["max_date"]) >= 2

    @pytest.mark.parametrize("min_months", [1, 2, 3, 6, 12])
    @pytest.mark.parametrize("start_month", range(1, 13))
    @pytest.mark.parametrize("start_day", [1, 15, 28])
    def test_span_is_at_least_min_months(self, start_month, start_day, min_months):
        start = utc(2023, start_month, start_day, 12)
        items = [make_item(start=start, end=start.add(hours=11))]

        date_range = calculate_date_range(items, min_months=min_months)

        assert date_range["min_date"] < date_range["max_date"]
        assert (
            duration_in_months(date_range["min_date"], date_range["max_date"])
            >= min_months
        )

    def test_is_deterministic(self):
        items = [make_item(start=utc(2024, 1, 1), end=utc(2024, 1, 10))]

        assert calculate_date_range(items, 12) == calculate_date_range(items, 12)


# =============================================================================
# Empty Set
# =============================================================================


class TestEmptyDateRange:
    """Tests for calculate_date_range() without items."""

    def test_centered_on_now(self, now):
        date_range = calculate_date_range([], min_months=12, now=now)

        midpoint = (
            date_range["min_date"].timestamp() + date_range["max_date"].timestamp()
        ) / 2
        assert midpoint == pytest.approx(now.timestamp())

    def test_covers_min_months_plus_buffer(self, now):
        date_range = calculate_date_range([], min_months=12, now=now)

        days = duration_in_days(date_range["min_date"], date_range["max_date"])
        assert days == pytest.approx(12 * 30.44 + 2 * BUFFER_DAYS)

    def test_min_before_max(self, now):
        date_range = calculate_date_range([], min_months=0, now=now)

        assert date_range["min_date"] < date_range["max_date"]
