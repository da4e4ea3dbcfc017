"""Tests for the linear date scale and its inverse."""

from __future__ import annotations

import pytest

from conftest import utc
from ganttline.model.date_range import DateRange
from ganttline.timeline.scale import create_x_inverse, create_x_scale

TEN_DAYS: DateRange = {"min_date": utc(2024, 1, 1), "max_date": utc(2024, 1, 11)}


class TestCreateXScale:
    def test_maps_range_onto_width(self):
        scale = create_x_scale(TEN_DAYS, 1000, 50)

        assert scale(utc(2024, 1, 1)) == pytest.approx(50)
        assert scale(utc(2024, 1, 6)) == pytest.approx(550)
        assert scale(utc(2024, 1, 11)) == pytest.approx(1050)

    def test_extrapolates_outside_range(self):
        scale = create_x_scale(TEN_DAYS, 1000, 0)

        assert scale(utc(2023, 12, 31)) == pytest.approx(-100)
        assert scale(utc(2024, 1, 12)) == pytest.approx(1100)

    def test_is_monotonic(self):
        scale = create_x_scale(TEN_DAYS, 1000, 0)
        xs = [scale(utc(2024, 1, day)) for day in range(1, 12)]

        assert xs == sorted(xs)
        assert len(set(xs)) == len(xs)

    def test_zero_duration_is_constant(self):
        date_range: DateRange = {
            "min_date": utc(2024, 1, 1),
            "max_date": utc(2024, 1, 1),
        }
        scale = create_x_scale(date_range, 1000, 25)

        assert scale(utc(2024, 1, 1)) == 25
        assert scale(utc(2030, 1, 1)) == 25

    def test_zero_width_is_constant(self):
        scale = create_x_scale(TEN_DAYS, 0, 10)

        assert scale(utc(2024, 1, 6)) == 10


class TestCreateXInverse:
    def test_inverts_scale(self):
        scale = create_x_scale(TEN_DAYS, 1000, 50)
        inverse = create_x_inverse(TEN_DAYS, 1000, 50)

        date = utc(2024, 1, 4, 6)
        assert inverse(scale(date)).timestamp() == pytest.approx(date.timestamp())

    def test_keeps_timezone_of_range(self):
        inverse = create_x_inverse(TEN_DAYS, 1000, 0)

        assert inverse(500).timezone_name == "UTC"

    def test_degenerate_returns_min_date(self):
        inverse = create_x_inverse(TEN_DAYS, 0, 0)

        assert inverse(500) == TEN_DAYS["min_date"]
