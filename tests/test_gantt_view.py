"""
Tests for the terminal drawing of render frames and items.

Covers:
    - Chart title row
    - Vertical and horizontal grid lines
    - Item detail table
"""

from __future__ import annotations

import pytest
from rich.console import Console

from conftest import make_item, utc
from ganttline.service.chart import GanttChart
from ganttline.view.gantt import (
    HORIZONTAL_GRID_CHAR,
    VERTICAL_GRID_CHAR,
    build_gantt,
)
from ganttline.view.items import items_view


@pytest.fixture
def chart(two_items, now) -> GanttChart:
    return GanttChart(two_items, 1000, 400, now=now)


def draw(chart: GanttChart, **options) -> list[str]:
    if options:
        chart.update_options(**options)
    frame = chart.render()
    group = build_gantt(frame, chart.items, 100, left_column_width=24)
    return [row.plain for row in group.renderables]


def bar_rows(rows: list[str], chart: GanttChart) -> list[str]:
    return rows[-len(chart.items) :]


# =============================================================================
# Title
# =============================================================================


class TestTitle:
    def test_no_title_row_by_default(self, chart):
        rows = draw(chart)

        # Two label rows, the tick row and one row per item
        assert len(rows) == 3 + len(chart.items)

    def test_title_is_first_row(self, chart):
        rows = draw(chart, chart_title="Roadmap 2024")

        assert len(rows) == 4 + len(chart.items)
        assert rows[0].strip() == "Roadmap 2024"


# =============================================================================
# Grid Lines
# =============================================================================


class TestGridLines:
    def test_vertical_by_default(self, chart):
        rows = bar_rows(draw(chart), chart)

        assert all(VERTICAL_GRID_CHAR in row for row in rows)
        assert not any(HORIZONTAL_GRID_CHAR in row for row in rows)

    def test_horizontal(self, chart):
        rows = bar_rows(draw(chart, grid_lines="horizontal"), chart)

        assert all(HORIZONTAL_GRID_CHAR in row for row in rows)
        assert not any(VERTICAL_GRID_CHAR in row for row in rows)

    def test_both(self, chart):
        rows = bar_rows(draw(chart, grid_lines="both"), chart)

        assert all(VERTICAL_GRID_CHAR in row for row in rows)
        assert all(HORIZONTAL_GRID_CHAR in row for row in rows)

    def test_none(self, chart):
        rows = draw(chart, grid_lines="none")

        assert not any(VERTICAL_GRID_CHAR in row for row in rows)
        assert not any(HORIZONTAL_GRID_CHAR in row for row in rows)

    def test_bars_cover_grid(self, chart):
        """Bar cells are drawn over the grid."""
        rows = bar_rows(draw(chart, grid_lines="both"), chart)

        assert all("█" in row for row in rows)


# =============================================================================
# Item Table
# =============================================================================


class TestItemsView:
    def test_lists_details(self):
        items = [
            make_item(
                3,
                name="Launch",
                start=utc(2024, 3, 1),
                end=utc(2024, 3, 8),
                progress=25,
                item_list=["Press release", "Go live"],
            )
        ]
        console = Console(width=160, record=True)

        items_view(items, console=console)

        output = console.export_text()
        assert "Launch" in output
        assert "2024-03-01" in output
        assert "25%" in output
        assert "Press release" in output
        assert "Go live" in output

    def test_item_without_details(self):
        console = Console(width=160, record=True)

        items_view([make_item(4, name="Plain")], console=console)

        assert "Plain" in console.export_text()
