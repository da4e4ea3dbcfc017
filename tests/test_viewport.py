"""
Tests for ViewportController.

Covers:
    - Anchored zoom and the zoom limits
    - Pan direction and clamping
    - Centering when the box is larger than the world
    - Reset and resize
"""

from __future__ import annotations

import pytest

from ganttline.timeline.viewport import ViewportController


@pytest.fixture
def viewport() -> ViewportController:
    return ViewportController(1000, 400, 1000, 400)


def assert_within_world(viewport: ViewportController) -> None:
    view_box = viewport.view_box
    assert view_box["x"] >= 0
    assert view_box["x"] + view_box["width"] <= viewport.world_width + 1e-9
    assert view_box["y"] >= 0
    assert view_box["y"] + view_box["height"] <= viewport.world_height + 1e-9


# =============================================================================
# Initial State
# =============================================================================


class TestInitialState:
    def test_shows_whole_world(self, viewport):
        assert viewport.view_box == {"x": 0, "y": 0, "width": 1000, "height": 400}
        assert viewport.zoom_level == pytest.approx(1)

    def test_short_world_limits_height(self):
        viewport = ViewportController(1000, 160, 1000, 400)

        assert viewport.view_box == {"x": 0, "y": 0, "width": 1000, "height": 160}

    def test_short_world_after_reset(self):
        viewport = ViewportController(1000, 160, 1000, 400)
        viewport.zoom(1.0)

        viewport.reset_zoom()

        assert viewport.view_box["height"] == 160
        assert viewport.view_box["y"] == 0

    def test_degenerate_world_keeps_minimum_box(self):
        viewport = ViewportController(0, 0, 1000, 400)

        assert viewport.view_box["width"] == 1.0
        assert viewport.view_box["height"] == 1.0
        assert viewport.view_box["x"] == pytest.approx(-0.5)

    def test_view_box_is_a_copy(self, viewport):
        view_box = viewport.view_box
        view_box["x"] = 999

        assert viewport.view_box["x"] == 0


# =============================================================================
# Zoom
# =============================================================================


class TestZoom:
    def test_zoom_at_point_keeps_anchor(self, viewport):
        anchor_before = viewport.screen_to_world(500, 200)

        changed = viewport.zoom_at_point(0.2, 500, 200)

        assert changed is True
        assert viewport.zoom_level == pytest.approx(1.2)
        assert viewport.view_box["width"] == pytest.approx(833.333, rel=1e-4)
        assert viewport.view_box["height"] == pytest.approx(333.333, rel=1e-4)
        assert viewport.screen_to_world(500, 200) == pytest.approx(anchor_before)

    def test_zoom_at_off_center_point(self, viewport):
        anchor_before = viewport.screen_to_world(250, 100)

        viewport.zoom_at_point(1.0, 250, 100)

        assert viewport.zoom_level == pytest.approx(2)
        assert viewport.screen_to_world(250, 100) == pytest.approx(anchor_before)
        assert_within_world(viewport)

    def test_zoom_uses_screen_center(self, viewport):
        viewport.zoom(1.0)

        assert viewport.view_box["x"] == pytest.approx(250)
        assert viewport.view_box["width"] == pytest.approx(500)

    def test_zoom_in_stops_at_max(self, viewport):
        assert viewport.zoom(4.0) is True
        assert viewport.zoom_level == pytest.approx(5)

        assert viewport.zoom(0.5) is False
        assert viewport.zoom_level == pytest.approx(5)

    def test_clamped_zoom_keeps_anchor(self, viewport):
        """A step cut short by max_zoom still zooms around the anchor."""
        anchor_before = viewport.screen_to_world(300, 100)

        assert viewport.zoom_at_point(10.0, 300, 100) is True

        assert viewport.zoom_level == pytest.approx(5)
        assert viewport.screen_to_world(300, 100) == pytest.approx(anchor_before)
        assert_within_world(viewport)

    def test_zoom_out_stops_at_min(self, viewport):
        assert viewport.zoom(-0.9) is True
        assert viewport.zoom_level == pytest.approx(0.2)

        assert viewport.zoom(-0.5) is False

    def test_non_positive_factor_goes_to_min_zoom(self, viewport):
        viewport.zoom(-1.5)

        assert viewport.zoom_level == pytest.approx(0.2)

    def test_zoomed_out_box_is_centered(self, viewport):
        viewport.zoom(-0.5)

        view_box = viewport.view_box
        assert view_box["width"] == pytest.approx(2000)
        assert view_box["x"] == pytest.approx(-500)
        assert view_box["y"] == pytest.approx((400 - view_box["height"]) / 2)


# =============================================================================
# Pan
# =============================================================================


class TestPan:
    def test_drag_right_moves_view_left(self, viewport):
        viewport.zoom(1.0)

        assert viewport.pan(100, 0) is True
        # 0.5 world pixels per screen pixel at zoom 2
        assert viewport.view_box["x"] == pytest.approx(200)

    def test_pan_is_clamped(self, viewport):
        viewport.zoom(1.0)

        viewport.pan(100000, 100000)
        assert viewport.view_box["x"] == 0
        assert viewport.view_box["y"] == 0

        viewport.pan(-100000, -100000)
        assert_within_world(viewport)
        assert viewport.view_box["x"] == pytest.approx(500)

    def test_pan_at_edge_is_noop(self, viewport):
        viewport.zoom(1.0)
        viewport.pan(100000, 100000)

        assert viewport.pan(100000, 100000) is False

    def test_pan_without_zoom_is_noop(self, viewport):
        assert viewport.pan(50, 50) is False
        assert viewport.view_box == {"x": 0, "y": 0, "width": 1000, "height": 400}


# =============================================================================
# Reset and Resize
# =============================================================================


class TestResetAndResize:
    def test_reset_restores_initial_box(self, viewport):
        initial = viewport.view_box
        viewport.zoom_at_point(1.5, 100, 100)
        viewport.pan(-30, 0)

        viewport.reset_zoom()

        assert viewport.view_box == initial
        assert viewport.zoom_level == pytest.approx(1)

    def test_resize_world_resets(self, viewport):
        viewport.zoom(1.0)

        viewport.resize_world(2000, 400)

        assert viewport.view_box["width"] == 2000
        assert viewport.zoom_level == pytest.approx(1)

    def test_resize_screen_changes_ratio(self, viewport):
        viewport.resize_screen(500, 200)

        assert viewport.screen_to_world_ratio() == pytest.approx((2.0, 2.0))

    def test_world_screen_round_trip(self, viewport):
        viewport.zoom_at_point(1.0, 300, 100)

        world = viewport.screen_to_world(123, 45)

        assert viewport.world_to_screen(*world) == pytest.approx((123, 45))

    def test_constrain_is_idempotent(self, viewport):
        viewport.zoom(2.0)
        viewport.pan(-250, 80)
        before = viewport.view_box

        viewport.constrain()

        assert viewport.view_box == before
