"""Tests for drag-rectangle zoom-to-fit."""

from __future__ import annotations

import pytest

from mandelbrot_explorer.complex_math import Complex
from mandelbrot_explorer.viewport import Viewport
from mandelbrot_explorer.zoom_box import selection_size, zoom_box

CANVAS = (800, 600)
VIEW = Viewport(-0.75, 0.0, 300.0, 30)


def test_full_canvas_selection_keeps_view() -> None:
    result = zoom_box((0, 0), CANVAS, CANVAS, VIEW)
    assert result.zoom == pytest.approx(VIEW.zoom)
    assert result.r == pytest.approx(VIEW.r)
    assert result.i == pytest.approx(VIEW.i)


def test_corner_order_does_not_matter() -> None:
    expected = zoom_box((100, 50), (300, 250), CANVAS, VIEW)
    assert zoom_box((300, 250), (100, 50), CANVAS, VIEW) == expected
    assert zoom_box((100, 250), (300, 50), CANVAS, VIEW) == expected
    assert zoom_box((300, 50), (100, 250), CANVAS, VIEW) == expected


def test_quarter_selection_doubles_zoom_and_recenters() -> None:
    result = zoom_box((0, 0), (400, 300), CANVAS, VIEW)
    assert result.zoom == pytest.approx(600.0)
    assert result.center == VIEW.pixel_to_complex(CANVAS, (200, 150))
    assert result.sharpness == VIEW.sharpness


def test_zoom_uses_smaller_axis_ratio() -> None:
    # 800 / 400 = 2 on x, 600 / 100 = 6 on y: fit the width.
    wide = zoom_box((0, 0), (400, 100), CANVAS, VIEW)
    assert wide.zoom == pytest.approx(VIEW.zoom * 2)
    # 800 / 100 = 8 on x, 600 / 300 = 2 on y: fit the height.
    tall = zoom_box((0, 0), (100, 300), CANVAS, VIEW)
    assert tall.zoom == pytest.approx(VIEW.zoom * 2)


def test_midpoint_uses_integer_average() -> None:
    result = zoom_box((10, 10), (13, 15), CANVAS, VIEW)
    assert result.center == VIEW.pixel_to_complex(CANVAS, (11, 12))


@pytest.mark.parametrize(
    ("corner1", "corner2"),
    [((120, 80), (120, 80)), ((120, 80), (120, 400)), ((120, 80), (500, 80))],
)
def test_zero_area_selection_only_recenters(corner1, corner2) -> None:
    result = zoom_box(corner1, corner2, CANVAS, VIEW)
    midpoint = ((corner1[0] + corner2[0]) // 2, (corner1[1] + corner2[1]) // 2)
    assert result.zoom == VIEW.zoom
    assert result.center == VIEW.pixel_to_complex(CANVAS, midpoint)


@pytest.mark.parametrize("corner", [(-1, 0), (0, -5), (801, 0), (0, 601)])
def test_corner_off_canvas_is_rejected(corner) -> None:
    with pytest.raises(ValueError, match="outside"):
        zoom_box(corner, (10, 10), CANVAS, VIEW)


def test_selection_size() -> None:
    assert selection_size((5, 40), (25, 10)) == (20, 30)
    assert selection_size((7, 7), (7, 7)) == (0, 0)


def test_zoom_box_does_not_touch_input_view() -> None:
    zoom_box((0, 0), (100, 100), CANVAS, VIEW)
    assert VIEW == Viewport(-0.75, 0.0, 300.0, 30)
    assert VIEW.center == Complex(-0.75, 0.0)
