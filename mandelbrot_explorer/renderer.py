"""
Frame rasterization.

Turns a Viewport into a full RGBA pixel grid by evaluating the escape
function at every pixel on Numba's thread pool, then mapping each escape
index to a color. A render call returns only when the whole frame is done
and the returned array is owned by the caller.
"""

import logging
import time

import numpy as np

from .colormaps import SELECTION_COLOR, get_colormap, get_default_colormap
from .compute import apply_ramp, compute_escape_indices, get_escape_kernel, resolve_evaluator

logger = logging.getLogger(__name__)


def _check_size(width, height):
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")


def render(viewport, width, height, evaluator, colormap=None):
    """
    Render a viewport into a new (height, width, 4) uint8 RGBA array.

    Args:
        viewport: The Viewport to draw
        width, height: Canvas size in pixels
        evaluator: Evaluator name ("circle", "mandelbrot") or function
        colormap: RGB channel mask from colormaps (default: red)

    Returns:
        numpy array indexed [y, x]; points that never escape are (0, 0, 0, 255)
    """
    _check_size(width, height)
    if colormap is None:
        colormap = get_default_colormap()
    start = time.perf_counter()
    escapes = compute_escape_indices(
        viewport.r, viewport.i, viewport.zoom, viewport.sharpness,
        width, height, evaluator
    )
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    apply_ramp(escapes, viewport.sharpness, colormap, pixels)
    logger.debug("Rendered %dx%d at sharpness %d in %.3fs",
                 width, height, viewport.sharpness, time.perf_counter() - start)
    return pixels


def selection_overlay(pixels, corner1, corner2, color=SELECTION_COLOR):
    """
    Copy of a frame with the rectangle between two corners outlined.

    Corners may be given in any order and are clipped to the frame.
    """
    overlay = pixels.copy()
    height, width = overlay.shape[:2]
    x1, x2 = sorted((min(max(int(corner1[0]), 0), width - 1),
                     min(max(int(corner2[0]), 0), width - 1)))
    y1, y2 = sorted((min(max(int(corner1[1]), 0), height - 1),
                     min(max(int(corner2[1]), 0), height - 1)))
    overlay[y1, x1:x2 + 1] = color
    overlay[y2, x1:x2 + 1] = color
    overlay[y1:y2 + 1, x1] = color
    overlay[y1:y2 + 1, x2] = color
    return overlay


class MandelbrotRenderer:
    """
    Renders viewports for a fixed canvas, evaluator and color mode.

    The evaluator and color mode are resolved once here, so every frame
    reuses the same compiled kernel.

    Usage:
        renderer = MandelbrotRenderer(800, 600, 'mandelbrot')
        pixels = renderer.render(Viewport.default())
    """

    def __init__(self, width, height, evaluator='mandelbrot', color_mode='red'):
        """
        Initialize the renderer.

        Args:
            width, height: Canvas size in pixels
            evaluator: Evaluator name or function
            color_mode: Color mode name from colormaps.COLORMAPS
        """
        _check_size(width, height)
        self.width = width
        self.height = height
        self.evaluator = resolve_evaluator(evaluator)
        self.color_mode = color_mode
        self.colormap = get_colormap(color_mode)
        get_escape_kernel(self.evaluator)

    @property
    def canvas_size(self):
        return self.width, self.height

    def escape_indices(self, viewport):
        """Raw (height, width) escape-index grid for a viewport."""
        return compute_escape_indices(
            viewport.r, viewport.i, viewport.zoom, viewport.sharpness,
            self.width, self.height, self.evaluator
        )

    def render(self, viewport):
        """Render a viewport into a new RGBA pixel grid."""
        return render(viewport, self.width, self.height, self.evaluator, self.colormap)
