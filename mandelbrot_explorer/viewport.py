"""
The visible window onto the complex plane.

A Viewport is an immutable (r, i, zoom, sharpness) value. Every
navigation step returns a new Viewport with one field changed, so earlier
views kept in the navigation history are never affected.
"""

import math
from dataclasses import dataclass, replace

from . import settings
from .complex_math import Complex


def _check_canvas(canvas_size):
    width, height = canvas_size
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    return width, height


def pixel_to_complex(viewport, canvas_size, pixel):
    """
    Map a pixel to its plane coordinate under a viewport.

    Pixel rows grow downward while the imaginary axis grows upward, hence
    the flip on the second coordinate.

    Args:
        viewport: The current Viewport
        canvas_size: (width, height) in pixels
        pixel: (x, y) with 0 <= x < width and 0 <= y < height

    Raises:
        ValueError if the canvas is empty or the pixel is off the canvas
    """
    width, height = _check_canvas(canvas_size)
    x, y = pixel
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"Pixel {pixel} is outside the {width}x{height} canvas")
    return Complex(
        (x - width / 2) / viewport.zoom + viewport.r,
        (height / 2 - y) / viewport.zoom + viewport.i,
    )


@dataclass(frozen=True)
class Viewport:
    """
    Center (r, i), zoom in pixels per unit and iteration budget.

    Invariants: zoom > 0 and sharpness >= 1.
    """

    r: float
    i: float
    zoom: float
    sharpness: int

    def __post_init__(self):
        # NaN fails the comparison too
        if not self.zoom > 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")
        if self.sharpness < 1:
            raise ValueError(f"sharpness must be at least 1, got {self.sharpness}")

    @classmethod
    def default(cls):
        """The configured starting view."""
        view = settings.INITIAL_VIEW
        return cls(
            r=float(view['r']),
            i=float(view['i']),
            zoom=float(view['zoom']),
            sharpness=int(view['sharpness']),
        )

    @property
    def center(self):
        return Complex(self.r, self.i)

    def pixel_to_complex(self, canvas_size, pixel):
        return pixel_to_complex(self, canvas_size, pixel)

    # Panning moves a fixed number of screen pixels whatever the zoom.

    def step_left(self, step_size=None):
        step = settings.STEP_SIZE if step_size is None else step_size
        return replace(self, r=self.r - step / self.zoom)

    def step_right(self, step_size=None):
        step = settings.STEP_SIZE if step_size is None else step_size
        return replace(self, r=self.r + step / self.zoom)

    def step_up(self, step_size=None):
        step = settings.STEP_SIZE if step_size is None else step_size
        return replace(self, i=self.i + step / self.zoom)

    def step_down(self, step_size=None):
        step = settings.STEP_SIZE if step_size is None else step_size
        return replace(self, i=self.i - step / self.zoom)

    def step_zoom_in(self, zoom_step=None):
        factor = settings.ZOOM_STEP_SIZE if zoom_step is None else zoom_step
        return replace(self, zoom=self.zoom * factor)

    def step_zoom_out(self, zoom_step=None):
        factor = settings.ZOOM_STEP_SIZE if zoom_step is None else zoom_step
        return replace(self, zoom=self.zoom / factor)

    def zoom_by(self, factor):
        """Multiply zoom by an arbitrary positive factor."""
        if not (factor > 0 and math.isfinite(factor)):
            raise ValueError(f"zoom factor must be positive and finite, got {factor}")
        return replace(self, zoom=self.zoom * factor)

    def sharpen(self, amount=None):
        step = settings.SHARPNESS_STEP if amount is None else amount
        return replace(self, sharpness=self.sharpness + step)

    def unsharpen(self, amount=None):
        """Lower the iteration budget, never below 1."""
        step = settings.SHARPNESS_STEP if amount is None else amount
        return replace(self, sharpness=max(1, self.sharpness - step))

    def center_on(self, point):
        return replace(self, r=point.r, i=point.i)
