"""
Navigation controller: owns the history and redraws after every change.

The controller has no window or event-loop code; app.py maps pygame
events onto these methods.
"""

import logging

from .history import NavigationHistory
from .precision import audit_precision
from .renderer import MandelbrotRenderer
from .viewport import Viewport
from .zoom_box import zoom_box

logger = logging.getLogger(__name__)


class ExplorerController:
    """
    Holds the navigation history and the last rendered frame.

    Every action derives a new Viewport from the current one, records it
    and renders it. Actions that would produce an invalid viewport are
    logged and leave the state unchanged.

    Attributes:
        history: NavigationHistory of viewports
        renderer: MandelbrotRenderer for the canvas
        pixels: RGBA frame of the current view
    """

    def __init__(self, renderer, initial=None):
        self.renderer = renderer
        self.history = NavigationHistory(initial or Viewport.default())
        self.pixels = renderer.render(self.history.current)

    @classmethod
    def from_settings(cls, width, height, function, color_mode, initial=None):
        return cls(MandelbrotRenderer(width, height, function, color_mode), initial)

    @property
    def view(self):
        return self.history.current

    @property
    def canvas_size(self):
        return self.renderer.canvas_size

    def _redraw(self):
        self.pixels = self.renderer.render(self.history.current)
        return self.pixels

    def _navigate(self, transform, replace=False):
        try:
            new_view = transform(self.history.current)
        except ValueError as e:
            logger.warning("Navigation ignored: %s", e)
            return self.history.current
        if replace:
            self.history.replace_current(new_view)
        else:
            self.history.push(new_view)
        self._redraw()
        return new_view

    def step_left(self):
        return self._navigate(Viewport.step_left)

    def step_right(self):
        return self._navigate(Viewport.step_right)

    def step_up(self):
        return self._navigate(Viewport.step_up)

    def step_down(self):
        return self._navigate(Viewport.step_down)

    def zoom_in(self):
        return self._navigate(Viewport.step_zoom_in)

    def zoom_out(self):
        return self._navigate(Viewport.step_zoom_out)

    # Detail changes replace the current entry rather than stacking up.

    def sharpen(self):
        return self._navigate(Viewport.sharpen, replace=True)

    def unsharpen(self):
        return self._navigate(Viewport.unsharpen, replace=True)

    def undo(self):
        self.history.undo()
        self._redraw()
        return self.history.current

    def click(self, pixel):
        """Recenter on the clicked pixel."""
        canvas = self.canvas_size
        return self._navigate(lambda v: v.center_on(v.pixel_to_complex(canvas, pixel)))

    def drag(self, corner1, corner2):
        """Zoom into the dragged rectangle; a zero-area drag only recenters."""
        canvas = self.canvas_size
        return self._navigate(lambda v: zoom_box(corner1, corner2, canvas, v))

    def right_click(self, pixel):
        """Recenter on the pixel and zoom out one step."""
        canvas = self.canvas_size
        return self._navigate(
            lambda v: v.center_on(v.pixel_to_complex(canvas, pixel)).step_zoom_out()
        )

    def info(self):
        view = self.history.current
        return f"Zoom factor: {view.zoom}\nIterations: {view.sharpness}"

    def audit(self, **kwargs):
        return audit_precision(self.history.current, self.canvas_size, **kwargs)
