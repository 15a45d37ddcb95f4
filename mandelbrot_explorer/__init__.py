"""
Mandelbrot Explorer Package

An interactive escape-time fractal explorer: pan, zoom, change iteration
depth, drag a box to zoom into and undo any step. Pixels are computed in
parallel with Numba; pygame only shows the frames.

Quick Start:
    from mandelbrot_explorer import Viewport, render
    pixels = render(Viewport.default(), 800, 600, "mandelbrot")

Or from command line:
    python -m mandelbrot_explorer

Package Structure:
    - complex_math.py: Complex value type and JIT-compiled arithmetic
    - compute.py: Escape-time evaluators and parallel pixel kernels
    - colormaps.py: Color modes (red, grayscale)
    - viewport.py: Viewport value, pixel mapping and navigation transforms
    - history.py: Undo stack of viewports
    - zoom_box.py: Drag-rectangle zoom-to-fit
    - precision.py: Floating-point resolution audit with mpmath
    - renderer.py: Frame rasterization
    - controller.py: Navigation state machine
    - app.py: Pygame window and event loop

Controls:
    - Arrows: Pan
    - Z / A: Zoom in / out
    - X / S: More / fewer iterations
    - Backspace: Undo
    - Left click: Center on point
    - Left drag: Zoom into box
    - Right click: Center on point and zoom out
    - F1: Print zoom and iterations
    - F2: Print precision audit
    - Q / ESC: Quit
"""

from .complex_math import Complex, add, multiply, norm
from .compute import (
    EVALUATORS,
    circle,
    get_evaluator,
    list_evaluator_names,
    mandelbrot_naive,
    mandelbrot_optimized,
)
from .colormaps import COLORMAPS, get_colormap, list_colormap_names
from .viewport import Viewport, pixel_to_complex
from .history import NavigationHistory
from .zoom_box import zoom_box
from .precision import AuditResult, audit_precision
from .renderer import MandelbrotRenderer, render, selection_overlay
from .controller import ExplorerController

__version__ = "1.0.0"
__all__ = [
    "Complex",
    "add",
    "multiply",
    "norm",
    "EVALUATORS",
    "circle",
    "get_evaluator",
    "list_evaluator_names",
    "mandelbrot_naive",
    "mandelbrot_optimized",
    "COLORMAPS",
    "get_colormap",
    "list_colormap_names",
    "Viewport",
    "pixel_to_complex",
    "NavigationHistory",
    "zoom_box",
    "AuditResult",
    "audit_precision",
    "MandelbrotRenderer",
    "render",
    "selection_overlay",
    "ExplorerController",
]
