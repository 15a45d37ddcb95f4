"""
Escape-time evaluators and parallel pixel kernels using Numba JIT compilation.

This module contains all the performance-critical computation functions.
They handle:
- Escape-time evaluation of a single complex point (circle, Mandelbrot)
- Building a parallel kernel per evaluator that fills an escape-index grid
- Mapping escape indices to RGBA pixels

Supported evaluators (see EVALUATORS):
- "circle": cheap non-fractal reference, |c| <= 1 is "inside"
- "mandelbrot": z² + c, real/imaginary component form
- "mandelbrot_naive": z² + c, written with complex multiplication

Evaluators share one signature, (point: Complex, iterations) -> int, and
return -1 for points that do not escape within the iteration budget.
"""

import logging

import numba
import numpy as np
from numba import jit, prange

from .complex_math import Complex, add, multiply, norm

logger = logging.getLogger(__name__)

IN_SET = -1

# circle() returns 0 at or beyond this magnitude; int64 cannot hold floor(|c|).
CIRCLE_LIMIT = 2.0 ** 63


@jit(nopython=True, cache=True)
def circle(point, iterations):
    """
    Reference evaluator: -1 inside the unit circle, else iterations - floor(|c|).

    Non-finite magnitudes, and those of 2**63 or more, return 0.
    """
    d = norm(point)
    if d <= 1.0:
        return IN_SET
    if not d < CIRCLE_LIMIT:
        return 0
    return iterations - int(np.floor(d))


@jit(nopython=True, cache=True)
def mandelbrot_naive(point, iterations):
    """
    Iterate z <- z*z + c from z = 0 using Complex arithmetic.

    Returns the 0-based step at which |z| > 2 first holds, or -1.
    """
    z = Complex(0.0, 0.0)
    for step in range(iterations):
        z = add(multiply(z, z), point)
        if norm(z) > 2.0:
            return step
    return IN_SET


@jit(nopython=True, cache=True)
def mandelbrot_optimized(point, iterations):
    """
    Same result as mandelbrot_naive, carrying x² and y² across steps.

    The escape test x² + y² > 4 is |z| > 2 without the square root.
    """
    x = 0.0
    y = 0.0
    x2 = 0.0
    y2 = 0.0
    for step in range(iterations):
        y = (x + x) * y + point.i
        x = x2 - y2 + point.r
        x2 = x * x
        y2 = y * y
        if x2 + y2 > 4.0:
            return step
    return IN_SET


# Registry of available evaluators.
# "mandelbrot" is the one used for interactive rendering.
EVALUATORS = {
    'circle': circle,
    'mandelbrot': mandelbrot_optimized,
    'mandelbrot_naive': mandelbrot_naive,
}


def get_evaluator(name):
    """
    Get an evaluator by name (case-insensitive).

    Raises:
        KeyError if name is not a known evaluator
    """
    try:
        return EVALUATORS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown evaluator {name!r}; expected one of {list_evaluator_names()}"
        ) from None


def list_evaluator_names():
    """Get list of available evaluator names."""
    return list(EVALUATORS.keys())


def resolve_evaluator(evaluator):
    """Accept either a registry name or an evaluator function."""
    if isinstance(evaluator, str):
        return get_evaluator(evaluator)
    return evaluator


def _build_escape_kernel(evaluate):
    # fastmath stays off: kernel output must match the scalar evaluators exactly.
    @jit(nopython=True, parallel=True)
    def kernel(center_r, center_i, zoom, sharpness, width, height, out):
        half_w = width / 2.0
        half_h = height / 2.0
        for k in prange(width * height):
            py = k // width
            px = k - py * width
            point = Complex((px - half_w) / zoom + center_r,
                            (half_h - py) / zoom + center_i)
            out[py, px] = evaluate(point, sharpness)

    return kernel


_KERNELS = {}


def get_escape_kernel(evaluator):
    """
    Get the parallel escape kernel for an evaluator, building it on first use.

    The kernel signature is
    (center_r, center_i, zoom, sharpness, width, height, out) and it fills
    out[y, x] with the escape index of every pixel. Work is split across
    Numba's thread pool over the flattened y * width + x index space.
    """
    evaluate = resolve_evaluator(evaluator)
    kernel = _KERNELS.get(evaluate)
    if kernel is None:
        logger.debug("Building escape kernel for %s", getattr(evaluate, '__name__', evaluate))
        kernel = _build_escape_kernel(evaluate)
        _KERNELS[evaluate] = kernel
    return kernel


def compute_escape_indices(r, i, zoom, sharpness, width, height, evaluator):
    """
    Compute the escape index of every pixel of a width x height canvas.

    Args:
        r, i: Plane coordinates mapped to the canvas center
        zoom: Pixels per unit
        sharpness: Iteration budget
        width, height: Canvas size in pixels
        evaluator: Registry name or evaluator function

    Returns:
        2D numpy array (height, width) of int64 escape indices
    """
    out = np.empty((height, width), dtype=np.int64)
    kernel = get_escape_kernel(evaluator)
    kernel(float(r), float(i), float(zoom), int(sharpness), int(width), int(height), out)
    return out


@jit(nopython=True, parallel=True, cache=True)
def apply_ramp(escapes, sharpness, channels, out):
    """
    Map escape indices to RGBA pixels.

    -1 becomes opaque black. Any other index becomes
    floor(255 * index / sharpness), clipped to [0, 255], written into the
    RGB channels whose entry in `channels` is non-zero. Alpha is always 255.

    Args:
        escapes: 2D int array of escape indices
        sharpness: Iteration budget the indices were computed with
        channels: length-3 uint8 mask selecting R, G, B
        out: Output RGBA array (height, width, 4), modified in place
    """
    height, width = escapes.shape
    for k in prange(width * height):
        py = k // width
        px = k - py * width
        z = escapes[py, px]
        # Clamp before multiplying; circle indices can approach -2**63.
        if z <= 0:
            value = 0
        elif z >= sharpness:
            value = 255
        else:
            value = (255 * z) // sharpness
        for c in range(3):
            if channels[c] != 0:
                out[py, px, c] = value
            else:
                out[py, px, c] = 0
        out[py, px, 3] = 255


def configure_threads(threads):
    """
    Set the number of worker threads used by the parallel kernels.

    None leaves Numba's default (one per core) in place.
    """
    if threads is None:
        return numba.get_num_threads()
    numba.set_num_threads(int(threads))
    logger.info("Rendering with %d threads", numba.get_num_threads())
    return numba.get_num_threads()


def warmup_jit(channels=None):
    """
    Warm up JIT compilation with small dummy arrays.

    Call this once at startup to pre-compile the evaluators and kernels,
    avoiding a delay on first actual use.
    """
    if channels is None:
        channels = np.array([1, 0, 0], dtype=np.uint8)
    dummy = np.zeros((4, 4, 4), dtype=np.uint8)
    for name in EVALUATORS:
        escapes = compute_escape_indices(0.0, 0.0, 1.0, 10, 4, 4, name)
        apply_ramp(escapes, 10, channels, dummy)
