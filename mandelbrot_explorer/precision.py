"""
Diagnostic check of whether floating point can still resolve the zoom level.

The check never changes the viewport or the rendered image. It compares
the per-pixel step 1/zoom, computed with mpmath, against what the working
floating-point type can represent next to the plane coordinate of pixel
(0, 0). Rounding of x + 1/zoom can land on either neighbouring
representable value, so both are tested: the view is only reported sound
if every admissible rounding keeps the step within 0.1% of 1/zoom.
"""

import logging
import math
from typing import NamedTuple

import mpmath
import numpy as np

logger = logging.getLogger(__name__)

MIN_DIGITS = 32


class AuditResult(NamedTuple):
    sound: bool
    report: str


def _bracket(exact, dtype):
    """Adjacent values of `dtype` around an mpmath number (equal when exact)."""
    nearest = dtype(float(exact))
    if mpmath.mpf(float(nearest)) == exact:
        return nearest, nearest
    if mpmath.mpf(float(nearest)) < exact:
        return nearest, np.nextafter(nearest, dtype(np.inf))
    return np.nextafter(nearest, dtype(-np.inf)), nearest


def audit_precision(viewport, canvas, digits=MIN_DIGITS, dtype=np.float64):
    """
    Report whether `dtype` arithmetic can resolve single-pixel steps of a view.

    Args:
        viewport: The Viewport to check
        canvas: (width, height) in pixels
        digits: mpmath working precision in significant decimal digits
            (at least 32)
        dtype: Working floating-point type, numpy.float64 or numpy.float32

    Returns:
        AuditResult(sound, report), report ending in "GOOD!" or "BAD!"
    """
    width, height = canvas
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    dtype = np.dtype(dtype).type
    digits = max(int(digits), MIN_DIGITS)

    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        zoom = dtype(viewport.zoom)
        # Real coordinate of pixel (0, 0), as the renderer computes it.
        x = (dtype(0) - dtype(width) / dtype(2)) / zoom + dtype(viewport.r)

    with mpmath.workdps(digits):
        if not (math.isfinite(viewport.zoom) and np.isfinite(x) and np.isfinite(zoom)):
            report = "\n".join([
                f"Zoom factor: {viewport.zoom}",
                "Non-finite coordinates, cannot resolve pixels",
                "BAD!",
            ])
            logger.debug("Precision audit: non-finite view %r", viewport)
            return AuditResult(False, report)

        big_x = mpmath.mpf(float(x))
        big_zoom = mpmath.mpf(viewport.zoom)
        z = 1 / big_zoom
        y = big_x + z

        upper = mpmath.mpf(1001) / 1000
        lower = mpmath.mpf(1000) / 1001

        sound = True
        differences = []
        ratios = []
        for rounded in _bracket(y, dtype):
            d = mpmath.mpf(float(rounded)) - big_x
            differences.append(d)
            if d == 0:
                sound = False
                ratios.append(mpmath.inf)
                continue
            relative_difference = z / d
            ratios.append(relative_difference)
            if relative_difference > upper or relative_difference < lower:
                sound = False

        report = "\n".join([
            f"Big Float zoom: {mpmath.nstr(big_zoom, digits)}",
            f"Big Float inverse zoom: {mpmath.nstr(z, digits)}",
            "Big Float difference: " + " .. ".join(mpmath.nstr(d, digits) for d in differences),
            "Relative difference: " + " .. ".join(mpmath.nstr(r, 12) for r in ratios),
            "GOOD!" if sound else "BAD!",
        ])

    logger.debug("Precision audit at zoom %g: %s", viewport.zoom, "sound" if sound else "degraded")
    return AuditResult(sound, report)
