"""
Minimal complex arithmetic for the escape-time evaluators.

Complex is a plain (r, i) value type. The operations are JIT-compiled so
the evaluators in compute.py can call them from nopython code; they work
the same way from regular Python.
"""

from typing import NamedTuple

import numpy as np
from numba import jit


class Complex(NamedTuple):
    """A 64-bit complex number as (real, imaginary)."""
    r: float
    i: float


@jit(nopython=True, cache=True)
def add(a, b):
    """Componentwise sum."""
    return Complex(a.r + b.r, a.i + b.i)


@jit(nopython=True, cache=True)
def multiply(a, b):
    """Standard complex product."""
    return Complex(a.r * b.r - a.i * b.i, a.r * b.i + a.i * b.r)


@jit(nopython=True, cache=True)
def norm(a):
    """Euclidean magnitude sqrt(r² + i²)."""
    return np.sqrt(a.r * a.r + a.i * a.i)
