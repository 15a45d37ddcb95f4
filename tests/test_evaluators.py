"""Tests for the escape-time evaluators and the evaluator registry."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mandelbrot_explorer.complex_math import Complex
from mandelbrot_explorer.compute import (
    EVALUATORS,
    circle,
    get_evaluator,
    list_evaluator_names,
    mandelbrot_naive,
    mandelbrot_optimized,
)

PLANE = st.floats(min_value=-2.5, max_value=2.5, allow_nan=False, allow_infinity=False)
ANY_FLOAT = st.floats(allow_nan=True, allow_infinity=True, width=64)
BOUNDED = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
ITERATIONS = st.integers(min_value=0, max_value=300)


@pytest.mark.parametrize("evaluate", [mandelbrot_naive, mandelbrot_optimized])
@pytest.mark.parametrize(
    ("point", "iterations", "expected"),
    [
        (Complex(0.0, 0.0), 50, -1),    # fixed point at the origin
        (Complex(-2.0, 0.0), 50, -1),   # tip of the set, orbit stays at 2
        (Complex(-1.0, 0.0), 50, -1),   # period-2 cycle
        (Complex(3.0, 0.0), 50, 0),     # |c| > 2 escapes on the first step
        (Complex(2.0, 0.0), 50, 1),     # 2 -> 6
        (Complex(1.0, 0.0), 50, 2),     # 1 -> 2 -> 5
        (Complex(1.0, 0.0), 2, -1),     # budget runs out before escape
        (Complex(0.5, 0.5), 0, -1),     # zero budget never escapes
    ],
)
def test_mandelbrot_known_points(evaluate, point, iterations, expected) -> None:
    assert evaluate(point, iterations) == expected


@given(r=PLANE, i=PLANE, iterations=ITERATIONS)
def test_naive_and_optimized_agree(r: float, i: float, iterations: int) -> None:
    """The component form is a pure refactor of the complex-multiplication form."""
    point = Complex(r, i)
    assert mandelbrot_naive(point, iterations) == mandelbrot_optimized(point, iterations)


@given(r=ANY_FLOAT, i=ANY_FLOAT, iterations=st.integers(min_value=1, max_value=50))
def test_naive_and_optimized_agree_on_extreme_inputs(r: float, i: float, iterations: int) -> None:
    point = Complex(r, i)
    assert mandelbrot_naive(point, iterations) == mandelbrot_optimized(point, iterations)


@pytest.mark.parametrize("evaluate", [mandelbrot_naive, mandelbrot_optimized])
def test_mandelbrot_tolerates_non_finite_points(evaluate) -> None:
    assert evaluate(Complex(float("nan"), 0.0), 30) == -1
    assert evaluate(Complex(float("inf"), 0.0), 30) == 0
    assert evaluate(Complex(0.0, float("-inf")), 30) == 0


@given(r=BOUNDED, i=BOUNDED, iterations=st.integers(min_value=1, max_value=1000))
def test_circle_law(r: float, i: float, iterations: int) -> None:
    magnitude = math.sqrt(r * r + i * i)
    expected = -1 if magnitude <= 1.0 else iterations - math.floor(magnitude)
    assert circle(Complex(r, i), iterations) == expected


def test_circle_examples() -> None:
    assert circle(Complex(0.0, 0.0), 30) == -1
    assert circle(Complex(1.0, 0.0), 30) == -1
    assert circle(Complex(3.0, 4.0), 30) == 25
    assert circle(Complex(-1.5, 0.0), 30) == 29


@pytest.mark.parametrize("magnitude", [2.0 ** 53, 2.0 ** 60])
def test_circle_law_holds_for_huge_magnitudes(magnitude: float) -> None:
    assert circle(Complex(magnitude, 0.0), 30) == 30 - math.floor(magnitude)
    assert circle(Complex(0.0, -magnitude), 30) == 30 - math.floor(magnitude)


def test_circle_non_finite_escapes_immediately() -> None:
    assert circle(Complex(float("nan"), 0.0), 30) == 0
    assert circle(Complex(float("inf"), 0.0), 30) == 0
    assert circle(Complex(1e300, 1e300), 30) == 0
    assert circle(Complex(2.0 ** 63, 0.0), 30) == 0


def test_registry_names() -> None:
    assert set(list_evaluator_names()) == {"circle", "mandelbrot", "mandelbrot_naive"}
    assert EVALUATORS["mandelbrot"] is mandelbrot_optimized


def test_get_evaluator_is_case_insensitive() -> None:
    assert get_evaluator("CIRCLE") is circle
    assert get_evaluator("Mandelbrot") is mandelbrot_optimized


def test_get_evaluator_rejects_unknown_name() -> None:
    with pytest.raises(KeyError, match="julia"):
        get_evaluator("julia")
