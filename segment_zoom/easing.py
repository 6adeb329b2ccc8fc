"""Cubic-bezier easing curves.

Curves follow the CSS ``cubic-bezier(x1, y1, x2, y2)`` convention: the
endpoints are pinned at ``(0, 0)`` and ``(1, 1)`` and the four arguments are
the two inner control points.  The x coordinates of those control points must
stay inside ``[0, 1]`` so that the curve is a function of time; anything else
raises :class:`EasingError`.

Evaluating a curve means solving ``x(t) = input`` for the bezier parameter
``t`` and returning ``y(t)``.  A coarse sample table gives the initial guess,
which is refined with Newton-Raphson or, where the slope is too flat, with
binary subdivision.
"""
from __future__ import annotations

from typing import Callable

import numpy as np

__all__ = ["EasingError", "Easing", "clamp_unit", "cubic_bezier", "linear"]

Easing = Callable[[float], float]

NEWTON_ITERATIONS = 4
NEWTON_MIN_SLOPE = 0.001
SUBDIVISION_PRECISION = 1e-7
SUBDIVISION_MAX_ITERATIONS = 10
SPLINE_TABLE_SIZE = 11
SAMPLE_STEP = 1.0 / (SPLINE_TABLE_SIZE - 1)


class EasingError(ValueError):
    """Raised when control points do not describe a usable easing curve."""


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _coefficients(p1: float, p2: float) -> tuple[float, float, float]:
    return 1.0 - 3.0 * p2 + 3.0 * p1, 3.0 * p2 - 6.0 * p1, 3.0 * p1


def _bezier(t, p1: float, p2: float):
    a, b, c = _coefficients(p1, p2)
    return ((a * t + b) * t + c) * t


def _slope(t: float, p1: float, p2: float) -> float:
    a, b, c = _coefficients(p1, p2)
    return 3.0 * a * t * t + 2.0 * b * t + c


def linear(value: float) -> float:
    return clamp_unit(value)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Build an easing function for the given control points."""

    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise EasingError(f"bezier x values must be in [0, 1], got x1={x1}, x2={x2}")
    if x1 == y1 and x2 == y2:
        return linear

    samples = _bezier(np.linspace(0.0, 1.0, SPLINE_TABLE_SIZE), x1, x2)

    def _newton(x: float, guess: float) -> float:
        for _ in range(NEWTON_ITERATIONS):
            slope = _slope(guess, x1, x2)
            if slope == 0.0:
                return guess
            guess -= (_bezier(guess, x1, x2) - x) / slope
        return guess

    def _subdivide(x: float, lo: float, hi: float) -> float:
        current = lo
        for _ in range(SUBDIVISION_MAX_ITERATIONS):
            current = lo + (hi - lo) / 2.0
            error = _bezier(current, x1, x2) - x
            if abs(error) <= SUBDIVISION_PRECISION:
                break
            if error > 0.0:
                hi = current
            else:
                lo = current
        return current

    def _t_for_x(x: float) -> float:
        idx = int(np.searchsorted(samples, x, side="right")) - 1
        idx = max(0, min(SPLINE_TABLE_SIZE - 2, idx))
        lo = idx * SAMPLE_STEP
        span = float(samples[idx + 1] - samples[idx])
        dist = (x - float(samples[idx])) / span if span > 0.0 else 0.0
        guess = lo + dist * SAMPLE_STEP
        slope = _slope(guess, x1, x2)
        if slope >= NEWTON_MIN_SLOPE:
            return _newton(x, guess)
        if slope == 0.0:
            return guess
        return _subdivide(x, lo, lo + SAMPLE_STEP)

    def ease(value: float) -> float:
        x = clamp_unit(value)
        if x == 0.0 or x == 1.0:
            return x
        return float(_bezier(_t_for_x(x), y1, y2))

    return ease
