"""Numeric helpers: tolerance constants and a quadratic root finder."""

from __future__ import annotations

import math

EPS = 1e-6
"""Tolerance used for near-zero comparisons throughout the renderer."""

MISS = -1.0
"""Distance returned when a ray misses or no usable root exists."""


def discriminant(a: float, b: float, c: float) -> float:
    """Return the discriminant of ``a*x**2 + b*x + c``."""
    return b * b - 4 * a * c


def min_positive(d1: float, d2: float) -> float:
    """Return the smaller non-negative of two values, or ``MISS`` if both are negative."""
    if d1 < 0 and d2 < 0:
        return MISS
    if d1 < 0:
        return d2
    if d2 < 0:
        return d1
    return d1 if d1 < d2 else d2


def quad_min_solution(a: float, b: float, c: float) -> float:
    """Return the smallest non-negative root of ``a*x**2 + b*x + c = 0``.

    ``MISS`` is returned when there is no real root or every root is negative.
    The linear case (``a == 0``) and the double-root case return the single
    root as is, which may be negative; callers treat any negative result as a
    miss.
    """
    if a == 0 and b == 0:
        return MISS
    if a == 0:
        return -c / b
    d = discriminant(a, b, c)
    if d < -EPS:
        return MISS
    if d < EPS:
        return -b / (2 * a)
    root = math.sqrt(d)
    n1 = (-b - root) / (2 * a)
    n2 = (-b + root) / (2 * a)
    return min_positive(n1, n2)