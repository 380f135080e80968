import math

import pytest

from minirt.quadratic import MISS, discriminant, min_positive, quad_min_solution


def test_miss_is_minus_one():
    assert quad_min_solution(1.0, 0.0, 4.0) == -1


def test_degenerate_equation_misses():
    assert quad_min_solution(0, 0, 5) == MISS


def test_linear_root_satisfies_equation():
    t = quad_min_solution(0, 2.0, -4.0)
    assert math.isclose(2.0 * t - 4.0, 0.0, abs_tol=1e-12)


def test_linear_root_may_be_negative():
    t = quad_min_solution(0, 2.0, 4.0)
    assert t < 0
    assert math.isclose(2.0 * t + 4.0, 0.0, abs_tol=1e-12)


@pytest.mark.parametrize(
    "r1, r2, expected",
    [(1.0, 3.0, 1.0), (-2.0, 5.0, 5.0), (4.0, -1.5, 4.0), (0.0, 2.0, 0.0)],
)
def test_smallest_non_negative_root(r1, r2, expected):
    a, b, c = 1.0, -(r1 + r2), r1 * r2
    assert math.isclose(quad_min_solution(a, b, c), expected, abs_tol=1e-9)


def test_scaled_coefficients_give_same_root():
    a, b, c = 1.0, -(1.0 + 3.0), 1.0 * 3.0
    assert math.isclose(
        quad_min_solution(a, b, c), quad_min_solution(3 * a, 3 * b, 3 * c)
    )


def test_both_roots_negative_misses():
    r1, r2 = -1.0, -3.0
    assert quad_min_solution(1.0, -(r1 + r2), r1 * r2) == MISS


def test_no_real_roots_misses():
    assert quad_min_solution(1.0, 0.0, 1.0) == MISS


def test_double_root_returned_even_when_negative():
    r = -2.0
    assert math.isclose(quad_min_solution(1.0, -2 * r, r * r), r)


def test_discriminant_zero_for_perfect_square():
    assert discriminant(1.0, 2.0, 1.0) == 0


def test_discriminant_sign():
    assert discriminant(1.0, 0.0, 1.0) < 0
    assert discriminant(1.0, 0.0, -1.0) > 0


@pytest.mark.parametrize(
    "d1, d2, expected",
    [
        (-1.0, -2.0, MISS),
        (-1.0, 2.0, 2.0),
        (3.0, -2.0, 3.0),
        (3.0, 2.0, 2.0),
        (1.0, 5.0, 1.0),
        (0.0, 5.0, 0.0),
    ],
)
def test_min_positive(d1, d2, expected):
    assert min_positive(d1, d2) == expected