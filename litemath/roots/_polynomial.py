"""
Small polynomial helpers.

Coefficient sequences run from the constant term up, the same ordering
DenseMatrix.characteristic_coefficients() produces.
"""

from __future__ import annotations

import math
from typing import Sequence

from litemath.core.exceptions import ValidationError


def evaluate(coefficients: Sequence[float], x: float) -> float:
    """Value of sum(c[i] * x**i), by Horner's rule."""
    total = 0.0
    for c in reversed(coefficients):
        total = total * x + c
    return float(total)


def derivative(coefficients: Sequence[float]) -> list[float]:
    """Coefficients of the first derivative. A constant differentiates to [0.0]."""
    if len(coefficients) <= 1:
        return [0.0]
    return [float(i * c) for i, c in enumerate(coefficients) if i > 0]


def deflate(coefficients: Sequence[float], root: float) -> list[float]:
    """
    Quotient of p(x) / (x - root) by synthetic division, constant term first.

    The remainder p(root) is dropped; it is ~0 when `root` really is a root.
    """
    if len(coefficients) < 2:
        raise ValidationError(
            f"coefficients: need degree >= 1 to deflate, got {len(coefficients)} coefficient(s)"
        )
    n = len(coefficients) - 1
    quotient = [0.0] * n
    carry = 0.0
    for i in range(n, 0, -1):
        carry = coefficients[i] + root * carry
        quotient[i - 1] = float(carry)
    return quotient


def quadratic_roots(coefficients: Sequence[float]) -> tuple[float, ...]:
    """
    Real roots of c0 + c1*x + c2*x**2, ascending.

    A negative discriminant gives (); a double root is returned twice.
    With c2 == 0 this degrades to the single linear root.

    Raises:
        ValidationError: If more than three coefficients are given, or the
            polynomial is linear with c1 == 0 (no unique root)
    """
    if len(coefficients) > 3:
        raise ValidationError(
            f"coefficients: expected at most 3 for a quadratic, got {len(coefficients)}"
        )
    c0, c1, c2 = (list(coefficients) + [0.0, 0.0, 0.0])[:3]

    if c2 == 0:
        if c1 == 0:
            raise ValidationError(
                f"coefficients: degenerate polynomial {list(coefficients)} has no unique root"
            )
        return (-c0 / c1,)

    discriminant = c1 ** 2 - 4 * c2 * c0
    if discriminant < 0:
        return ()
    sqrt_d = math.sqrt(discriminant)
    roots = ((-c1 - sqrt_d) / (2 * c2), (-c1 + sqrt_d) / (2 * c2))
    return tuple(sorted(float(r) for r in roots))
