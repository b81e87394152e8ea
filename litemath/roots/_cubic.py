"""
Smallest real root of a cubic with three real roots.

Tuned for characteristic polynomials of 3x3 covariance matrices, whose
roots (the eigenvalues) are real and non-negative. The search is a
heuristic bisection, not a guaranteed bracket: the two slots are refilled
by the sign of f at the midpoint rather than kept on opposite sides of a
sign change. Iteration count and replacement rule are fixed so results
stay reproducible.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from litemath.core.exceptions import ValidationError
from litemath.roots._polynomial import derivative, evaluate

BISECTION_ITERATIONS = 30

# Error assigned to a seed that has not been evaluated yet.
_UNSET_ERROR = 1e9


@dataclass(frozen=True)
class _Probe:
    x: float
    y: float
    err: float


def _probe(coefficients: Sequence[float], x: float) -> _Probe:
    y = evaluate(coefficients, x)
    return _Probe(x=x, y=y, err=abs(y))


def smallest_nonnegative_real_root(coefficients: Sequence[float]) -> float:
    """
    Locate the smallest real root of c0 + c1*x + c2*x**2 + c3*x**3.

    Steps:
        1. Flip all signs if c3 > 0, so the cubic term is negative.
        2. Solve f'(x) = 0; take the smaller critical point.
        3. Seed slot 0 at x = 0 and slot 1 at that critical point. If f'
           has no real roots, slot 1 stays at 0 as well.
        4. Repeat 30 times: probe the midpoint of the two slots and store
           it in slot 0 if f(mid) >= 0, otherwise in slot 1.
        5. Return the x of whichever slot has the smaller |f|.

    Args:
        coefficients: Exactly four coefficients, constant term first.

    Returns:
        The root estimate.

    Raises:
        ValidationError: If not exactly four coefficients are given or the
            cubic coefficient is zero
    """
    if len(coefficients) != 4:
        raise ValidationError(
            f"coefficients: expected 4 for a cubic, got {len(coefficients)}"
        )
    coeffs = [float(c) for c in coefficients]
    if coeffs[3] == 0:
        raise ValidationError(
            f"coefficients: cubic coefficient is zero in {list(coefficients)}"
        )

    k = -1.0 if coeffs[3] > 0 else 1.0
    coeffs = [c * k for c in coeffs]

    f0 = evaluate(coeffs, 0.0)
    spans = [
        _Probe(x=0.0, y=f0, err=_UNSET_ERROR),
        _Probe(x=0.0, y=f0, err=_UNSET_ERROR),
    ]

    d = derivative(coeffs)
    discriminant = d[1] ** 2 - 4 * d[0] * d[2]
    if discriminant >= 0:
        sqrt_d = math.sqrt(discriminant)
        critical = min(
            (-d[1] - sqrt_d) / (2 * d[2]),
            (-d[1] + sqrt_d) / (2 * d[2]),
        )
        spans[1] = _probe(coeffs, critical)

    for _ in range(BISECTION_ITERATIONS):
        mid = _probe(coeffs, (spans[0].x + spans[1].x) * 0.5)
        spans[0 if mid.y >= 0 else 1] = mid

    return spans[0].x if spans[0].err <= spans[1].err else spans[1].x
