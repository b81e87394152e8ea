"""
Closed-form characteristic polynomial coefficients, det(A - xI).

Coefficients are ordered from the constant term up to the leading term.
Only sizes 1 to 3 have closed forms here; the caller rejects larger ones.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from litemath.matrix._cofactor import determinant, trace
from litemath.matrix._storage import StorageOrder, to_logical

MAX_CHARACTERISTIC_SIZE = 3


def characteristic_coefficients(
    data: NDArray[np.float64],
    n: int,
    order: StorageOrder,
) -> list[float]:
    """
    Coefficients of det(A - xI) for an n x n buffer, n in 1..3.

    1x1: a00 - x
    2x2: x^2 - tr(A) x + det(A)
    3x3: -x^3 + tr(A) x^2 + c1 x + det(A), where

        c1 = (a01*a10 + a02*a20 + a12*a21) - (a11*a22 + a22*a00 + a00*a11)

    i.e. minus the sum of the 2x2 principal minors.
    """
    if n == 1:
        return [float(data[0]), -1.0]
    if n == 2:
        return [determinant(data, 2, order), -trace(data, 2), 1.0]

    a = to_logical(data, n, n, order)
    cross_terms = a[0, 1] * a[1, 0] + a[0, 2] * a[2, 0] + a[1, 2] * a[2, 1]
    diagonal_pairs = a[1, 1] * a[2, 2] + a[2, 2] * a[0, 0] + a[0, 0] * a[1, 1]
    return [
        determinant(data, 3, order),
        float(cross_terms - diagonal_pairs),
        trace(data, 3),
        -1.0,
    ]
