"""
Minor extraction, determinant and trace on flat buffers.

All functions take the raw buffer plus its shape and storage order, so
DenseMatrix can delegate without this module depending on it. Shape
preconditions are checked by the caller.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from litemath.matrix._storage import StorageOrder, flat_offset, to_flat, to_logical


def minor_buffer(
    data: NDArray[np.float64],
    rows: int,
    cols: int,
    order: StorageOrder,
    row: int,
    col: int,
) -> NDArray[np.float64]:
    """Buffer of the (rows-1) x (cols-1) submatrix without `row` and `col`, same order."""
    logical = to_logical(data, rows, cols, order)
    sub = np.delete(np.delete(logical, row, axis=0), col, axis=1)
    return to_flat(sub, order)


def determinant(data: NDArray[np.float64], n: int, order: StorageOrder) -> float:
    """
    Determinant of an n x n buffer.

    Closed forms for n <= 3 read the buffer directly; they hold for either
    storage order because det(A) == det(A^T). Larger sizes expand along
    logical row 0:

        det(A) = sum_j a[0][j] * (-1)**j * det(minor(0, j))

    The expansion is O(n!) and is only a fallback above 3x3.
    """
    p = data
    if n == 1:
        return float(p[0])
    if n == 2:
        return float(p[0] * p[3] - p[1] * p[2])
    if n == 3:
        total = 0.0
        total += p[0] * (p[4] * p[8] - p[5] * p[7])
        total -= p[1] * (p[3] * p[8] - p[5] * p[6])
        total += p[2] * (p[3] * p[7] - p[4] * p[6])
        return float(total)

    total = 0.0
    for j in range(n):
        a0j = p[flat_offset(n, n, order, 0, j)]
        if a0j == 0.0:
            continue
        sub = minor_buffer(p, n, n, order, 0, j)
        sign = 1.0 if j % 2 == 0 else -1.0
        total += a0j * sign * determinant(sub, n - 1, order)
    return float(total)


def trace(data: NDArray[np.float64], n: int) -> float:
    """Sum of the diagonal; diagonal offsets are i*(n+1) in either order."""
    return float(np.sum(data[::n + 1]))
