"""
Factories for DenseMatrix.

Fixed-size matrices and vectors are not separate types: matrix3() is just
a 3x3 DenseMatrix and vector3() a 3x1 one.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from litemath.core.validation import check_2d, check_array, check_positive_int
from litemath.matrix._storage import StorageOrder, as_storage_order, to_flat
from litemath.matrix.dense import DenseMatrix


def identity(dim: int, coefficient: float = 1.0) -> DenseMatrix:
    """dim x dim row-major matrix with `coefficient` on the diagonal."""
    m = DenseMatrix(dim, dim, StorageOrder.ROW_MAJOR)
    m.data[::dim + 1] = coefficient
    return m


def zeros(rows: int, cols: int, order: StorageOrder | str = StorageOrder.ROW_MAJOR) -> DenseMatrix:
    return DenseMatrix(rows, cols, order)


def from_numpy(array: ArrayLike, order: StorageOrder | str = StorageOrder.ROW_MAJOR) -> DenseMatrix:
    """
    Build a matrix from a logical 2D array (a 1D array becomes a column vector).

    Unlike the `data=` constructor argument, which takes values in buffer
    order, this lays the array out correctly for either storage order.
    """
    arr = check_array(array, 'array')
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    check_2d(arr, 'array')
    order = as_storage_order(order)
    rows, cols = arr.shape
    return DenseMatrix(rows, cols, order, data=to_flat(arr, order))


def matrix2() -> DenseMatrix:
    return DenseMatrix(2, 2)


def matrix3() -> DenseMatrix:
    return DenseMatrix(3, 3)


def matrix4() -> DenseMatrix:
    return DenseMatrix(4, 4)


def vector(n: int, values: ArrayLike | None = None) -> DenseMatrix:
    """n x 1 column vector, zero-filled or initialised from `values`."""
    n = check_positive_int(n, 'n')
    return DenseMatrix(n, 1, StorageOrder.ROW_MAJOR, data=values)


def vector2(x: float = 0.0, y: float = 0.0) -> DenseMatrix:
    return vector(2, np.array([x, y], dtype=np.float64))


def vector3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> DenseMatrix:
    return vector(3, np.array([x, y, z], dtype=np.float64))


def vector4(x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> DenseMatrix:
    return vector(4, np.array([x, y, z, w], dtype=np.float64))
