"""
Dense matrix module.

Public API:
    DenseMatrix         - dense float64 matrix, row- or column-major
    StorageOrder        - 'row' / 'col' buffer layout
    identity(n, k)      - k on the diagonal
    zeros, from_numpy   - general constructors
    matrix2/3/4         - fixed-size square zero matrices
    vector, vector2/3/4 - column vectors
"""

from litemath.matrix._storage import StorageOrder
from litemath.matrix.dense import DenseMatrix
from litemath.matrix.factories import (
    identity,
    zeros,
    from_numpy,
    matrix2,
    matrix3,
    matrix4,
    vector,
    vector2,
    vector3,
    vector4,
)

__all__ = [
    "DenseMatrix",
    "StorageOrder",
    "identity",
    "zeros",
    "from_numpy",
    "matrix2",
    "matrix3",
    "matrix4",
    "vector",
    "vector2",
    "vector3",
    "vector4",
]
