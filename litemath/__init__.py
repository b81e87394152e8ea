"""
litemath: small dense linear algebra with principal-axis analysis.

Submodules:
    matrix: DenseMatrix and factories (identity, vectors, fixed sizes)
    roots: Cubic root search and polynomial helpers
    linalg: Adjugate and pseudo-inverse
    principal: Principal axes of 3-D point clouds
"""

__version__ = "0.1.0"

from litemath import matrix
from litemath import roots
from litemath import linalg
from litemath import principal
from litemath.matrix import (
    DenseMatrix,
    StorageOrder,
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
from litemath.roots import smallest_nonnegative_real_root
from litemath.linalg import PseudoInverse, adjugate, pseudo_inverse
from litemath.principal import principal_axis

__all__ = [
    "__version__",
    "matrix",
    "roots",
    "linalg",
    "principal",
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
    "smallest_nonnegative_real_root",
    "PseudoInverse",
    "adjugate",
    "pseudo_inverse",
    "principal_axis",
]
