"""
Adjugate-based generalized inverse.

For a square matrix A, adj(A) @ A == det(A) * I. When det(A) is non-zero
this gives the inverse adj(A) / det(A). When A is singular with rank n-1,
every non-zero column of adj(A) spans the null space of A, which is how the
principal-axis pipeline turns an eigenvalue into an eigenvector.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from litemath.core.compute.tolerances import DETERMINANT_ZERO_ATOL
from litemath.core.exceptions import NotSquareError
from litemath.matrix import DenseMatrix, from_numpy


@dataclass(frozen=True)
class PseudoInverse:
    """
    Result of pseudo_inverse().

    Attributes:
        matrix: adj(A) / det(A) when A is invertible, adj(A) otherwise
        determinant: det(A)
        singular: True if |det(A)| was at or below the threshold, in
            which case matrix is the raw adjugate
    """
    matrix: DenseMatrix
    determinant: float
    singular: bool


def adjugate(m: DenseMatrix) -> DenseMatrix:
    """
    Transpose of the cofactor matrix, as a new row-major matrix.

    The adjugate of a 1x1 matrix is [[1]].

    Raises:
        NotSquareError: If m is not square
    """
    if not m.is_square:
        raise NotSquareError(
            f"adjugate: matrix is not square (shape {m.shape})",
            operation='adjugate',
            shape=m.shape,
        )
    n = m.rows
    if n == 1:
        return DenseMatrix(1, 1, data=[1.0])

    cofactors = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            cofactors[i, j] = m.cofactor(i, j)
    return from_numpy(cofactors.T)


def pseudo_inverse(m: DenseMatrix, *, atol: float = DETERMINANT_ZERO_ATOL) -> PseudoInverse:
    """
    Inverse of m if |det(m)| > atol, otherwise its adjugate.

    Args:
        m: Square matrix
        atol: Singularity threshold on |det(m)|

    Returns:
        PseudoInverse with the matrix and det(m)

    Raises:
        NotSquareError: If m is not square
    """
    adj = adjugate(m)
    det = m.determinant()
    if abs(det) > atol:
        return PseudoInverse(matrix=adj.scale_in_place(1.0 / det), determinant=det, singular=False)
    return PseudoInverse(matrix=adj, determinant=det, singular=True)
