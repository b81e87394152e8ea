"""
Linear algebra built on DenseMatrix.

Public API:
    adjugate(m)        - transpose of the cofactor matrix
    pseudo_inverse(m)  - inverse, or adjugate when m is singular
    PseudoInverse      - (matrix, determinant, singular) result
"""

from litemath.linalg.pseudo_inverse import PseudoInverse, adjugate, pseudo_inverse

__all__ = [
    "PseudoInverse",
    "adjugate",
    "pseudo_inverse",
]
