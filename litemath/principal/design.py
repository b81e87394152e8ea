"""
PointCloudDesign: validated input for principal-axis analysis.

Wraps an (n, 3) array of 3-D sample points. Parsing text into points is
the caller's job; this only accepts numeric array-likes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from litemath.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_min_samples,
    check_n_columns,
)
from litemath.matrix import DenseMatrix, vector3

POINT_DIMENSION = 3


@dataclass(frozen=True)
class PointCloudDesign:
    """
    Design for principal-axis analysis. Immutable after construction.

    Construction:
        PointCloudDesign.from_array([[1, 0, 0], [-1, 0, 0], ...])
        PointCloudDesign.from_vectors([vector3(1, 0, 0), ...])
    """
    _points: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, points: ArrayLike) -> PointCloudDesign:
        """
        Build from an (n, 3) array-like of point coordinates.

        Raises:
            ValidationError: If non-numeric, non-finite, or empty
            DimensionError: If not 2D or not exactly 3 columns
        """
        arr = check_array(points, 'points')
        check_2d(arr, 'points')
        check_n_columns(arr, POINT_DIMENSION, 'points')
        check_min_samples(arr, 1, 'points')
        check_finite(arr, 'points')
        arr = arr.copy()
        arr.setflags(write=False)
        return cls(_points=arr)

    @classmethod
    def from_vectors(cls, vectors: list[DenseMatrix]) -> PointCloudDesign:
        """Build from 3-element DenseMatrix vectors (their first three flat values)."""
        return cls.from_array([v.data[:POINT_DIMENSION] for v in vectors])

    @property
    def points(self) -> NDArray[np.floating[Any]]:
        """Read-only (n, 3) point array."""
        return self._points

    @property
    def n(self) -> int:
        """Number of sample points."""
        return self._points.shape[0]

    def vectors(self) -> list[DenseMatrix]:
        """Each sample as a fresh 3x1 DenseMatrix."""
        return [vector3(*row) for row in self._points]

    def __repr__(self) -> str:
        return f"PointCloudDesign(n={self.n})"
