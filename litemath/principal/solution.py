"""
Principal-axis solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from litemath.core.compute.tolerances import ToleranceTier, select_tolerance
from litemath.core.result import Result
from litemath.matrix import DenseMatrix, from_numpy

if TYPE_CHECKING:
    from litemath.principal.design import PointCloudDesign


@dataclass(frozen=True)
class PrincipalAxisParams:
    """
    Parameter payload for principal-axis analysis.

    Eigenvalues and eigenvectors describe the covariance of the centred and
    rescaled samples; rescaling multiplies eigenvalues by 1/scale**2 and
    leaves eigenvectors unchanged.
    """
    centroid: NDArray[np.floating[Any]]       # (3,)
    scale: float                              # divisor applied after centring
    covariance: NDArray[np.floating[Any]]     # (3, 3), divided by n
    coefficients: tuple[float, ...]           # det(C - xI), constant first
    eigenvalues: NDArray[np.floating[Any]]    # (k,), ascending, k <= 3
    eigenvectors: NDArray[np.floating[Any]]   # (k, 3), unit rows


@dataclass
class PrincipalAxisSolution:
    """
    User-facing principal-axis results.

    Wraps Result[PrincipalAxisParams] and provides convenient accessors.
    """
    _result: Result[PrincipalAxisParams]
    _design: 'PointCloudDesign'

    @property
    def centroid(self) -> NDArray[np.floating[Any]]:
        """Mean of the input points, shape (3,)."""
        return self._result.params.centroid

    @property
    def scale(self) -> float:
        """Largest |component| of the centred points (1.0 if not rescaled)."""
        return self._result.params.scale

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Covariance of the centred, rescaled points, shape (3, 3)."""
        return self._result.params.covariance

    @property
    def covariance_matrix(self) -> DenseMatrix:
        """Covariance as a DenseMatrix."""
        return from_numpy(self._result.params.covariance)

    @property
    def coefficients(self) -> tuple[float, ...]:
        """Characteristic polynomial coefficients, constant term first."""
        return self._result.params.coefficients

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Real eigenvalues of the covariance, ascending."""
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> NDArray[np.floating[Any]]:
        """Unit eigenvectors as rows, matching eigenvalues."""
        return self._result.params.eigenvectors

    @property
    def normal(self) -> NDArray[np.floating[Any]]:
        """Best-fit plane normal: eigenvector of the smallest eigenvalue."""
        return self._result.params.eigenvectors[0]

    @property
    def axis(self) -> NDArray[np.floating[Any]]:
        """Dominant direction: eigenvector of the largest eigenvalue."""
        return self._result.params.eigenvectors[-1]

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def tolerance(self) -> ToleranceTier:
        """Tolerance tier that applies when comparing this backend's numbers."""
        return select_tolerance(self._result.backend_name)

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text report of the fit."""
        def fmt(values) -> str:
            return ', '.join(f"{v:.6g}" for v in values)

        lines = [
            "Principal axis analysis",
            "=" * 40,
            f"Points: {self.n}",
            f"Backend: {self.backend_name}",
            f"Centroid: ({fmt(self.centroid)})",
            f"Scale: {self.scale:.6g}",
            "",
            "Covariance:",
        ]
        for row in self.covariance:
            lines.append(f"  {fmt(row)}")
        lines.append("")
        lines.append(f"Characteristic coefficients: [{fmt(self.coefficients)}]")
        lines.append("")
        lines.append("Eigenvalue   Eigenvector")
        for value, vec in zip(self.eigenvalues, self.eigenvectors):
            lines.append(f"{value:<12.6g} ({fmt(vec)})")
        lines.append("")
        lines.append(f"Normal: ({fmt(self.normal)})")
        lines.append(f"Axis:   ({fmt(self.axis)})")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PrincipalAxisSolution(n={self.n}, eigenvalues={self.eigenvalues.tolist()}, "
            f"backend={self.backend_name!r})"
        )
