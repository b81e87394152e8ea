"""
Solver dispatch for principal-axis analysis.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from litemath.core.exceptions import ValidationError
from litemath.core.protocols import Backend
from litemath.principal.design import PointCloudDesign
from litemath.principal.solution import PrincipalAxisSolution
from litemath.principal.backends.cpu import CPUCofactorBackend, CPUEighBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_cofactor', 'cpu_eigh']


def _ensure_design(points: ArrayLike | PointCloudDesign) -> PointCloudDesign:
    """Convert raw array to PointCloudDesign if needed."""
    if isinstance(points, PointCloudDesign):
        return points
    return PointCloudDesign.from_array(points)


def _get_backend(backend: BackendChoice) -> Backend:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu', 'cpu_cofactor'):
        return CPUCofactorBackend()
    if backend == 'cpu_eigh':
        return CPUEighBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def principal_axis(
    points: ArrayLike | PointCloudDesign,
    *,
    rescale: bool = True,
    backend: BackendChoice = 'auto',
) -> PrincipalAxisSolution:
    """
    Principal axes of a 3-D point cloud.

    Centres the points on their centroid, optionally rescales them by the
    largest absolute component, builds the covariance (divided by n) and
    decomposes it. The eigenvector of the smallest eigenvalue is the
    best-fit plane normal; that of the largest is the dominant axis.

    Parameters
    ----------
    points : array-like of shape (n, 3) or PointCloudDesign
        Sample points.
    rescale : bool
        Divide centred points by their largest |component|. Eigenvalues
        shrink by scale**2; eigenvectors are unaffected.
    backend : str
        'auto' / 'cpu' / 'cpu_cofactor' for the characteristic-polynomial
        pipeline, 'cpu_eigh' for the LAPACK reference.

    Returns
    -------
    PrincipalAxisSolution

    Examples
    --------
    >>> sol = principal_axis([[1, 0, 0], [-1, 0, 0], [0, 1, 0], [0, -1, 0]])
    >>> sol.eigenvalues
    array([0. , 0.5, 0.5])
    >>> abs(sol.normal)
    array([0., 0., 1.])
    """
    design = _ensure_design(points)
    be = _get_backend(backend)
    result = be.solve(design, rescale=rescale)
    return PrincipalAxisSolution(_result=result, _design=design)
