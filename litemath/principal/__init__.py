"""
Principal-axis analysis of 3-D point clouds.

Public API:
    principal_axis(points) - centroid, covariance, eigenvalues, normal and axis
    PointCloudDesign       - validated (n, 3) input
    PrincipalAxisParams    - result payload
    PrincipalAxisSolution  - user-facing wrapper
"""

from litemath.principal.design import PointCloudDesign
from litemath.principal.solution import PrincipalAxisParams, PrincipalAxisSolution
from litemath.principal.solvers import principal_axis

__all__ = [
    "principal_axis",
    "PointCloudDesign",
    "PrincipalAxisParams",
    "PrincipalAxisSolution",
]
