"""
Shared compute infrastructure for litemath.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and zero thresholds
"""

from litemath.core.compute.timing import Timer, timed
from litemath.core.compute.tolerances import (
    ToleranceTier,
    CLOSED_FORM,
    ROOT_SEARCH,
    EIGEN_PIPELINE,
    DETERMINANT_ZERO_ATOL,
    EIGENVECTOR_ZERO_RTOL,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CLOSED_FORM",
    "ROOT_SEARCH",
    "EIGEN_PIPELINE",
    "DETERMINANT_ZERO_ATOL",
    "EIGENVECTOR_ZERO_RTOL",
    "select_tolerance",
]
