"""
Tolerance tiers and zero thresholds.

Defines precision expectations for the different numeric paths:
- closed-form algebra (products, determinants, cofactors): machine precision
- the 30-step bisection root search: limited by the bracket width
- the full eigen pipeline: root search error propagated into eigenvectors

Used by the principal-axis backends and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Direct floating-point arithmetic, no iteration
CLOSED_FORM = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='closed_form',
    description='Closed-form algebra, exact up to rounding',
)

# 30 halvings of a bracket a few units wide leave ~1e-9 of slack
ROOT_SEARCH = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='root_search',
    description='Bisection root search after 30 iterations',
)

# Eigenvalues from the root search, then vectors from shifted adjugates
EIGEN_PIPELINE = ToleranceTier(
    rtol=1e-4,
    atol=1e-4,
    name='eigen_pipeline',
    description='Characteristic polynomial eigen pipeline',
)

# |det| at or below this is treated as singular by pseudo_inverse().
# Matches the threshold the point-cloud pipeline uses to detect a zero root.
DETERMINANT_ZERO_ATOL = 1e-10

# An adjugate column counts as zero when its largest |entry| is at or below
# this fraction of the squared Frobenius norm of the shifted matrix (3x3
# adjugate entries are 2x2 minors, so they scale with the norm squared).
EIGENVECTOR_ZERO_RTOL = 1e-8


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier that applies to a backend's output."""
    if backend_name == 'cpu_cofactor':
        return EIGEN_PIPELINE
    return CLOSED_FORM
