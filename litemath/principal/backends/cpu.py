"""
CPU backends for principal-axis analysis.

cpu_cofactor is the reference pipeline: covariance -> characteristic
polynomial -> bisection root search -> adjugate eigenvectors, all on
DenseMatrix. cpu_eigh shares the covariance step and hands the
decomposition to LAPACK (numpy.linalg.eigh); it exists to cross-check the
cofactor path.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np
from scipy.linalg import null_space

from litemath.core.compute.timing import Timer, timed
from litemath.core.compute.tolerances import (
    DETERMINANT_ZERO_ATOL,
    EIGEN_PIPELINE,
    EIGENVECTOR_ZERO_RTOL,
)
from litemath.core.exceptions import NumericalError
from litemath.core.result import Result
from litemath.linalg import pseudo_inverse
from litemath.matrix import DenseMatrix, from_numpy, identity, matrix3, vector3
from litemath.principal.design import PointCloudDesign
from litemath.principal.solution import PrincipalAxisParams
from litemath.roots import deflate, quadratic_roots, smallest_nonnegative_real_root


@dataclass(frozen=True)
class _Moments:
    centroid: DenseMatrix
    scale: float
    covariance: DenseMatrix


def _moments(design: PointCloudDesign, rescale: bool, timer: Timer) -> _Moments:
    """Centroid, max-abs scale and covariance (divided by n) of the samples."""
    samples = design.vectors()
    n = design.n

    with timer.section('centroid'):
        centroid = vector3()
        for v in samples:
            centroid.add_scaled(v)
        centroid.scale_in_place(1.0 / n)

    with timer.section('centring'):
        upper = vector3()
        lower = vector3()
        for v in samples:
            v.add_scaled(centroid, -1.0)
            upper.componentwise_max(v)
            lower.componentwise_min(v)

        scale = 1.0
        if rescale:
            largest = float(max(upper.data.max(), lower.abs_in_place().data.max()))
            if largest != 0:
                scale = largest
                for v in samples:
                    v.scale_in_place(1.0 / largest)

    with timer.section('covariance'):
        covariance = matrix3()
        for v in samples:
            # 3x1 @ 1x3 outer product
            covariance.add_scaled(v.multiply(v.transpose()))
        covariance.scale_in_place(1.0 / n)

    return _Moments(centroid=centroid, scale=scale, covariance=covariance)


def _first_nonzero_column(m: DenseMatrix, atol: float) -> DenseMatrix | None:
    for j in range(m.cols):
        col = m.column(j)
        if not col.is_zero(atol):
            return col
    return None


class CPUCofactorBackend:
    """Characteristic-polynomial eigen pipeline on DenseMatrix."""

    @property
    def name(self) -> str:
        return 'cpu_cofactor'

    def solve(
        self,
        design: PointCloudDesign,
        *,
        rescale: bool = True,
    ) -> Result[PrincipalAxisParams]:
        """
        Run the full pipeline.

        Parameters
        ----------
        design : PointCloudDesign
        rescale : bool
            Divide the centred samples by their largest |component| before
            building the covariance.
        """
        timer = Timer()
        timer.start()
        messages: list[str] = []

        moments = _moments(design, rescale, timer)
        cov = moments.covariance

        with timer.section('eigenvalues'):
            coefficients = cov.characteristic_coefficients()
            # Work on C / trace(C): the zero-root and singularity thresholds
            # below are absolute, and det(C - xI) scales as trace**3.
            unit = cov.trace()
            if unit <= 0:
                unit = 1.0
            work = cov.scaled(1.0 / unit)
            unit_coefficients = work.characteristic_coefficients()

            zero_root = abs(unit_coefficients[0]) <= DETERMINANT_ZERO_ATOL
            if zero_root:
                smallest = 0.0
                quotient = unit_coefficients[1:]
            else:
                smallest = smallest_nonnegative_real_root(unit_coefficients)
                quotient = deflate(unit_coefficients, smallest)

            others = quadratic_roots(quotient)
            if not others:
                msg = (
                    f"covariance has complex eigenvalues (remaining quadratic "
                    f"{[c * unit for c in quotient]}); keeping only the real "
                    f"root {smallest * unit:.6g}"
                )
                warnings.warn(msg, RuntimeWarning, stacklevel=2)
                messages.append(msg)
            # + 0.0 turns -0.0 into 0.0
            unit_values = sorted(float(v) + 0.0 for v in (smallest, *others))
            eigenvalues = [v * unit + 0.0 for v in unit_values]

        with timer.section('eigenvectors'):
            vectors = []
            fallbacks = 0
            for i, value in enumerate(unit_values):
                shifted = work.added_scaled(identity(3, value), -1.0)
                inverse = pseudo_inverse(shifted)
                vec = _first_nonzero_column(
                    inverse.matrix, EIGENVECTOR_ZERO_RTOL * shifted.norm() ** 2
                )
                if vec is None:
                    basis = null_space(shifted.to_numpy(), rcond=EIGEN_PIPELINE.atol)
                    if basis.shape[1] == 0:
                        raise NumericalError(
                            f"no eigenvector found for eigenvalue {eigenvalues[i]:.6g}: "
                            f"adjugate and null space of C - lambda*I are both empty"
                        )
                    repeats = sum(
                        1 for prev in unit_values[:i]
                        if abs(prev - value) <= EIGEN_PIPELINE.atol
                    )
                    vec = from_numpy(basis[:, min(repeats, basis.shape[1] - 1)])
                    fallbacks += 1
                    messages.append(
                        f"repeated eigenvalue {eigenvalues[i]:.6g}: "
                        f"eigenvector taken from null space"
                    )
                vectors.append(vec.normalize_in_place().data.copy())

        timer.stop()

        params = PrincipalAxisParams(
            centroid=moments.centroid.data.copy(),
            scale=moments.scale,
            covariance=cov.to_numpy(),
            coefficients=tuple(coefficients),
            eigenvalues=np.array(eigenvalues),
            eigenvectors=np.vstack(vectors),
        )
        return Result(
            params=params,
            info={
                'method': 'characteristic_polynomial',
                'n_eigenvalues': len(eigenvalues),
                'zero_root': zero_root,
                'null_space_fallbacks': fallbacks,
                'rescaled': rescale,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(messages),
        )


class CPUEighBackend:
    """Same covariance, decomposed by LAPACK's symmetric eigensolver."""

    @property
    def name(self) -> str:
        return 'cpu_eigh'

    def solve(
        self,
        design: PointCloudDesign,
        *,
        rescale: bool = True,
    ) -> Result[PrincipalAxisParams]:
        with timed() as timer:
            moments = _moments(design, rescale, timer)
            cov = moments.covariance

            with timer.section('eigh'):
                eigenvalues, eigenvectors = np.linalg.eigh(cov.to_numpy())

        params = PrincipalAxisParams(
            centroid=moments.centroid.data.copy(),
            scale=moments.scale,
            covariance=cov.to_numpy(),
            coefficients=tuple(cov.characteristic_coefficients()),
            eigenvalues=eigenvalues,
            eigenvectors=eigenvectors.T.copy(),
        )
        return Result(
            params=params,
            info={
                'method': 'eigh',
                'n_eigenvalues': len(eigenvalues),
                'rescaled': rescale,
            },
            timing=timer.result(),
            backend_name=self.name,
        )
