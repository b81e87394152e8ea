"""
Generic result container for litemath pipelines.

The Result class is the envelope every multi-step computation returns
(currently the principal-axis analysis). Matrix methods return plain
values; only pipelines with timing and diagnostics use this.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, eigenvalue count, fallbacks)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (eigenvalues, vectors, etc.)
        info: Structured metadata
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PrincipalAxisParams(...),
        ...     info={'method': 'characteristic_polynomial', 'n_eigenvalues': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_cofactor'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
