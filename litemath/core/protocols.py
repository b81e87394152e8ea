"""
Core protocols for litemath.

Structural interfaces that pipeline backends must satisfy. Protocol
(structural typing) rather than ABC, so a backend only has to look right.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from litemath.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope.
    Backends are stateless; all configuration is passed at construction
    time or through keyword arguments to solve().
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_cofactor', 'cpu_eigh'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
