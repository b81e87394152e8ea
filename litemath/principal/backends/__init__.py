"""Principal-axis backends."""

from litemath.principal.backends.cpu import CPUCofactorBackend, CPUEighBackend

__all__ = [
    "CPUCofactorBackend",
    "CPUEighBackend",
]
