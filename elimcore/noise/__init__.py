"""
Noise module: diagonal noise models and their shared handle.
"""

from elimcore.noise.models import Constrained, Diagonal, Isotropic, Unit
from elimcore.noise.shared import (
    SharedDiagonal,
    shared_precision,
    shared_precisions,
    shared_sigma,
    shared_sigmas,
)

__all__ = [
    "Diagonal",
    "Constrained",
    "Isotropic",
    "Unit",
    "SharedDiagonal",
    "shared_sigmas",
    "shared_sigma",
    "shared_precisions",
    "shared_precision",
]
