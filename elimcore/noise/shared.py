"""
elimcore/noise/shared.py

Shared handle for diagonal noise models.

Constructible from any diagonal model, or from a vector of sigmas.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from elimcore.noise.models import Diagonal, Isotropic


class SharedDiagonal:
    """
    Handle to a shared Diagonal (or Constrained/Isotropic/Unit) model.

    Copies of the handle refer to the same model.
    """

    __slots__ = ("model",)

    def __init__(self, model=None):
        if model is None or isinstance(model, Diagonal):
            self.model: Optional[Diagonal] = model
        elif isinstance(model, SharedDiagonal):
            self.model = model.model
        else:
            self.model = Diagonal.sigmas(np.asarray(model, dtype=np.float64))

    def __bool__(self) -> bool:
        return self.model is not None

    def get(self) -> Diagonal:
        if self.model is None:
            raise ValueError("SharedDiagonal is empty")
        return self.model

    @property
    def dim(self) -> int:
        return self.get().dim

    def __getattr__(self, name):
        # Only reached for attributes not on the handle itself.
        model = object.__getattribute__(self, "model")
        if model is None:
            raise AttributeError(name)
        return getattr(model, name)

    def __repr__(self) -> str:
        return f"SharedDiagonal({self.model!r})"


def shared_sigmas(sigmas) -> SharedDiagonal:
    return SharedDiagonal(Diagonal.sigmas(sigmas))


def shared_sigma(dim: int, sigma: float) -> SharedDiagonal:
    return SharedDiagonal(Isotropic.sigma(dim, sigma))


def shared_precisions(precisions) -> SharedDiagonal:
    return SharedDiagonal(Diagonal.precisions(precisions))


def shared_precision(dim: int, precision: float) -> SharedDiagonal:
    return SharedDiagonal(Isotropic.precision(dim, precision))
