"""
elimcore/noise/models.py

Diagonal-covariance noise models.

Only construction and comparison live here; whitening and likelihoods
belong to the density code that consumes these models.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _as_vector(values) -> np.ndarray:
    v = np.asarray(values, dtype=np.float64).reshape(-1)
    if np.any(v < 0):
        raise ValueError(f"noise model entries must be non-negative: {v.tolist()}")
    return v


@dataclass(frozen=True, eq=False)
class Diagonal:
    """
    Noise model with a diagonal covariance.

    Attributes:
        sigmas_: Standard deviation per dimension
    """
    sigmas_: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "sigmas_", _as_vector(self.sigmas_))

    @classmethod
    def sigmas(cls, sigmas) -> "Diagonal":
        """From standard deviations."""
        return cls(sigmas)

    @classmethod
    def precisions(cls, precisions) -> "Diagonal":
        """From precisions (inverse variances)."""
        p = _as_vector(precisions)
        if np.any(p == 0):
            raise ValueError("Diagonal.precisions: zero precision has no finite sigma")
        return cls(1.0 / np.sqrt(p))

    @property
    def dim(self) -> int:
        return int(self.sigmas_.shape[0])

    @property
    def sigma_vector(self) -> np.ndarray:
        return self.sigmas_

    @property
    def precision_vector(self) -> np.ndarray:
        with np.errstate(divide="ignore"):
            return 1.0 / np.square(self.sigmas_)

    def equals(self, other, tol: float = 1e-9) -> bool:
        if not isinstance(other, Diagonal) or self.dim != other.dim:
            return False
        return bool(np.allclose(self.precision_vector, other.precision_vector, atol=tol, rtol=0.0))


@dataclass(frozen=True, eq=False)
class Constrained(Diagonal):
    """Diagonal model where zero sigmas mark hard constraints."""

    @classmethod
    def mixed_sigmas(cls, sigmas) -> "Constrained":
        return cls(sigmas)

    def constrained_mask(self) -> np.ndarray:
        return self.sigmas_ == 0


@dataclass(frozen=True, eq=False)
class Isotropic(Diagonal):
    """Diagonal model with the same sigma in every dimension."""

    @classmethod
    def sigma(cls, dim: int, sigma: float) -> "Isotropic":
        return cls(np.full((dim,), sigma, dtype=np.float64))

    @classmethod
    def precision(cls, dim: int, precision: float) -> "Isotropic":
        if precision <= 0:
            raise ValueError(f"Isotropic.precision: precision must be positive, got {precision}")
        return cls.sigma(dim, 1.0 / np.sqrt(precision))


@dataclass(frozen=True, eq=False)
class Unit(Isotropic):
    """Isotropic model with unit sigma."""

    @classmethod
    def create(cls, dim: int) -> "Unit":
        return cls(np.ones((dim,), dtype=np.float64))
