"""
elimcore/core/permutation.py

Finite bijection over variable indices.

Permutations are produced by an ordering routine and consumed by
conditionals through index lookup only: perm[old] -> new.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

import numpy as np


class Permutation:
    """
    Bijection over range(n), stored as an integer array.

    Attributes:
        indices: Read-only array, indices[i] is the image of i
    """

    __slots__ = ("indices",)

    def __init__(self, indices: Iterable[int]):
        arr = np.array(list(indices), dtype=np.int64)
        if arr.ndim != 1:
            raise ValueError("Permutation indices must be one-dimensional")
        n = arr.shape[0]
        if n and (arr.min() < 0 or arr.max() >= n or np.unique(arr).shape[0] != n):
            raise ValueError(f"Permutation indices are not a bijection over range({n}): {arr.tolist()}")
        arr.setflags(write=False)
        self.indices = arr

    @classmethod
    def identity(cls, n: int) -> "Permutation":
        """Identity permutation over range(n)."""
        return cls(range(n))

    @classmethod
    def from_mapping(cls, mapping: Dict[int, int], size: Optional[int] = None) -> "Permutation":
        """
        Build from a partial mapping old -> new; unmapped indices stay fixed.

        Args:
            mapping: Map from index to its image
            size: Domain size (default: one past the largest index mentioned)
        """
        if size is None:
            size = max(list(mapping.keys()) + list(mapping.values()), default=-1) + 1
        indices = list(range(size))
        for old, new in mapping.items():
            indices[old] = new
        return cls(indices)

    @classmethod
    def from_ordering(cls, ordering: Iterable[int]) -> "Permutation":
        """
        Build from an elimination ordering.

        ordering[i] is the old index eliminated i-th, so perm[i] = ordering[i]
        and perm.inverse() relabels old indices to their elimination position.
        """
        return cls(ordering)

    def __getitem__(self, i: int) -> int:
        if i < 0:
            raise IndexError(f"Permutation index {i} is negative")
        return int(self.indices[i])

    def __len__(self) -> int:
        return int(self.indices.shape[0])

    def __iter__(self) -> Iterator[int]:
        return (int(i) for i in self.indices)

    def inverse(self) -> "Permutation":
        """Inverse permutation."""
        inv = np.empty_like(self.indices)
        inv[self.indices] = np.arange(len(self), dtype=np.int64)
        return Permutation(inv)

    def compose(self, other: "Permutation") -> "Permutation":
        """(self o other)[i] = self[other[i]]."""
        if len(self) != len(other):
            raise ValueError(f"compose: size mismatch {len(self)} vs {len(other)}")
        return Permutation(self.indices[other.indices])

    def is_identity(self) -> bool:
        return bool(np.array_equal(self.indices, np.arange(len(self))))

    def as_array(self) -> np.ndarray:
        return self.indices

    def equals(self, other: "Permutation", tol: float = 1e-9) -> bool:
        return np.array_equal(self.indices, other.indices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Permutation({self.indices.tolist()})"
