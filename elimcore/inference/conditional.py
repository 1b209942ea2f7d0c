"""
elimcore/inference/conditional.py

Frontal/parent key bookkeeping for conditionals produced by elimination.

A Conditional stores an ordered key sequence and a partition point:
the first nr_frontals keys are frontal (solved for at this elimination
step), the rest are parents (the separator). Permutation is the only
mutator. Conditionals cannot be copied; structures share one instance.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Tuple

from elimcore.core.config import checks_enabled
from elimcore.core.errors import OrderingInvariantError, PreconditionError
from elimcore.core.keys import Key, KeySequence
from elimcore.inference.views import KeyView, MutableKeyView


class Conditional:
    """
    Keys of a conditional density P(frontals | parents).

    Construction:
        Conditional(key, *parents)           one frontal, explicit parents
        Conditional.with_parents(key, ps)    one frontal, parent collection
        Conditional.from_range(keys, n)      first n keys frontal
    """

    __slots__ = ("_keys", "_nr_frontals")

    def __init__(self, key: Key, *parents: Key):
        self._keys = KeySequence((key,) + parents)
        self._nr_frontals = 1

    @classmethod
    def _create(cls, keys: Iterable[Key], nr_frontals: int) -> "Conditional":
        obj = cls.__new__(cls)
        obj._keys = KeySequence(keys)
        if not 0 <= nr_frontals <= len(obj._keys):
            raise ValueError(
                f"nr_frontals={nr_frontals} out of range for {len(obj._keys)} keys"
            )
        obj._nr_frontals = nr_frontals
        return obj

    @classmethod
    def empty(cls) -> "Conditional":
        """Conditional with no keys."""
        return cls._create((), 0)

    @classmethod
    def with_parents(cls, key: Key, parents: Iterable[Key]) -> "Conditional":
        """One frontal key and an ordered collection (or iterator) of parents."""
        keys = KeySequence((key,))
        keys.extend(parents)
        return cls._create(keys, 1)

    # Range form with a single frontal; same keys as with_parents.
    from_parent_range = with_parents

    @classmethod
    def from_range(cls, keys: Iterable[Key], nr_frontals: int) -> "Conditional":
        """
        Multi-frontal conditional, e.g. a clique's joint conditional.

        Args:
            keys: Ordered keys, frontals first
            nr_frontals: How many leading keys are frontal

        Raises:
            ValueError: If nr_frontals exceeds the number of keys
        """
        return cls._create(keys, nr_frontals)

    # Sizes

    def nr_frontals(self) -> int:
        return self._nr_frontals

    def nr_parents(self) -> int:
        return len(self._keys) - self._nr_frontals

    def __len__(self) -> int:
        return len(self._keys)

    def key(self) -> Key:
        """The sole frontal key. Requires nr_frontals() == 1."""
        if checks_enabled() and self._nr_frontals != 1:
            raise PreconditionError(
                f"key() requires exactly one frontal, conditional has {self._nr_frontals}"
            )
        return self._keys[0]

    # Partition boundaries

    def begin_frontals(self) -> int:
        return 0

    def end_frontals(self) -> int:
        return self._nr_frontals

    def begin_parents(self) -> int:
        return self._nr_frontals

    def end_parents(self) -> int:
        return len(self._keys)

    # Views

    def frontals(self) -> KeyView:
        return KeyView(self._keys, self.begin_frontals(), self.end_frontals())

    def parents(self) -> KeyView:
        return KeyView(self._keys, self.begin_parents(), self.end_parents())

    def mutable_frontals(self) -> MutableKeyView:
        """Writable frontal window, for relabeling routines."""
        return MutableKeyView(self._keys, self.begin_frontals(), self.end_frontals())

    def mutable_parents(self) -> MutableKeyView:
        """Writable parent window, for relabeling routines."""
        return MutableKeyView(self._keys, self.begin_parents(), self.end_parents())

    def keys(self) -> Tuple[Key, ...]:
        return self._keys.as_tuple()

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys)

    # Testable

    def equals(self, other: "Conditional", tol: float = 1e-9) -> bool:
        """Same partition point and the same keys in the same positions."""
        if not isinstance(other, Conditional):
            return False
        return (
            self._nr_frontals == other._nr_frontals
            and self._keys.equals(other._keys, tol)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Conditional):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def format(self, s: str = "Conditional") -> str:
        parts = [f"{s} P("]
        parts.extend(f" {k}" for k in self.frontals())
        if self.nr_parents() > 0:
            parts.append(" |")
        parts.extend(f" {p}" for p in self.parents())
        parts.append(")")
        return "".join(parts)

    def print(self, s: str = "Conditional", file=None) -> None:
        print(self.format(s), file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(frontals={list(self.frontals())!r}, "
            f"parents={list(self.parents())!r})"
        )

    # No copies: structures share a single instance

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied; share the instance instead")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied; share the instance instead")

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    # Invariants

    def check_invariants(self, inverse_permutation=None) -> None:
        """
        Check that every frontal key is strictly less than every parent key.

        Runs regardless of the invariant mode.

        Args:
            inverse_permutation: If given, check the keys as relabeled by it

        Raises:
            OrderingInvariantError: On the first offending frontal/parent pair
        """
        if inverse_permutation is None:
            frontals = list(self.frontals())
            parents = list(self.parents())
        else:
            frontals = [inverse_permutation[k] for k in self.frontals()]
            parents = [inverse_permutation[k] for k in self.parents()]
        if not frontals or not parents:
            return
        # Comparing extremes covers every frontal/parent pair.
        largest_frontal = max(frontals)
        smallest_parent = min(parents)
        if not largest_frontal < smallest_parent:
            raise OrderingInvariantError(largest_frontal, smallest_parent)

    def check_separator_permutation(self, inverse_permutation) -> None:
        """
        Check that every frontal key is a fixed point of inverse_permutation.

        Runs regardless of the invariant mode.

        Raises:
            PreconditionError: On the first frontal key the permutation moves
        """
        for k in self.frontals():
            new_key = inverse_permutation[k]
            if new_key != k:
                raise PreconditionError(
                    f"separator permutation moves frontal key {k} to {new_key}"
                )

    # Permutation

    def permute_separator_with_inverse(self, inverse_permutation) -> bool:
        """
        Relabel parent keys only: p -> inverse_permutation[p].

        Frontal keys must be fixed points of the permutation.

        Returns:
            True if any parent key changed value
        """
        if checks_enabled():
            self.check_separator_permutation(inverse_permutation)
        parents = self.mutable_parents()
        new_parents = [inverse_permutation[p] for p in parents]
        parent_changed = False
        for i, (parent, new_parent) in enumerate(zip(list(parents), new_parents)):
            if new_parent != parent:
                parent_changed = True
                parents[i] = new_parent
        return parent_changed

    def permute_with_inverse(self, inverse_permutation) -> None:
        """
        Relabel every key: k -> inverse_permutation[k].

        Relabeled frontals must still precede relabeled parents. When checks
        are enabled a violating permutation is rejected before any key changes.
        """
        if checks_enabled():
            self.check_invariants(inverse_permutation)
        self._keys.permute_with_inverse(inverse_permutation)
