"""
elimcore/core/keys.py

Ordered, growable key storage.

A KeySequence is owned by exactly one conditional. Keys are opaque: only
equality, ordering and use as a permutation index are assumed.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, List, Tuple

Key = Hashable


class KeySequence:
    """
    Mutable sequence of variable keys.

    Supports append/resize/iterate plus the base permutation primitive.
    Slice assignment may edit values but never change the length.
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[Key] = ()):
        self._keys: List[Key] = list(keys)

    def append(self, key: Key) -> None:
        """Append one key."""
        self._keys.append(key)

    def extend(self, keys: Iterable[Key]) -> None:
        """Append keys in order."""
        self._keys.extend(keys)

    def resize(self, n: int, fill: Any = None) -> None:
        """Truncate or pad with `fill` to length n."""
        if n < 0:
            raise ValueError(f"resize: negative length {n}")
        if n <= len(self._keys):
            del self._keys[n:]
        else:
            self._keys.extend([fill] * (n - len(self._keys)))

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return tuple(self._keys[i])
        return self._keys[i]

    def __setitem__(self, i, value) -> None:
        if isinstance(i, slice):
            values = list(value)
            if len(values) != len(range(*i.indices(len(self._keys)))):
                raise ValueError("KeySequence slice assignment cannot resize")
            self._keys[i] = values
        else:
            self._keys[i] = value

    def as_tuple(self) -> Tuple[Key, ...]:
        """Snapshot of the keys."""
        return tuple(self._keys)

    def equals(self, other: "KeySequence", tol: float = 1e-9) -> bool:
        """Elementwise key equality. `tol` is accepted for interface parity and ignored."""
        return self._keys == list(other)

    def permute_with_inverse(self, inverse_permutation) -> None:
        """Replace every key k with inverse_permutation[k]."""
        self._keys = [inverse_permutation[k] for k in self._keys]

    def __repr__(self) -> str:
        return f"KeySequence({self._keys!r})"
