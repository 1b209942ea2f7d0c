"""
elimcore/inference/views.py

Windows over one partition of a conditional's key sequence.

A view is bounded by [begin, end) positions into the owning KeySequence.
It is restartable, and it reflects later in-place edits of the keys.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from elimcore.core.keys import Key, KeySequence


class KeyView:
    """Read-only ordered view over keys[begin:end]."""

    __slots__ = ("_keys", "_begin", "_end")

    def __init__(self, keys: KeySequence, begin: int, end: int):
        self._keys = keys
        self._begin = begin
        self._end = end

    def __len__(self) -> int:
        return self._end - self._begin

    def __iter__(self) -> Iterator[Key]:
        for i in range(self._begin, self._end):
            yield self._keys[i]

    def _index(self, i: int) -> int:
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"key view index {i} out of range for {n} keys")
        return self._begin + i

    def __getitem__(self, i):
        if isinstance(i, slice):
            return tuple(self)[i]
        return self._keys[self._index(i)]

    def __contains__(self, key) -> bool:
        return any(k == key for k in self)

    def __eq__(self, other) -> bool:
        if isinstance(other, KeyView):
            return tuple(self) == tuple(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def to_tuple(self) -> Tuple[Key, ...]:
        return tuple(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class MutableKeyView(KeyView):
    """View that allows replacing key values in place, never resizing."""

    __slots__ = ()

    def __setitem__(self, i: int, key: Key) -> None:
        if isinstance(i, slice):
            raise TypeError("MutableKeyView does not support slice assignment")
        self._keys[self._index(i)] = key
