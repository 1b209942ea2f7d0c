"""
elimcore/core/errors.py

Exceptions for misuse of conditionals and permutations.

Misuse is a programming error, so every exception here is an AssertionError.
They are only raised while invariant checking is enabled.
"""

from __future__ import annotations


class ElimcoreError(AssertionError):
    """Base class for elimcore programming errors."""


class PreconditionError(ElimcoreError):
    """An operation was called outside its precondition."""


class OrderingInvariantError(ElimcoreError):
    """
    A permutation would place a parent key at or before a frontal key.

    Attributes:
        frontal: Relabeled frontal key
        parent: Relabeled parent key that does not come after it
    """

    def __init__(self, frontal, parent):
        super().__init__(
            f"elimination ordering violated: frontal {frontal} must precede parent {parent}"
        )
        self.frontal = frontal
        self.parent = parent
