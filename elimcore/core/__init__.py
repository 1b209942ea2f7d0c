"""
Core module: key storage, permutations, configuration and errors.
"""

from elimcore.core.config import (
    InvariantMode,
    checks_enabled,
    get_invariant_mode,
    invariant_mode,
    set_invariant_mode,
)
from elimcore.core.errors import ElimcoreError, OrderingInvariantError, PreconditionError
from elimcore.core.keys import Key, KeySequence
from elimcore.core.permutation import Permutation

__all__ = [
    "InvariantMode",
    "checks_enabled",
    "get_invariant_mode",
    "invariant_mode",
    "set_invariant_mode",
    "ElimcoreError",
    "OrderingInvariantError",
    "PreconditionError",
    "Key",
    "KeySequence",
    "Permutation",
]
