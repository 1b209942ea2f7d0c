"""
elimcore/core/config.py

Invariant-checking configuration.

Two modes:
- VALIDATED: preconditions and the elimination-ordering invariant are checked
- TRUSTED: checks are skipped, the caller guarantees valid input

The default follows the interpreter: VALIDATED with assertions enabled,
TRUSTED under ``python -O``. The ELIMCORE_INVARIANTS environment variable
overrides it.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Union

logger = logging.getLogger(__name__)

ENV_VAR = "ELIMCORE_INVARIANTS"


class InvariantMode(Enum):
    """How preconditions are treated."""
    VALIDATED = "validated"
    TRUSTED = "trusted"


ModeLike = Union[InvariantMode, str]


def _coerce(mode: ModeLike) -> InvariantMode:
    if isinstance(mode, InvariantMode):
        return mode
    try:
        return InvariantMode(str(mode).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown invariant mode {mode!r}; expected one of "
            f"{[m.value for m in InvariantMode]}"
        ) from None


def default_mode() -> InvariantMode:
    """Mode from the environment, falling back to the interpreter's debug flag."""
    env = os.environ.get(ENV_VAR)
    if env:
        return _coerce(env)
    return InvariantMode.VALIDATED if __debug__ else InvariantMode.TRUSTED


_mode: InvariantMode = default_mode()


def get_invariant_mode() -> InvariantMode:
    """Get the current invariant mode."""
    return _mode


def set_invariant_mode(mode: ModeLike) -> InvariantMode:
    """
    Set the invariant mode.

    Args:
        mode: InvariantMode or its string value

    Returns:
        The previous mode
    """
    global _mode
    previous = _mode
    _mode = _coerce(mode)
    if _mode is not previous:
        logger.debug("invariant mode changed: %s -> %s", previous.value, _mode.value)
    return previous


def checks_enabled() -> bool:
    """True when preconditions should be validated."""
    return _mode is InvariantMode.VALIDATED


@contextmanager
def invariant_mode(mode: ModeLike) -> Iterator[InvariantMode]:
    """Temporarily switch the invariant mode."""
    previous = set_invariant_mode(mode)
    try:
        yield _mode
    finally:
        set_invariant_mode(previous)
