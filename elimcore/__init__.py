"""
elimcore: key and ordering bookkeeping for variable elimination

Conditionals produced by eliminating variables from a graphical model
record which keys are frontal and which are parents, and are relabeled
in place when a new variable ordering is chosen.

Key components:
- core: Key storage, permutations, invariant-checking mode, errors
- inference: Conditional, frontal/parent views, Bayes net container
- noise: Diagonal noise models and the SharedDiagonal handle
"""

__version__ = "1.0.0"
__author__ = "elimcore Team"

from elimcore.core.config import (
    InvariantMode,
    checks_enabled,
    get_invariant_mode,
    invariant_mode,
    set_invariant_mode,
)
from elimcore.core.errors import ElimcoreError, OrderingInvariantError, PreconditionError
from elimcore.core.keys import KeySequence
from elimcore.core.permutation import Permutation
from elimcore.inference.conditional import Conditional
from elimcore.inference.views import KeyView, MutableKeyView
from elimcore.inference.bayes_net import BayesNet
from elimcore.noise.shared import (
    SharedDiagonal,
    shared_sigmas,
    shared_sigma,
    shared_precisions,
    shared_precision,
)

__all__ = [
    # Configuration
    "InvariantMode",
    "checks_enabled",
    "get_invariant_mode",
    "invariant_mode",
    "set_invariant_mode",
    # Errors
    "ElimcoreError",
    "OrderingInvariantError",
    "PreconditionError",
    # Keys and permutations
    "KeySequence",
    "Permutation",
    # Conditionals
    "Conditional",
    "KeyView",
    "MutableKeyView",
    "BayesNet",
    # Noise
    "SharedDiagonal",
    "shared_sigmas",
    "shared_sigma",
    "shared_precisions",
    "shared_precision",
]
