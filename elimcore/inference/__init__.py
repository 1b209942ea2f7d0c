"""
Inference module: conditionals, partition views and Bayes nets.
"""

from elimcore.inference.views import KeyView, MutableKeyView
from elimcore.inference.conditional import Conditional
from elimcore.inference.bayes_net import BayesNet

__all__ = [
    "KeyView",
    "MutableKeyView",
    "Conditional",
    "BayesNet",
]
