"""
elimcore/inference/bayes_net.py

Ordered collection of shared conditionals.

The net holds references, never copies: a conditional appended here may
also be held by other structures. Reindexing is a single-threaded pass over
every conditional and must not interleave with readers.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from typing import Deque, Iterable, Iterator, List

import networkx as nx

from elimcore.core.config import checks_enabled
from elimcore.inference.conditional import Conditional

logger = logging.getLogger(__name__)


class BayesNet:
    """
    Sequence of conditionals in elimination order.

    Attributes:
        conditionals: Deque of shared Conditional instances
    """

    def __init__(self, conditionals: Iterable[Conditional] = ()):
        self.conditionals: Deque[Conditional] = deque(conditionals)

    def push_back(self, conditional: Conditional) -> None:
        self.conditionals.append(conditional)

    def push_front(self, conditional: Conditional) -> None:
        self.conditionals.appendleft(conditional)

    def __len__(self) -> int:
        return len(self.conditionals)

    def __iter__(self) -> Iterator[Conditional]:
        return iter(self.conditionals)

    def __getitem__(self, i: int) -> Conditional:
        return self.conditionals[i]

    def frontal_keys(self) -> List:
        """All frontal keys, in net order."""
        return [k for c in self.conditionals for k in c.frontals()]

    def permute_with_inverse(self, inverse_permutation) -> None:
        """
        Relabel every key of every conditional in place.

        When checks are enabled every conditional is validated first, so a
        rejected permutation leaves the whole net untouched.
        """
        logger.debug("reindexing %d conditionals", len(self.conditionals))
        if checks_enabled():
            for conditional in self.conditionals:
                conditional.check_invariants(inverse_permutation)
        for conditional in self.conditionals:
            conditional.permute_with_inverse(inverse_permutation)

    def permute_separators_with_inverse(self, inverse_permutation) -> List[Conditional]:
        """
        Relabel parent keys only.

        Returns:
            Conditionals whose separator changed
        """
        if checks_enabled():
            for conditional in self.conditionals:
                conditional.check_separator_permutation(inverse_permutation)
        touched = [
            c for c in self.conditionals
            if c.permute_separator_with_inverse(inverse_permutation)
        ]
        logger.debug(
            "separator reindexing touched %d of %d conditionals",
            len(touched), len(self.conditionals),
        )
        return touched

    def to_graph(self) -> nx.DiGraph:
        """
        Directed graph with an edge parent -> frontal for every conditional.

        Node attribute "conditional" points at the conditional that
        determines the node, when there is one.
        """
        g = nx.DiGraph()
        for conditional in self.conditionals:
            for f in conditional.frontals():
                g.add_node(f, conditional=conditional)
            for p in conditional.parents():
                if p not in g:
                    g.add_node(p)
                for f in conditional.frontals():
                    g.add_edge(p, f)
        return g

    def equals(self, other: "BayesNet", tol: float = 1e-9) -> bool:
        if len(self) != len(other):
            return False
        return all(a.equals(b, tol) for a, b in zip(self, other))

    def format(self, s: str = "BayesNet") -> str:
        lines = [f"{s}: {len(self)} conditionals"]
        lines.extend(c.format("") for c in self.conditionals)
        return "\n".join(lines)

    def print(self, s: str = "BayesNet", file=None) -> None:
        print(self.format(s), file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        return f"BayesNet(conditionals={len(self)})"
