# dls_lab/core/outcome.py
# The three ways a bounded search can end: a goal node, a cutoff at the depth limit, or certain failure.
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .node import CUTOFF_NODE, Node


class OutcomeKind(Enum):
    SOLUTION = "solution"
    CUTOFF = "cutoff"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    node: Optional[Node] = None

    @classmethod
    def solution(cls, node: Node) -> "Outcome":
        return cls(OutcomeKind.SOLUTION, node)

    @property
    def is_solution(self) -> bool:
        return self.kind is OutcomeKind.SOLUTION

    @property
    def is_cutoff(self) -> bool:
        return self.kind is OutcomeKind.CUTOFF

    @property
    def is_failure(self) -> bool:
        return self.kind is OutcomeKind.FAILURE

    def as_node(self) -> Optional[Node]:
        """Legacy view: the goal node, CUTOFF_NODE, or None for failure."""
        if self.is_solution:
            return self.node
        if self.is_cutoff:
            return CUTOFF_NODE
        return None


CUTOFF = Outcome(OutcomeKind.CUTOFF)
FAILURE = Outcome(OutcomeKind.FAILURE)
