# dls_lab/problems/tree.py
# Explicit state spaces given as an adjacency mapping; handy for small acyclic trees.
from __future__ import annotations
from typing import Hashable, Iterable, Mapping, Sequence, Set

from ..core.problem import Problem


class TreeProblem(Problem):
    """
    Actions are the successor states themselves, in the order listed in `edges`.
    States missing from `edges` are leaves. `goals` may be empty (goal-free space).
    """
    def __init__(self, root: Hashable, edges: Mapping[Hashable, Sequence[Hashable]],
                 goals: Iterable[Hashable] = (), costs: Mapping[tuple, float] | None = None):
        self.root = root
        self.edges = edges
        self.goals: Set[Hashable] = set(goals)
        self.costs = costs or {}

    def initial_state(self):
        return self.root

    def is_goal(self, state) -> bool:
        return state in self.goals

    def actions(self, state) -> Iterable[Hashable]:
        return list(self.edges.get(state, ()))

    def result(self, state, action):
        return action

    def step_cost(self, state, action, next_state) -> float:
        return float(self.costs.get((state, next_state), 1.0))


def complete_tree(branching: int, depth: int, goals: Iterable[Hashable] = ()) -> TreeProblem:
    """Complete tree whose states are tuples of child indices; () is the root."""
    edges = {}
    frontier = [()]
    for _ in range(depth):
        nxt = []
        for s in frontier:
            edges[s] = [s + (i,) for i in range(branching)]
            nxt.extend(edges[s])
        frontier = nxt
    return TreeProblem((), edges, goals)
