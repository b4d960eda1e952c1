# dls_lab/core/utils.py
# Helpers for turning a goal node back into the actions that reached it, and for checking them.
from __future__ import annotations
from typing import Iterable, List, Tuple

from .node import Node
from .problem import NO_OP, Action, Problem, State


def failure() -> List[Action]:
    return []


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def actions_of(node: Node) -> List[Action]:
    """Actions from the root to `node`; a root node (already at the goal) gives [NO_OP]."""
    if node.depth == 0:
        return [NO_OP]
    if node.parent is None:
        raise ValueError(f"{node!r} was built without parent links; its actions cannot be recovered")
    actions, _ = reconstruct_path(node)
    return actions


def replay(problem: Problem, actions: Iterable[Action]) -> State:
    """Apply `actions` from the initial state and return where they lead. NO_OP stays put."""
    s = problem.initial_state()
    for a in actions:
        if a is NO_OP:
            continue
        s = problem.result(s, a)
    return s
