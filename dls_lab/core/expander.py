# dls_lab/core/expander.py
# Builds root and child Nodes for a Problem and notifies listeners about every node it produces.
from __future__ import annotations
from typing import Callable, List

from .log import get_logger
from .node import Node
from .problem import Problem, State

logger = get_logger(__name__)

NodeListener = Callable[[Node], None]


class NodeExpander:
    """
    CHILD-NODE for every action of a node, in the order the problem lists them.

    Parent links are only kept when asked for at call time: a search that
    needs just the goal state can drop them and let finished branches be
    garbage-collected.
    """

    def __init__(self) -> None:
        self._listeners: List[NodeListener] = []
        self.nodes_created = 0

    def create_root_node(self, state: State) -> Node:
        return Node(state)

    def expand(self, node: Node, problem: Problem, use_parent_links: bool = True) -> List[Node]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        s = node.state
        parent = node if use_parent_links else None
        children = []
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(
                    f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Check your problem's ACTIONS/RESULT/cost mapping."
                )
            child = Node(
                state=s2,
                parent=parent,
                action=a,
                path_cost=node.path_cost + float(cost),
                depth=node.depth + 1,
            )
            self.nodes_created += 1
            for listener in list(self._listeners):
                listener(child)
            children.append(child)
        logger.debug("expanded %r into %d children (%d nodes created so far)",
                     s, len(children), self.nodes_created)
        return children

    def add_node_listener(self, listener: NodeListener) -> None:
        self._listeners.append(listener)

    def remove_node_listener(self, listener: NodeListener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True
