# dls_lab/core/node.py
# A Node is one point in the search tree: a state, the parent it was reached from, the action taken and the cost so far.
from __future__ import annotations
from typing import Any, List, Optional


class Node:
    __slots__ = ("state", "parent", "action", "path_cost", "depth")

    def __init__(self, state, parent: Optional["Node"] = None, action=None,
                 path_cost: float = 0.0, depth: int = 0):
        object.__setattr__(self, "state", state)
        object.__setattr__(self, "parent", parent)
        object.__setattr__(self, "action", action)
        object.__setattr__(self, "path_cost", float(path_cost))
        object.__setattr__(self, "depth", depth)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Node is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Node is immutable; cannot delete {name!r}")

    def is_root(self) -> bool:
        return self.parent is None

    def path(self) -> List["Node"]:
        """Nodes from the root (or the first node without a parent link) down to self."""
        out = []
        cur = self
        while cur is not None:
            out.append(cur)
            cur = cur.parent
        out.reverse()
        return out

    def __repr__(self) -> str:
        if self is CUTOFF_NODE:
            return "Node(<cutoff>)"
        return f"Node(state={self.state!r}, action={self.action!r}, path_cost={self.path_cost}, depth={self.depth})"


# Distinguished value meaning "the depth limit was hit"; only ever compared by identity.
CUTOFF_NODE = Node(None)


def is_cutoff_node(node: Optional[Node]) -> bool:
    return node is CUTOFF_NODE
