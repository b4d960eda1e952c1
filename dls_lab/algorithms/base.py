# dls_lab/algorithms/base.py
# What callers can rely on from a search: actions to a goal, or just the goal state, plus metrics and node listeners.
from __future__ import annotations
from typing import List, Optional, Protocol, runtime_checkable

from ..core.expander import NodeListener
from ..core.metrics import Metrics
from ..core.problem import Action, Problem, State


@runtime_checkable
class SearchForActions(Protocol):
    def find_actions(self, problem: Problem) -> List[Action]: ...
    def get_metrics(self) -> Metrics: ...
    def add_node_listener(self, listener: NodeListener) -> None: ...
    def remove_node_listener(self, listener: NodeListener) -> bool: ...


@runtime_checkable
class SearchForStates(Protocol):
    def find_state(self, problem: Problem) -> Optional[State]: ...
    def get_metrics(self) -> Metrics: ...
    def add_node_listener(self, listener: NodeListener) -> None: ...
    def remove_node_listener(self, listener: NodeListener) -> bool: ...
