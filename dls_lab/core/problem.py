# Defines the interface every search problem exposes to the depth-limited core (states, actions, goal, costs).
# dls_lab/core/problem.py
from __future__ import annotations
from typing import Hashable, Iterable, Protocol

Action = Hashable
State = Hashable


class NoOpAction:
    """Placeholder action returned when the initial state already satisfies the goal test.

    A single instance, compared by identity, so it never collides with a
    problem's own "NoOp" action.
    """
    __slots__ = ()

    def __repr__(self) -> str:
        return "NoOp"

    __str__ = __repr__


NO_OP: Action = NoOpAction()


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view).

    result(s, a) is the transition function; step_cost must be non-negative
    so path costs never decrease along a branch.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
