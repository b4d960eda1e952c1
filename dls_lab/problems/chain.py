# dls_lab/problems/chain.py
# A linear chain of states (A -> B -> C -> D by default); the last state is the goal.
from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple

from ..core.problem import Problem

Step = Tuple[str, str]


class ChainProblem(Problem):
    """
    - State: a label from `states`
    - ACTIONS(s): the single step (s, next) unless s is the last state
    - RESULT(s, (s, next)) = next
    - c(s,a,s'): `step` (default 1.0)
    """
    def __init__(self, states: Sequence[str] = ("A", "B", "C", "D"), goal: str | None = None, step: float = 1.0):
        if not states:
            raise ValueError("ChainProblem needs at least one state")
        self.states: List[str] = list(states)
        self.goal = self.states[-1] if goal is None else goal
        self.step = step
        self._next = dict(zip(self.states, self.states[1:]))

    def initial_state(self) -> str:
        return self.states[0]

    def is_goal(self, state: str) -> bool:
        return state == self.goal

    def actions(self, state: str) -> Iterable[Step]:
        if state in self._next:
            yield (state, self._next[state])

    def result(self, state: str, action: Step) -> str:
        return action[1]

    def step_cost(self, state: str, action: Step, next_state: str) -> float:
        return self.step
