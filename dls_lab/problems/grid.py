# dls_lab/problems/grid.py
from __future__ import annotations
from typing import Hashable, Iterable, Set, Tuple

from ..core.problem import Problem

Coord = Tuple[int, int]

# Order matters: depth-limited search tries actions in this order.
_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


class GridProblem(Problem):
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - ACTIONS(s): subset of {'Up','Down','Left','Right'} that keep you in-bounds and off walls
    - RESULT(s,a): next (row, col)
    - IS-GOAL(s): s == goal
    - c(s,a,s'): 1.0
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self._start = start
        self._goal = goal
        self.walls = walls or set()
        for name, cell in (("start", start), ("goal", goal)):
            if not self.passable(cell):
                raise ValueError(f"{name} {cell} is off the grid or inside a wall")

    def passable(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def initial_state(self) -> Hashable:
        return self._start

    def is_goal(self, state: Hashable) -> bool:
        return state == self._goal

    def actions(self, state: Hashable) -> Iterable[str]:
        r, c = state
        for name, (dr, dc) in _MOVES.items():
            if self.passable((r + dr, c + dc)):
                yield name

    def result(self, state: Hashable, action: Hashable) -> Hashable:
        r, c = state
        dr, dc = _MOVES[action]
        return (r + dr, c + dc)

    def step_cost(self, state: Hashable, action: Hashable, next_state: Hashable) -> float:
        return 1.0


def make_grid_problem() -> GridProblem:
    # 3x4 grid, one wall; the goal is 5 moves from the start
    walls = {(1, 1)}
    return GridProblem(rows=3, cols=4, start=(0, 0), goal=(2, 3), walls=walls)
