# dls_lab/problems/romania.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping

from ..core.problem import Problem


# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}


@dataclass(frozen=True)
class RomaniaMap:
    graph: Mapping[str, Mapping[str, int]]

    def cities(self) -> List[str]:
        return list(self.graph)


ROMANIA = RomaniaMap(graph=_GRAPH)


class RomaniaProblem(Problem):
    """
    AIMA Romania route finding. States are city names, ACTIONS(s) are the
    neighbouring cities in map order, RESULT(s,a) = a, step_cost is road distance.

    The map has cycles (every road goes both ways). Depth-limited search does
    no cycle checking, so a city can reappear on a path; the limit is what
    keeps the search finite.
    """

    def __init__(self, start: str = "Arad", goal: str = "Bucharest", data: RomaniaMap = ROMANIA):
        for city in (start, goal):
            if city not in data.graph:
                raise KeyError(f"Unknown city {city!r}")
        self.start = start
        self.goal = goal
        self.data = data

    def initial_state(self):
        return self.start

    def is_goal(self, state) -> bool:
        return state == self.goal

    def actions(self, state) -> Iterable[str]:
        return self.data.graph[state].keys()

    def result(self, state, action) -> str:
        # Action is the next city name
        return action

    def step_cost(self, state, action, next_state) -> float:
        return float(self.data.graph[state][next_state])


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RomaniaProblem:
    return RomaniaProblem(start=start, goal=goal, data=ROMANIA)
