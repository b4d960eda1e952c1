# dls_lab/algorithms/depth_limited.py
# This code implements Depth-Limited Search (DLS, AIMA Fig. 3.17) and reports solution, cutoff or failure.
from __future__ import annotations
from typing import List, Optional

from ..core.cancel import DEFAULT_TOKEN, CancellationToken
from ..core.expander import NodeExpander, NodeListener
from ..core.log import get_logger
from ..core.metrics import (
    METRIC_NODES_EXPANDED,
    METRIC_PATH_COST,
    MeasuredRun,
    Metrics,
    SearchResult,
)
from ..core.node import Node, is_cutoff_node
from ..core.outcome import CUTOFF, FAILURE, Outcome
from ..core.problem import Action, Problem, State
from ..core.utils import actions_of, failure

logger = get_logger(__name__)


class _Frame:
    """A node whose children are being tried, one at a time."""
    __slots__ = ("node", "remaining", "children", "index", "cutoff_occurred")

    def __init__(self, node: Node, remaining: int, children: List[Node]):
        self.node = node
        self.remaining = remaining
        self.children = children
        self.index = 0
        self.cutoff_occurred = False


class DepthLimitedSearch:
    """
    function DEPTH-LIMITED-SEARCH(problem, limit) returns a solution, or failure/cutoff
      return RECURSIVE-DLS(MAKE-NODE(problem.INITIAL-STATE), problem, limit)

    function RECURSIVE-DLS(node, problem, limit) returns a solution, or failure/cutoff
      if problem.GOAL-TEST(node.STATE) then return SOLUTION(node)
      else if limit = 0 then return cutoff
      else
        cutoff_occurred? <- false
        for each action in problem.ACTIONS(node.STATE) do
          child <- CHILD-NODE(problem, node, action)
          result <- RECURSIVE-DLS(child, problem, limit - 1)
          if result = cutoff then cutoff_occurred? <- true
          else if result != failure then return result
        if cutoff_occurred? then return cutoff else return failure

    The recursion runs on an explicit stack of frames so a large limit cannot
    hit Python's recursion limit. A limit <= 0 cuts off at the root unless the
    root is already a goal. Cancellation is polled at every node and ends the
    search as a cutoff.
    """

    def __init__(self, limit: int, expander: Optional[NodeExpander] = None,
                 cancel_token: Optional[CancellationToken] = None):
        self.limit = limit
        self.expander = expander if expander is not None else NodeExpander()
        self.cancel_token = cancel_token if cancel_token is not None else DEFAULT_TOKEN
        self.metrics = Metrics()
        self._clear_instrumentation()

    @property
    def name(self) -> str:
        return f"DLS(l={self.limit})"

    def find_actions(self, problem: Problem) -> List[Action]:
        """
        Actions from the initial state to a goal; [NO_OP] if the initial state
        is a goal; [] on failure *and* on cutoff.
        """
        outcome = self.search(problem, use_parent_links=True)
        if not outcome.is_solution:
            return failure()
        return actions_of(outcome.node)

    def find_state(self, problem: Problem) -> Optional[State]:
        """The goal state, or None on cutoff or failure. Parent links are not kept."""
        outcome = self.search(problem, use_parent_links=False)
        return outcome.node.state if outcome.is_solution else None

    def find_node(self, problem: Problem, use_parent_links: bool = True) -> Optional[Node]:
        """Returns a solution node, CUTOFF_NODE, or None (failure)."""
        return self.search(problem, use_parent_links=use_parent_links).as_node()

    def search(self, problem: Problem, use_parent_links: bool = True,
               cancel_token: Optional[CancellationToken] = None) -> Outcome:
        token = cancel_token if cancel_token is not None else self.cancel_token
        self._clear_instrumentation()
        logger.debug("%s: starting search", self.name)
        root = self.expander.create_root_node(problem.initial_state())
        outcome = self._recursive_dls(root, problem, self.limit, use_parent_links, token)
        logger.debug("%s: %s after %d expansions", self.name, outcome.kind.value,
                     self.metrics.get_int(METRIC_NODES_EXPANDED))
        return outcome

    def run(self, problem: Problem) -> SearchResult:
        """find_actions wrapped in a MeasuredRun, for benchmarks."""
        with MeasuredRun() as meter:
            outcome = self.search(problem, use_parent_links=True)
            actions = actions_of(outcome.node) if outcome.is_solution else failure()
        cost = outcome.node.path_cost if outcome.is_solution else float("inf")
        return SearchResult(
            self.name, outcome.is_solution, actions, cost,
            self.metrics.get_int(METRIC_NODES_EXPANDED),
            meter.elapsed, meter.peak_kb,
            outcome=outcome.kind.value, limit=self.limit,
        )

    def _recursive_dls(self, root: Node, problem: Problem, limit: int,
                       use_parent_links: bool, token: CancellationToken) -> Outcome:
        stack: List[_Frame] = []
        cancel_seen = False

        def visit(node: Node, remaining: int) -> Optional[Outcome]:
            nonlocal cancel_seen
            # None means the node was expanded and pushed; its outcome arrives later
            if problem.is_goal(node.state):
                self.metrics.set(METRIC_PATH_COST, node.path_cost)
                return Outcome.solution(node)
            if remaining <= 0:
                return CUTOFF
            if token.is_cancelled():
                if not cancel_seen:
                    cancel_seen = True
                    logger.info("%s: cancelled at depth %d", self.name, node.depth)
                return CUTOFF
            self.metrics.increment_int(METRIC_NODES_EXPANDED)
            children = self.expander.expand(node, problem, use_parent_links=use_parent_links)
            stack.append(_Frame(node, remaining, children))
            return None

        result = visit(root, limit)
        while stack:
            frame = stack[-1]
            if result is not None:
                if result.is_solution:
                    return result
                if result.is_cutoff:
                    frame.cutoff_occurred = True
                result = None
            if frame.index < len(frame.children):
                child = frame.children[frame.index]
                frame.index += 1
                result = visit(child, frame.remaining - 1)
            else:
                stack.pop()
                result = CUTOFF if frame.cutoff_occurred else FAILURE
        return result

    def is_cutoff_node(self, node: Optional[Node]) -> bool:
        return is_cutoff_node(node)

    def get_metrics(self) -> Metrics:
        return self.metrics

    def _clear_instrumentation(self) -> None:
        self.metrics.set(METRIC_NODES_EXPANDED, 0)
        self.metrics.set(METRIC_PATH_COST, 0)

    def add_node_listener(self, listener: NodeListener) -> None:
        self.expander.add_node_listener(listener)

    def remove_node_listener(self, listener: NodeListener) -> bool:
        return self.expander.remove_node_listener(listener)


def depth_limited_search(problem: Problem, limit: int) -> SearchResult:
    return DepthLimitedSearch(limit).run(problem)
