"""Frontier-driven tree search.

    initialize the frontier with the root node of the problem
    loop:
        if the frontier is empty, return failure
        remove a node from the frontier
        if its state is a goal, return the actions leading to it
        expand the node, pushing every child onto the frontier

This is tree search: revisited states are expanded again. On a state space
with cycles it only terminates if the goal is reached first, the caller sets
`depth_limit`, or `detect_repeated_states` is switched on.
"""

from __future__ import annotations

from typing import List, Optional, Set, Union

from .frontier import FifoFrontier, Frontier, FrontierFactory
from .node import Node, NodeFactory, solution_actions
from .problem import Action, Problem, State
from src.utils.failures import SearchExhausted
from src.utils.logging_utils import get_logger
from src.utils.trace import Tracer

logger = get_logger()


class TreeSearch:
    def __init__(
        self,
        frontier_factory: FrontierFactory = FifoFrontier,
        node_factory: Optional[NodeFactory] = None,
        depth_limit: Optional[int] = None,
        detect_repeated_states: bool = False,
        tracer: Optional[Tracer] = None,
    ) -> None:
        if depth_limit is not None and depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {depth_limit}")
        self.frontier_factory = frontier_factory
        self.node_factory = node_factory or NodeFactory()
        self.depth_limit = depth_limit
        self.detect_repeated_states = detect_repeated_states
        self.tracer = tracer

    def search_for_actions(self, problem: Problem) -> Union[List[Action], SearchExhausted]:
        outcome = self.search_for_node(problem)
        if isinstance(outcome, SearchExhausted):
            return outcome
        return solution_actions(outcome)

    def search_for_node(self, problem: Problem) -> Union[Node, SearchExhausted]:
        """Run the search and return the goal node itself, or SearchExhausted."""
        tracer = self.tracer if self.tracer is not None else Tracer(enabled=False)
        frontier = self.new_frontier(problem.initial_state)
        generated: Set[State] = {problem.initial_state}
        expanded = 0

        while True:
            if not frontier:
                failure = SearchExhausted(nodes_expanded=expanded)
                logger.debug("tree search on %r: %s", problem, failure.reason)
                tracer.log_failure(failure.reason)
                return failure

            node = frontier.pop()
            if problem.is_goal(node.state):
                tracer.log_goal_test(depth=node.depth, is_goal=True)
                tracer.log_solution_found(depth=node.depth)
                logger.debug(
                    "tree search on %r reached a goal at depth %d after %d expansions",
                    problem, node.depth, expanded,
                )
                return node

            if self.depth_limit is not None and node.depth >= self.depth_limit:
                continue

            children = self.expand(node, problem)
            expanded += 1
            for child in children:
                if self.detect_repeated_states:
                    if child.state in generated:
                        continue
                    generated.add(child.state)
                frontier.push(child)
            tracer.log_expand(depth=node.depth, children=len(children), frontier_size=len(frontier))

    def new_frontier(self, initial_state: State) -> Frontier:
        frontier = self.frontier_factory()
        frontier.push(self.node_factory.new_root_node(initial_state))
        return frontier

    def expand(self, node: Node, problem: Problem) -> List[Node]:
        return [
            self.node_factory.new_child_node(problem, node, action)
            for action in problem.actions(node.state)
        ]

