"""Tests for the frontier-driven tree search."""

import pytest

from src.search.frontier import FifoFrontier, LifoFrontier, PriorityFrontier, make_frontier
from src.search.node import Node, NodeFactory, path_states, solution_actions
from src.search.problem import GraphProblem
from src.search.tree_search import TreeSearch
from src.utils.failures import SearchExhausted
from src.utils.trace import Tracer


def _make_dag() -> GraphProblem:
    # A -> C -> G is the only two-step route; A -> B -> D -> G is longer.
    return GraphProblem(
        edges={"A": ["C", "B"], "B": ["D"], "C": ["D", "G"], "D": ["G"], "G": []},
        initial_state="A",
        goals=["G"],
    )


def _make_weighted_dag() -> GraphProblem:
    return GraphProblem(
        edges={"A": {"B": 1, "C": 5}, "B": {"D": 1}, "C": {"G": 1}, "D": {"G": 1}},
        initial_state="A",
        goals=["G"],
    )


class _DoublingProblem:
    """Reach `target` from 1 with "+1" and "*2"; infinite, declares no step cost."""

    def __init__(self, target: int):
        self.initial_state = 1
        self.target = target

    def actions(self, state):
        return ["+1", "*2"]

    def result(self, state, action):
        return state + 1 if action == "+1" else state * 2

    def is_goal(self, state):
        return state == self.target


def test_fifo_returns_shortest_action_sequence():
    assert TreeSearch().search_for_actions(_make_dag()) == ["C", "G"]


def test_lifo_follows_depth_first_order():
    assert TreeSearch(frontier_factory=LifoFrontier).search_for_actions(_make_dag()) == ["B", "D", "G"]


def test_cost_frontier_returns_cheapest_route():
    problem = _make_weighted_dag()
    assert TreeSearch().search_for_actions(problem) == ["C", "G"]

    node = TreeSearch(frontier_factory=PriorityFrontier).search_for_node(problem)
    assert solution_actions(node) == ["B", "D", "G"]
    assert node.path_cost == 3.0


def test_unreachable_goal_reports_search_exhausted():
    problem = GraphProblem(edges={"A": ["B"], "B": ["C"], "C": [], "Z": []}, initial_state="A", goals=["Z"])
    outcome = TreeSearch().search_for_actions(problem)
    assert outcome == SearchExhausted(nodes_expanded=3)
    assert not outcome


def test_initial_goal_needs_no_actions():
    problem = GraphProblem(edges={"A": ["B"]}, initial_state="A", goals=["A"])
    outcome = TreeSearch().search_for_actions(problem)
    assert outcome == []
    assert not isinstance(outcome, SearchExhausted)


def test_node_chain_matches_returned_actions():
    problem = _make_dag()
    engine = TreeSearch()
    node = engine.search_for_node(problem)

    actions = []
    current = node
    while current.parent is not None:
        actions.append(current.action)
        current = current.parent
    actions.reverse()

    assert current.state == problem.initial_state
    assert actions == engine.search_for_actions(problem)
    assert path_states(node) == ["A", "C", "G"]


def test_problem_without_step_cost_uses_unit_cost():
    node = TreeSearch().search_for_node(_DoublingProblem(6))
    assert solution_actions(node) == ["+1", "+1", "*2"]
    assert node.depth == 3
    assert node.path_cost == 3.0


def test_depth_limit_bounds_cyclic_search():
    problem = GraphProblem(edges={"A": ["B"], "B": ["A"], "C": []}, initial_state="A", goals=["C"])
    outcome = TreeSearch(depth_limit=4).search_for_actions(problem)
    assert outcome == SearchExhausted(nodes_expanded=4)


def test_repeated_state_detection_is_opt_in():
    problem = GraphProblem(edges={"A": ["B"], "B": ["A"], "C": []}, initial_state="A", goals=["C"])
    outcome = TreeSearch(detect_repeated_states=True).search_for_actions(problem)
    assert outcome == SearchExhausted(nodes_expanded=2)


def test_expand_builds_one_child_per_action():
    problem = _make_dag()
    root = NodeFactory().new_root_node("A")
    children = TreeSearch().expand(root, problem)
    assert [child.state for child in children] == ["C", "B"]
    assert all(child.parent is root and child.depth == 1 for child in children)


def test_new_child_node_uses_declared_step_cost():
    problem = _make_weighted_dag()
    factory = NodeFactory()
    root = factory.new_root_node("A")
    child = factory.new_child_node(problem, root, "C")
    assert (child.state, child.action, child.path_cost, child.depth) == ("C", "C", 5.0, 1)
    assert root.is_root and not child.is_root


def test_frontiers_pop_in_their_own_order():
    nodes = [Node(state=s, path_cost=c) for s, c in [("x", 3.0), ("y", 1.0), ("z", 1.0)]]
    orders = {}
    for name, frontier in [("fifo", FifoFrontier()), ("lifo", LifoFrontier()), ("cost", PriorityFrontier())]:
        for node in nodes:
            frontier.push(node)
        orders[name] = [frontier.pop().state for _ in range(len(frontier))]

    assert orders == {"fifo": ["x", "y", "z"], "lifo": ["z", "y", "x"], "cost": ["y", "z", "x"]}


def test_make_frontier_rejects_unknown_names():
    assert make_frontier("FIFO") is FifoFrontier
    with pytest.raises(ValueError, match="Unknown frontier"):
        make_frontier("random")


def test_tracer_records_expansions():
    tracer = Tracer()
    TreeSearch(tracer=tracer).search_for_actions(_make_dag())
    summary = tracer.summary()
    assert summary["num_expansions"] == 4
    assert summary["action_counts"]["solution_found"] == 1


def test_graph_problem_validates_states():
    with pytest.raises(ValueError, match="Initial state"):
        GraphProblem(edges={"A": ["B"]}, initial_state="Q", goals=["B"])
    with pytest.raises(ValueError, match="Goal states"):
        GraphProblem(edges={"A": ["B"]}, initial_state="A", goals=["Q"])
    with pytest.raises(ValueError, match="Negative cost"):
        GraphProblem(edges={"A": {"B": -1}}, initial_state="A", goals=["B"])


def test_edge_targets_without_entries_are_dead_ends():
    problem = GraphProblem(edges={"A": ["B", "C"]}, initial_state="A", goals=["C"])
    assert problem.states == frozenset({"A", "B", "C"})
    assert problem.actions("B") == []
    assert TreeSearch().search_for_actions(problem) == ["C"]
