"""Systematic state-space search: problems, nodes, frontiers and the tree search loop."""

from .frontier import FifoFrontier, LifoFrontier, PriorityFrontier, make_frontier
from .node import Node, NodeFactory, path_states, solution_actions
from .parser import parse_graph_problem
from .problem import GraphProblem, Problem
from .tree_search import TreeSearch

__all__ = [
    "FifoFrontier",
    "LifoFrontier",
    "PriorityFrontier",
    "make_frontier",
    "Node",
    "NodeFactory",
    "path_states",
    "solution_actions",
    "parse_graph_problem",
    "GraphProblem",
    "Problem",
    "TreeSearch",
]
