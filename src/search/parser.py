"""Record parser: build a GraphProblem from a declarative record.

    {"id": "g1", "kind": "graph", "initial": "A", "goals": ["G"],
     "edges": {"A": ["B", "C"], "B": {"G": 4}, "C": ["G"]}}

A single `"goal"` key is accepted in place of `"goals"`.
"""

from __future__ import annotations

from typing import Any, Dict

from .problem import GraphProblem


def parse_graph_problem(record: Dict[str, Any]) -> GraphProblem:
    edges = record.get("edges")
    if not isinstance(edges, dict):
        raise ValueError("Graph record needs an 'edges' mapping")
    if "initial" not in record:
        raise ValueError("Graph record needs an 'initial' state")

    goals = record.get("goals")
    if goals is None and "goal" in record:
        goals = [record["goal"]]
    if not goals:
        raise ValueError("Graph record needs at least one goal state")
    if isinstance(goals, str):
        goals = [goals]

    return GraphProblem(edges=edges, initial_state=record["initial"], goals=goals)
