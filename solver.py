"""Top-level solve interface.

Expose `solve_csp(csp)` for min-conflicts, `search_for_actions(problem)` for
tree search, and `solve_record(record)` that accepts a raw record compatible
with `src.csp.parser.parse_csp` or `src.search.parser.parse_graph_problem`.
"""

import random
from typing import Any, Dict, List, Optional, Union

from src import config
from src.csp import min_conflicts
from src.csp.assignment import Assignment
from src.csp.model import CSP
from src.csp.parser import parse_csp
from src.search.frontier import make_frontier
from src.search.parser import parse_graph_problem
from src.search.problem import Action, Problem
from src.search.tree_search import TreeSearch
from src.utils.failures import BudgetExhausted, SearchExhausted, is_failure
from src.utils.trace import Tracer


def solve_csp(
    csp: CSP,
    max_steps: int = config.DEFAULT_MAX_STEPS,
    seed: Optional[int] = config.DEFAULT_SEED,
    tracer: Optional[Tracer] = None,
) -> Union[Assignment, BudgetExhausted]:
    """Run min-conflicts with a fresh random source seeded by `seed`."""
    return min_conflicts.solve(csp, max_steps, random.Random(seed), tracer=tracer)


def search_for_actions(
    problem: Problem,
    frontier: str = config.DEFAULT_FRONTIER,
    depth_limit: Optional[int] = None,
    tracer: Optional[Tracer] = None,
) -> Union[List[Action], SearchExhausted]:
    """Tree search with the frontier discipline named by `frontier`."""
    engine = TreeSearch(
        frontier_factory=make_frontier(frontier), depth_limit=depth_limit, tracer=tracer
    )
    return engine.search_for_actions(problem)


def solve_record(
    record: Any,
    max_steps: int = config.DEFAULT_MAX_STEPS,
    seed: Optional[int] = config.DEFAULT_SEED,
    frontier: str = config.DEFAULT_FRONTIER,
    tracer: Optional[Tracer] = None,
) -> Dict[str, Any]:
    """
    Solve one raw record and return a JSON-friendly result:
    `{"kind", "status", "solution", "reason"}` where status is "solved" or "failed".
    Records without a "kind" are treated as CSPs. Steps are recorded on `tracer`
    when one is given.
    """
    if not isinstance(record, dict):
        raise TypeError("solve_record expects a record dictionary")

    kind = str(record.get("kind") or "csp").lower()
    if kind == "csp":
        outcome = solve_csp(parse_csp(record), max_steps=max_steps, seed=seed, tracer=tracer)
        solution = None if is_failure(outcome) else outcome.as_dict()
    elif kind == "graph":
        outcome = search_for_actions(parse_graph_problem(record), frontier=frontier, tracer=tracer)
        solution = None if is_failure(outcome) else list(outcome)
    else:
        raise ValueError(f"Unknown record kind: {kind!r}")

    return {
        "kind": kind,
        "status": "failed" if is_failure(outcome) else "solved",
        "solution": solution,
        "reason": outcome.reason if is_failure(outcome) else None,
    }


__all__ = ["solve_csp", "search_for_actions", "solve_record"]
