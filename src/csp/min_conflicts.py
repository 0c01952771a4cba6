"""Min-conflicts local search: stochastic repair of a complete assignment."""

import random
from typing import Any, List, Optional, Sequence, Tuple, Union

from .assignment import Assignment
from .model import CSP, SupportsConstraint
from src.utils.failures import BudgetExhausted
from src.utils.logging_utils import get_logger
from src.utils.trace import Tracer

logger = get_logger()

Outcome = Union[Assignment, BudgetExhausted]


def solve(
    csp: CSP,
    max_steps: int,
    rng: random.Random,
    tracer: Optional[Tracer] = None,
) -> Outcome:
    """
    Run min-conflicts on `csp` for at most `max_steps` repairs.

    Returns a complete Assignment satisfying every constraint, or
    BudgetExhausted when the budget runs out. The search is incomplete: a
    failure does not mean the CSP has no solution. All random choices go
    through `rng`, so a seeded source reproduces a run exactly.
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    if tracer is None:
        tracer = Tracer(enabled=False)

    assignment = _random_assignment(csp, rng)
    for step in range(max_steps):
        if assignment.is_solution(csp):
            logger.debug("min-conflicts solved %r after %d steps", csp, step)
            tracer.log_solution_found()
            return assignment

        conflicted = _conflicted_variables(csp, assignment)
        var = rng.choice(conflicted)
        value, conflicts = _min_conflict_value(csp, assignment, var, rng)
        assignment.set(var, value)
        tracer.log_repair(
            variable=var,
            value=value,
            conflicts=conflicts,
            conflicted_count=len(conflicted),
        )

    if assignment.is_solution(csp):
        tracer.log_solution_found()
        return assignment

    failure = BudgetExhausted(steps=max_steps)
    logger.debug("min-conflicts gave up on %r: %s", csp, failure.reason)
    tracer.log_failure(failure.reason)
    return failure


class MinConflictsSolver:
    """Strategy object binding a step budget, for callers that swap strategies."""

    def __init__(self, max_steps: int, rng: Optional[random.Random] = None) -> None:
        self.max_steps = max_steps
        self.rng = rng or random.Random()

    def solve(self, csp: CSP, tracer: Optional[Tracer] = None) -> Outcome:
        return solve(csp, self.max_steps, self.rng, tracer)


def _random_assignment(csp: CSP, rng: random.Random) -> Assignment:
    assignment = Assignment()
    for name in csp.variable_names:
        assignment.set(name, rng.choice(csp.domain_of(name)))
    return assignment


def _conflicted_variables(csp: CSP, assignment: Assignment) -> List[str]:
    """Variables in the scope of at least one violated constraint, first-seen order."""
    result: List[str] = []
    seen = set()
    for constraint in csp.constraints:
        if constraint.is_satisfied(assignment):
            continue
        for var in constraint.scope:
            if var not in seen:
                seen.add(var)
                result.append(var)
    return result


def _min_conflict_value(
    csp: CSP, assignment: Assignment, variable: str, rng: random.Random
) -> Tuple[Any, int]:
    # Only constraints touching `variable` can change with its value.
    constraints = csp.constraints_for(variable)
    duplicate = assignment.copy()
    min_conflicts: Optional[int] = None
    candidates: List[Any] = []
    for value in csp.domain_of(variable):
        duplicate.set(variable, value)
        count = _count_conflicts(constraints, duplicate)
        if min_conflicts is None or count < min_conflicts:
            min_conflicts = count
            candidates = [value]
        elif count == min_conflicts:
            candidates.append(value)
    return rng.choice(candidates), min_conflicts or 0


def _count_conflicts(constraints: Sequence[SupportsConstraint], assignment: Assignment) -> int:
    return sum(1 for constraint in constraints if not constraint.is_satisfied(assignment))
