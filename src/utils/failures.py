"""Failure outcomes returned (never raised) by the search strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class Failure:
    """Base for reportable search failures. Always falsy."""

    reason: str = "failure"

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class SearchExhausted(Failure):
    """The frontier emptied without reaching a goal state."""

    nodes_expanded: int = 0

    @property
    def reason(self) -> str:  # type: ignore[override]
        return f"Frontier exhausted after expanding {self.nodes_expanded} nodes"


@dataclass(frozen=True)
class BudgetExhausted(Failure):
    """The local search step budget ran out before a solution was found."""

    steps: int = 0

    @property
    def reason(self) -> str:  # type: ignore[override]
        return f"No solution within {self.steps} steps"


def is_failure(outcome: Any) -> bool:
    return isinstance(outcome, Failure)
