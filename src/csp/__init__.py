"""CSP model, record parsing and the min-conflicts local search."""

from .assignment import UNBOUND, Assignment
from .min_conflicts import MinConflictsSolver, solve
from .model import CSP, Constraint, Variable
from .parser import parse_csp

__all__ = [
    "UNBOUND",
    "Assignment",
    "MinConflictsSolver",
    "solve",
    "CSP",
    "Constraint",
    "Variable",
    "parse_csp",
]
