"""CSP core data structures: variables, domains and constraints."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple

Predicate = Callable[[Mapping[str, Any]], bool]


class SupportsConstraint(Protocol):
    """Anything with a scope and a satisfaction test can act as a constraint."""

    scope: Sequence[str]

    def is_satisfied(self, assignment: Mapping[str, Any]) -> bool: ...


@dataclass(frozen=True)
class Variable:
    name: str
    domain: Tuple[Any, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", tuple(self.domain))


@dataclass(frozen=True)
class Constraint:
    """
    A constraint is defined by a scope (the variables it touches) and a predicate
    over an assignment mapping. Predicates may be handed a partial assignment and
    should treat unbound scope variables as non-binding.
    """

    description: str
    scope: Tuple[str, ...]
    predicate: Predicate = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scope", tuple(self.scope))
        if not self.scope:
            raise ValueError(f"Constraint '{self.description}' has an empty scope")

    @classmethod
    def all_diff(cls, variables: Iterable[str]) -> "Constraint":
        vars_list = list(variables)
        desc = f"AllDiff: {', '.join(vars_list)}"

        def _predicate(assignment: Mapping[str, Any]) -> bool:
            values = [assignment[var] for var in vars_list if var in assignment]
            return len(values) == len(set(values))

        return cls(description=desc, scope=tuple(vars_list), predicate=_predicate)

    @classmethod
    def not_equal(cls, var_a: str, var_b: str) -> "Constraint":
        desc = f"{var_a} != {var_b}"

        def _predicate(assignment: Mapping[str, Any]) -> bool:
            if var_a not in assignment or var_b not in assignment:
                return True
            return assignment[var_a] != assignment[var_b]

        return cls(description=desc, scope=(var_a, var_b), predicate=_predicate)

    @classmethod
    def equals(cls, variable: str, value: Any) -> "Constraint":
        desc = f"{variable} == {value}"

        def _predicate(assignment: Mapping[str, Any]) -> bool:
            if variable not in assignment:
                return True
            return assignment[variable] == value

        return cls(description=desc, scope=(variable,), predicate=_predicate)

    def involves(self, variable: str) -> bool:
        return variable in self.scope

    def is_satisfied(self, assignment: Mapping[str, Any]) -> bool:
        return bool(self.predicate(assignment))


class CSP:
    """Variables, their domains and the constraints over them. Read-only during search."""

    def __init__(
        self,
        variables: Sequence[Variable],
        constraints: Sequence[SupportsConstraint],
    ) -> None:
        self.variables: Tuple[Variable, ...] = tuple(variables)
        self.constraints: Tuple[SupportsConstraint, ...] = tuple(constraints)

        self.variable_names: List[str] = [v.name for v in self.variables]
        if len(set(self.variable_names)) != len(self.variable_names):
            raise ValueError("Variable names must be unique")

        self.domains: Dict[str, Tuple[Any, ...]] = {}
        for var in self.variables:
            if not var.domain:
                raise ValueError(f"Variable '{var.name}' has an empty domain")
            self.domains[var.name] = var.domain

        # Map each variable to the constraints that mention it.
        self.constraints_by_var: Dict[str, List[SupportsConstraint]] = {
            name: [] for name in self.variable_names
        }
        for constraint in self.constraints:
            if not constraint.scope:
                raise ValueError(f"Constraint {constraint!r} has an empty scope")
            for var in dict.fromkeys(constraint.scope):
                if var not in self.constraints_by_var:
                    raise ValueError(
                        f"Constraint {getattr(constraint, 'description', constraint)!r} "
                        f"references unknown variable '{var}'"
                    )
                self.constraints_by_var[var].append(constraint)

    def domain_of(self, variable: str) -> Tuple[Any, ...]:
        return self.domains[variable]

    def constraints_for(self, variable: str) -> List[SupportsConstraint]:
        return self.constraints_by_var.get(variable, [])

    def is_consistent(self, assignment: Mapping[str, Any]) -> bool:
        """Check whether every constraint is satisfied under the current (partial) assignment."""
        return all(constraint.is_satisfied(assignment) for constraint in self.constraints)

    def violated_constraints(self, assignment: Mapping[str, Any]) -> List[SupportsConstraint]:
        return [c for c in self.constraints if not c.is_satisfied(assignment)]

    def __repr__(self) -> str:
        return f"CSP(variables={len(self.variables)}, constraints={len(self.constraints)})"
