"""Partial or complete variable -> value bindings for a CSP."""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from .model import CSP


class _Unbound:
    _instance: Optional["_Unbound"] = None

    def __new__(cls) -> "_Unbound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNBOUND"


# Returned by `Assignment.get` for variables without a value.
UNBOUND: Any = _Unbound()


class Assignment(Mapping):
    """
    Mutable mapping from variable name to value.

    Reads go through the `Mapping` protocol so constraint predicates can test
    `var in assignment` and index it directly. Writes go through `set`/`unset`.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def set(self, variable: str, value: Any) -> None:
        self._values[variable] = value

    def unset(self, variable: str) -> None:
        self._values.pop(variable, None)

    def get(self, variable: str, default: Any = UNBOUND) -> Any:
        return self._values.get(variable, default)

    def is_complete(self, csp: CSP) -> bool:
        return all(name in self._values for name in csp.variable_names)

    def is_solution(self, csp: CSP) -> bool:
        return self.is_complete(csp) and csp.is_consistent(self)

    def copy(self) -> "Assignment":
        # Values are treated as immutable; a new dict decouples the two histories.
        return Assignment(self._values)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __getitem__(self, variable: str) -> Any:
        return self._values[variable]

    def __contains__(self, variable: object) -> bool:
        return variable in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Assignment({self._values!r})"
