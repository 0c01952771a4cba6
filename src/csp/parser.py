"""Record parser: convert a declarative CSP record into a CSP.

Record shape:

    {
        "id": "map-3",
        "kind": "csp",
        "variables": {"WA": ["red", "green"], "NT": ["red", "green"]},
        "constraints": [
            {"type": "all_diff", "scope": ["WA", "NT"]},
            {"type": "not_equal", "scope": ["WA", "NT"]},
            {"type": "equals", "variable": "WA", "value": "red"},
        ],
    }

`variables` may also be a list of `{"name": ..., "domain": [...]}` objects.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .model import CSP, Constraint, Variable


def parse_csp(record: Dict[str, Any]) -> CSP:
    variables = _parse_variables(record.get("variables"))
    constraints = [_parse_constraint(raw) for raw in record.get("constraints") or []]
    return CSP(variables=variables, constraints=constraints)


def _parse_variables(raw: Any) -> List[Variable]:
    if isinstance(raw, dict):
        return [Variable(str(name), tuple(domain)) for name, domain in raw.items()]
    if isinstance(raw, list):
        variables = []
        for item in raw:
            if not isinstance(item, dict) or "name" not in item:
                raise ValueError(f"Malformed variable entry: {item!r}")
            variables.append(Variable(str(item["name"]), tuple(item.get("domain") or ())))
        return variables
    raise ValueError("CSP record needs a 'variables' mapping or list")


def _parse_constraint(raw: Any) -> Constraint:
    if not isinstance(raw, dict):
        raise ValueError(f"Malformed constraint entry: {raw!r}")

    kind = str(raw.get("type", "")).lower().replace("-", "_")
    if kind in ("all_diff", "alldiff", "all_different"):
        return Constraint.all_diff(raw.get("scope") or [])
    if kind in ("not_equal", "neq", "!="):
        scope = raw.get("scope") or []
        if len(scope) != 2:
            raise ValueError(f"not_equal needs exactly two variables, got {scope!r}")
        return Constraint.not_equal(scope[0], scope[1])
    if kind in ("equals", "eq", "=="):
        if "variable" not in raw or "value" not in raw:
            raise ValueError(f"equals needs 'variable' and 'value': {raw!r}")
        return Constraint.equals(raw["variable"], raw["value"])
    raise ValueError(f"Unknown constraint type: {raw.get('type')!r}")
