"""Tests for the record parsers."""

import pytest

from src.csp.assignment import Assignment
from src.csp.parser import parse_csp
from src.search.parser import parse_graph_problem

MAP_RECORD = {
    "id": "map-3",
    "kind": "csp",
    "variables": {"WA": ["red", "green", "blue"], "NT": ["red", "green", "blue"], "SA": ["red", "green", "blue"]},
    "constraints": [
        {"type": "all_diff", "scope": ["WA", "NT", "SA"]},
        {"type": "not_equal", "scope": ["WA", "NT"]},
        {"type": "equals", "variable": "WA", "value": "red"},
    ],
}


def test_parse_csp_builds_variables_and_constraints():
    csp = parse_csp(MAP_RECORD)
    assert csp.variable_names == ["WA", "NT", "SA"]
    assert csp.domain_of("SA") == ("red", "green", "blue")
    assert len(csp.constraints) == 3
    assert len(csp.constraints_for("WA")) == 3
    assert Assignment({"WA": "red", "NT": "green", "SA": "blue"}).is_solution(csp)
    assert not Assignment({"WA": "green", "NT": "red", "SA": "blue"}).is_solution(csp)


def test_parse_csp_accepts_variable_list():
    csp = parse_csp({"variables": [{"name": "X", "domain": [1, 2]}], "constraints": []})
    assert csp.domain_of("X") == (1, 2)


@pytest.mark.parametrize(
    "constraint",
    [
        {"type": "between", "scope": ["WA", "NT"]},
        {"type": "not_equal", "scope": ["WA"]},
        {"type": "equals", "variable": "WA"},
        {"type": "all_diff", "scope": ["WA", "TAS"]},
        "WA != NT",
    ],
)
def test_parse_csp_rejects_malformed_constraints(constraint):
    record = dict(MAP_RECORD, constraints=[constraint])
    with pytest.raises(ValueError):
        parse_csp(record)


def test_parse_csp_requires_variables():
    with pytest.raises(ValueError, match="variables"):
        parse_csp({"constraints": []})


def test_parse_graph_problem_with_costs_and_single_goal():
    problem = parse_graph_problem(
        {"kind": "graph", "initial": "A", "goal": "C", "edges": {"A": {"B": 2}, "B": ["C"]}}
    )
    assert problem.initial_state == "A"
    assert problem.is_goal("C")
    assert problem.actions("A") == ["B"]
    assert problem.step_cost("A", "B", "B") == 2.0
    assert problem.step_cost("B", "C", "C") == 1.0


@pytest.mark.parametrize(
    "record",
    [
        {"initial": "A", "goals": ["B"]},
        {"edges": {"A": ["B"]}, "goals": ["B"]},
        {"edges": {"A": ["B"]}, "initial": "A", "goals": []},
    ],
)
def test_parse_graph_problem_rejects_incomplete_records(record):
    with pytest.raises(ValueError):
        parse_graph_problem(record)
