"""Problem contract for systematic search, plus an explicit-graph variant."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Protocol, Sequence, Union

State = Hashable
Action = Hashable


class Problem(Protocol):
    """
    What the tree search needs from a problem.

    `actions` must return a finite sequence (empty marks a dead end),
    `result` must be pure and deterministic, and `is_goal` a pure predicate.
    A problem keeps no per-run state, so one instance can serve several
    independent searches at once. `step_cost` is optional; searches fall
    back to a cost of 1 per action when a problem does not define it.
    """

    initial_state: State

    def actions(self, state: State) -> Sequence[Action]: ...

    def result(self, state: State, action: Action) -> State: ...

    def is_goal(self, state: State) -> bool: ...


EdgeSpec = Union[Iterable[State], Mapping[State, float]]


class GraphProblem:
    """
    Route finding over an explicit directed graph.

    States are graph nodes; the actions from a node are the names of its
    successors, in declaration order. `edges` maps each node either to a
    list of successors (unit cost) or to a `{successor: cost}` mapping.
    """

    def __init__(
        self,
        edges: Mapping[State, EdgeSpec],
        initial_state: State,
        goals: Iterable[State],
    ) -> None:
        self._successors: Dict[State, List[State]] = {}
        self._costs: Dict[tuple, float] = {}
        for source, targets in edges.items():
            if isinstance(targets, Mapping):
                self._successors[source] = list(targets)
                for target, cost in targets.items():
                    if cost < 0:
                        raise ValueError(f"Negative cost on edge {source!r} -> {target!r}")
                    self._costs[(source, target)] = float(cost)
            else:
                self._successors[source] = list(targets)

        known = set(self._successors)
        for targets in self._successors.values():
            known.update(targets)
        self._states = frozenset(known)

        self.initial_state = initial_state
        self.goals = frozenset(goals)
        if initial_state not in known:
            raise ValueError(f"Initial state {initial_state!r} is not in the graph")
        missing = [g for g in self.goals if g not in known]
        if missing:
            raise ValueError(f"Goal states not in the graph: {missing!r}")

    @property
    def states(self) -> frozenset:
        return self._states

    def actions(self, state: State) -> List[Action]:
        return list(self._successors.get(state, []))

    def result(self, state: State, action: Action) -> State:
        if action not in self._successors.get(state, []):
            raise ValueError(f"{action!r} is not reachable from {state!r}")
        return action

    def is_goal(self, state: State) -> bool:
        return state in self.goals

    def step_cost(self, state: State, action: Action, next_state: State) -> float:
        return self._costs.get((state, next_state), 1.0)

    def __repr__(self) -> str:
        return (
            f"GraphProblem(initial={self.initial_state!r}, goals={sorted(map(str, self.goals))}, "
            f"nodes={len(self.states)})"
        )


def step_cost(problem: Any, state: State, action: Action, next_state: State) -> float:
    """Cost of one transition; 1 when the problem does not declare step costs."""
    cost_fn = getattr(problem, "step_cost", None)
    if cost_fn is None:
        return 1.0
    return float(cost_fn(state, action, next_state))
