"""Search tree nodes and the factory that builds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .problem import Action, Problem, State, step_cost


@dataclass(frozen=True, eq=False)
class Node:
    """
    A state plus how the search reached it.

    `parent` is a back-reference only; a node's parent chain is always
    strictly shorter than the node itself, so the tree never cycles.
    """

    state: State
    parent: Optional["Node"] = None
    action: Optional[Action] = None
    path_cost: float = 0.0
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return f"Node(state={self.state!r}, depth={self.depth}, path_cost={self.path_cost})"


class NodeFactory:
    def new_root_node(self, initial_state: State) -> Node:
        return Node(state=initial_state)

    def new_child_node(self, problem: Problem, parent: Node, action: Action) -> Node:
        state = problem.result(parent.state, action)
        return Node(
            state=state,
            parent=parent,
            action=action,
            path_cost=parent.path_cost + step_cost(problem, parent.state, action, state),
            depth=parent.depth + 1,
        )


def solution_actions(node: Node) -> List[Action]:
    """Actions leading from the root to `node`, in order."""
    actions: List[Action] = []
    current: Optional[Node] = node
    while current is not None and current.parent is not None:
        actions.append(current.action)
        current = current.parent
    actions.reverse()
    return actions


def path_states(node: Node) -> List[State]:
    """States visited from the root to `node`, inclusive."""
    states: List[State] = []
    current: Optional[Node] = node
    while current is not None:
        states.append(current.state)
        current = current.parent
    states.reverse()
    return states
