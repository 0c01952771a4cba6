"""Frontier disciplines for tree search.

A frontier is any object with `push`, `pop` and `__len__`; the search loop
never looks at the ordering itself, so swapping the frontier changes the
search variant (breadth-first, depth-first, uniform cost) without touching
the loop.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Callable, Deque, Dict, List, Protocol, Tuple

from .node import Node


class Frontier(Protocol):
    def push(self, node: Node) -> None: ...

    def pop(self) -> Node: ...

    def __len__(self) -> int: ...


FrontierFactory = Callable[[], Frontier]


class FifoFrontier:
    """First in, first out: breadth-first order."""

    def __init__(self) -> None:
        self._queue: Deque[Node] = deque()

    def push(self, node: Node) -> None:
        self._queue.append(node)

    def pop(self) -> Node:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier:
    """Last in, first out: depth-first order."""

    def __init__(self) -> None:
        self._stack: List[Node] = []

    def push(self, node: Node) -> None:
        self._stack.append(node)

    def pop(self) -> Node:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class PriorityFrontier:
    """Lowest `key(node)` first; equal keys leave in insertion order."""

    def __init__(self, key: Callable[[Node], float] = lambda node: node.path_cost) -> None:
        self._key = key
        self._heap: List[Tuple[float, int, Node]] = []
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (self._key(node), next(self._counter), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


_FRONTIERS: Dict[str, FrontierFactory] = {
    "fifo": FifoFrontier,
    "lifo": LifoFrontier,
    "cost": PriorityFrontier,
}


def make_frontier(name: str) -> FrontierFactory:
    """Look up a frontier factory by its configuration name."""
    try:
        return _FRONTIERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown frontier '{name}'; expected one of {sorted(_FRONTIERS)}"
        ) from None
