"""Partial routes explored by the search.

Two interchangeable representations:

- ``LinkedPath`` keeps a backward chain of immutable ``(node, previous)`` cells.
  Paths fanning out of the same prefix share it, so an extension costs one cell.
  The forward sequence is only rebuilt by ``materialize``.
- ``FlatPath`` stores the full node tuple and copies it on every extension.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic

from .core.types import N as NodeT


class _Cell(Generic[NodeT]):
    __slots__ = ("node", "prev")

    def __init__(self, node: NodeT, prev: _Cell[NodeT] | None) -> None:
        self.node = node
        self.prev = prev


class Path(ABC, Generic[NodeT]):
    """Immutable route from the start node to ``tail`` with its real cost.

    Abstract base; ``LinkedPath`` and ``FlatPath`` choose how nodes are stored.
    """

    __slots__ = ("cost", "goal", "length")
    strategy: ClassVar[str] = ""

    def __init__(self, cost: Any, goal: NodeT, length: int) -> None:
        self.cost = cost
        self.goal = goal
        self.length = length

    @classmethod
    @abstractmethod
    def new(cls, start: NodeT, goal: NodeT, zero: Any = 0.0) -> Path[NodeT]: ...

    @property
    @abstractmethod
    def tail(self) -> NodeT: ...

    @abstractmethod
    def extend(self, node: NodeT) -> Path[NodeT]: ...

    @abstractmethod
    def materialize(self) -> list[NodeT]: ...

    def estimated_total_cost(self) -> Any:
        return self.cost + self.tail.minimum_remaining_cost(self.goal)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tail={self.tail!r}, len={self.length}, cost={self.cost!r})"


class LinkedPath(Path[NodeT]):
    __slots__ = ("_cell",)
    strategy = "linked"

    def __init__(self, cell: _Cell[NodeT], cost: Any, goal: NodeT, length: int) -> None:
        super().__init__(cost, goal, length)
        self._cell = cell

    @classmethod
    def new(cls, start: NodeT, goal: NodeT, zero: Any = 0.0) -> LinkedPath[NodeT]:
        return cls(_Cell(start, None), zero, goal, 1)

    @property
    def tail(self) -> NodeT:
        return self._cell.node

    def extend(self, node: NodeT) -> LinkedPath[NodeT]:
        cost = self.cost + self._cell.node.move_cost(node)
        return LinkedPath(_Cell(node, self._cell), cost, self.goal, self.length + 1)

    def materialize(self) -> list[NodeT]:
        nodes = []
        cur: _Cell[NodeT] | None = self._cell
        while cur is not None:
            nodes.append(cur.node)
            cur = cur.prev
        nodes.reverse()
        return nodes


class FlatPath(Path[NodeT]):
    __slots__ = ("_nodes",)
    strategy = "flat"

    def __init__(self, nodes: tuple[NodeT, ...], cost: Any, goal: NodeT) -> None:
        super().__init__(cost, goal, len(nodes))
        self._nodes = nodes

    @classmethod
    def new(cls, start: NodeT, goal: NodeT, zero: Any = 0.0) -> FlatPath[NodeT]:
        return cls((start,), zero, goal)

    @property
    def tail(self) -> NodeT:
        return self._nodes[-1]

    def extend(self, node: NodeT) -> FlatPath[NodeT]:
        cost = self.cost + self._nodes[-1].move_cost(node)
        return FlatPath((*self._nodes, node), cost, self.goal)

    def materialize(self) -> list[NodeT]:
        return list(self._nodes)


PATH_STRATEGIES: dict[str, type[Path[Any]]] = {
    LinkedPath.strategy: LinkedPath,
    FlatPath.strategy: FlatPath,
}
