from __future__ import annotations

import heapq
from typing import Any, Generic

from .core.ordering import check_comparable, compare_costs
from .core.types import N as NodeT
from .path import Path

TIE_BREAKS = ("fifo", "lifo", "deep")


class _FrontierItem(Generic[NodeT]):
    __slots__ = ("estimate", "rank", "path")

    def __init__(self, estimate: Any, rank: tuple[int, int], path: Path[NodeT]) -> None:
        self.estimate = estimate
        self.rank = rank
        self.path = path

    def __lt__(self, other: _FrontierItem[NodeT]) -> bool:
        c = compare_costs(self.estimate, other.estimate)
        if c:
            return c < 0
        return self.rank < other.rank


class Frontier(Generic[NodeT]):
    """Min-heap of paths keyed on estimated total cost.

    Equal estimates are ordered by ``tie_break``:
      - "fifo": first pushed, first popped
      - "lifo": last pushed, first popped
      - "deep": longer paths first, then fifo
    """

    def __init__(self, tie_break: str = "fifo") -> None:
        assert tie_break in TIE_BREAKS, f"tie_break must be one of {TIE_BREAKS}"
        self.tie_break = tie_break
        self._heap: list[_FrontierItem[NodeT]] = []
        self._counter = 0

    def _rank(self, path: Path[NodeT]) -> tuple[int, int]:
        if self.tie_break == "lifo":
            return (0, -self._counter)
        if self.tie_break == "deep":
            return (-len(path), self._counter)
        return (0, self._counter)

    def push(self, path: Path[NodeT]) -> Any:
        """Queue ``path``; returns its estimated total cost."""
        estimate = check_comparable(path.estimated_total_cost())
        heapq.heappush(self._heap, _FrontierItem(estimate, self._rank(path), path))
        self._counter += 1
        return estimate

    def pop(self) -> tuple[Path[NodeT], Any] | None:
        if not self._heap:
            return None
        item = heapq.heappop(self._heap)
        return item.path, item.estimate

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
