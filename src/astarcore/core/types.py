from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any, Protocol, TypeVar

_CostCo_co = TypeVar("_CostCo_co", covariant=True)


class Cost(Protocol):
    """Accumulated path cost: immutable, additive, ordered."""

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __eq__(self, other: object) -> bool: ...


class Node(Hashable, Protocol[_CostCo_co]):
    """Capabilities a caller's state type provides to the search engine.

    ``adjacent`` must be finite. ``minimum_remaining_cost`` must never
    overestimate the true remaining cost, otherwise results are not optimal.
    """

    def adjacent(self) -> Iterable[Any]: ...

    def move_cost(self, next_node: Any) -> _CostCo_co: ...

    def minimum_remaining_cost(self, goal: Any) -> _CostCo_co: ...


N = TypeVar("N", bound=Node[Any])
