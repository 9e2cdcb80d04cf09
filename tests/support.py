from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GraphNode:
    """Node of a weighted digraph given as ``{u: {v: cost}}`` with an optional ``{u: h}`` table."""

    name: str
    graph: dict[str, dict[str, Any]] = field(compare=False, repr=False)
    h: dict[str, Any] = field(compare=False, repr=False, default_factory=dict)

    def adjacent(self) -> Iterator["GraphNode"]:
        for v in self.graph.get(self.name, {}):
            yield GraphNode(v, self.graph, self.h)

    def move_cost(self, next_node: "GraphNode") -> Any:
        return self.graph[self.name][next_node.name]

    def minimum_remaining_cost(self, goal: "GraphNode") -> Any:
        return self.h.get(self.name, 0.0)


def nodes(graph: dict[str, dict[str, Any]], h: dict[str, Any] | None = None):
    names = set(graph) | {v for edges in graph.values() for v in edges}
    return {n: GraphNode(n, graph, h or {}) for n in names}


def path_cost(path: list[Any], zero: Any = 0.0) -> Any:
    total = zero
    for a, b in zip(path, path[1:]):
        total = total + a.move_cost(b)
    return total


def simple_path_costs(start: GraphNode, goal: GraphNode) -> list[float]:
    """Costs of every cycle-free route from start to goal, by exhaustive DFS."""
    out: list[float] = []

    def walk(node: GraphNode, seen: set[str], cost: float) -> None:
        if node == goal:
            out.append(cost)
            return
        for n in node.adjacent():
            if n.name not in seen:
                walk(n, seen | {n.name}, cost + node.move_cost(n))

    walk(start, {start.name}, 0.0)
    return out
