from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
import math
import random

from .real import Real64

_STEPS4 = [(1, 0), (-1, 0), (0, 1), (0, -1)]
_STEPS8 = _STEPS4 + [(1, 1), (1, -1), (-1, 1), (-1, -1)]


@dataclass(frozen=True)
class Position:
    """Cell of an unbounded 8-connected integer grid with Euclidean costs."""

    x: int
    y: int

    def adjacent(self) -> Iterator[Position]:
        x, y = self.x, self.y
        for dx, dy in [(1, 1), (1, 0), (1, -1), (0, 1), (0, -1), (-1, 1), (-1, 0), (-1, -1)]:
            yield Position(x + dx, y + dy)

    def move_cost(self, next_node: Position) -> Real64:
        return Real64(math.sqrt((self.x - next_node.x) ** 2 + (self.y - next_node.y) ** 2))

    def minimum_remaining_cost(self, goal: Position) -> Real64:
        return self.move_cost(goal)


@dataclass
class Grid:
    width: int
    height: int
    walls: set[tuple[int, int]] = field(default_factory=set)
    diagonal: bool = False
    step: float = 1.0

    def in_bounds(self, p: tuple[int, int]) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def passable(self, p: tuple[int, int]) -> bool:
        return p not in self.walls

    def cell(self, x: int, y: int) -> GridCell:
        assert self.in_bounds((x, y)), f"({x}, {y}) outside {self.width}x{self.height} grid"
        return GridCell(x, y, self)

    def neighbors(self, p: tuple[int, int]) -> Iterator[tuple[int, int]]:
        x, y = p
        for dx, dy in _STEPS8 if self.diagonal else _STEPS4:
            q = (x + dx, y + dy)
            if self.in_bounds(q) and self.passable(q):
                yield q

    def move_cost(self, p: tuple[int, int], q: tuple[int, int]) -> float:
        if p[0] == q[0] or p[1] == q[1]:
            return self.step
        return math.sqrt(2) * self.step

    def manhattan(self, p: tuple[int, int], goal: tuple[int, int]) -> float:
        return (abs(p[0] - goal[0]) + abs(p[1] - goal[1])) * self.step

    def octile(self, p: tuple[int, int], goal: tuple[int, int]) -> float:
        dx = abs(p[0] - goal[0])
        dy = abs(p[1] - goal[1])
        dmin, dmax = (dx if dx < dy else dy), (dx if dx >= dy else dy)
        return ((dmax - dmin) + math.sqrt(2) * dmin) * self.step


@dataclass(frozen=True)
class GridCell:
    """Node on a bounded ``Grid``; identity is the coordinate pair only."""

    x: int
    y: int
    grid: Grid = field(compare=False, repr=False)

    def adjacent(self) -> Iterator[GridCell]:
        for qx, qy in self.grid.neighbors((self.x, self.y)):
            yield GridCell(qx, qy, self.grid)

    def move_cost(self, next_node: GridCell) -> float:
        return self.grid.move_cost((self.x, self.y), (next_node.x, next_node.y))

    def minimum_remaining_cost(self, goal: GridCell) -> float:
        if self.grid.diagonal:
            return self.grid.octile((self.x, self.y), (goal.x, goal.y))
        return self.grid.manhattan((self.x, self.y), (goal.x, goal.y))


def random_walls(width: int, height: int, density: float, seed: int = 0) -> set[tuple[int, int]]:
    rng = random.Random(seed)
    walls = set()
    for x in range(width):
        for y in range(height):
            if rng.random() < density:
                walls.add((x, y))
    for p in [(0, 0), (width - 1, height - 1)]:
        walls.discard(p)
    return walls


def generate_maze(width: int, height: int, seed: int = 0) -> Grid:
    """Carve a perfect maze on the even cells with a randomized depth-first walk.

    The far corner is always open and joined to the carved lattice, also when a
    side length is even and the corner itself is not a lattice cell.
    """
    rng = random.Random(seed)
    walls = {(x, y) for x in range(width) for y in range(height)}
    walls.discard((0, 0))
    stack = [(0, 0)]
    seen = {(0, 0)}
    while stack:
        x, y = stack[-1]
        steps = [(2, 0), (-2, 0), (0, 2), (0, -2)]
        rng.shuffle(steps)
        fresh = [
            (dx, dy)
            for dx, dy in steps
            if 0 <= x + dx < width and 0 <= y + dy < height and (x + dx, y + dy) not in seen
        ]
        if not fresh:
            stack.pop()
            continue
        dx, dy = fresh[0]
        cell = (x + dx, y + dy)
        seen.add(cell)
        walls -= {cell, (x + dx // 2, y + dy // 2)}
        stack.append(cell)

    # corner joins lattice cell (gx - gx % 2, ly) through (gx, ly)
    gx, gy = width - 1, height - 1
    ly = gy - gy % 2
    walls -= {(gx, ly), (gx, gy)}
    return Grid(width, height, walls=walls)
