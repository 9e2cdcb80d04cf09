from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import random
from typing import Any

from .grid import Grid, generate_maze, random_walls


@dataclass
class Scenario:
    name: str
    start: Any
    goal: Any
    meta: dict[str, Any]
    zero: Any = 0.0


def scenario_open8(width: int, height: int) -> Scenario:
    grid = Grid(width, height, diagonal=True)
    return Scenario(
        name=f"open8_{width}x{height}",
        start=grid.cell(0, 0),
        goal=grid.cell(width - 1, height - 1),
        meta={"kind": "open8"},
    )


def scenario_grid4(width: int, height: int, density: float, seed: int = 0) -> Scenario:
    grid = Grid(width, height, walls=random_walls(width, height, density, seed))
    return Scenario(
        name=f"grid4_{width}x{height}_d{density}_s{seed}",
        start=grid.cell(0, 0),
        goal=grid.cell(width - 1, height - 1),
        meta={"kind": "grid4", "density": density, "seed": seed},
    )


def scenario_maze4(width: int, height: int, seed: int = 0) -> Scenario:
    grid = generate_maze(width, height, seed=seed)
    return Scenario(
        name=f"maze4_{width}x{height}_s{seed}",
        start=grid.cell(0, 0),
        goal=grid.cell(width - 1, height - 1),
        meta={"kind": "maze4", "seed": seed},
    )


# 8-puzzle
GOAL_8: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)
MOVES_8 = {
    0: [1, 3],
    1: [0, 2, 4],
    2: [1, 5],
    3: [0, 4, 6],
    4: [1, 3, 5, 7],
    5: [2, 4, 8],
    6: [3, 7],
    7: [4, 6, 8],
    8: [5, 7],
}


@dataclass(frozen=True)
class PuzzleState:
    tiles: tuple[int, ...] = GOAL_8

    def adjacent(self) -> Iterator[PuzzleState]:
        z = self.tiles.index(0)
        for nz in MOVES_8[z]:
            lst = list(self.tiles)
            lst[z], lst[nz] = lst[nz], lst[z]
            yield PuzzleState(tuple(lst))

    def move_cost(self, next_node: PuzzleState) -> float:
        return 1.0

    def minimum_remaining_cost(self, goal: PuzzleState) -> float:
        where = {val: idx for idx, val in enumerate(goal.tiles)}
        dist = 0
        for idx, val in enumerate(self.tiles):
            if val == 0:
                continue
            goal_idx = where[val]
            x, y = idx % 3, idx // 3
            gx, gy = goal_idx % 3, goal_idx // 3
            dist += abs(x - gx) + abs(y - gy)
        return float(dist)


def scramble_puzzle(steps: int, seed: int = 0) -> PuzzleState:
    rng = random.Random(seed)
    s = PuzzleState()
    for _ in range(steps):
        s = rng.choice(list(s.adjacent()))
    return s


def scenario_puzzle(steps: int, seed: int = 0) -> Scenario:
    return Scenario(
        name=f"8p_{steps}_s{seed}",
        start=scramble_puzzle(steps, seed),
        goal=PuzzleState(),
        meta={"kind": "8p", "steps": steps, "seed": seed},
    )
