from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Any, Generic

from .core.errors import IncomparableCostError
from .core.ordering import compare_costs
from .core.types import N as NodeT
from .frontier import TIE_BREAKS, Frontier
from .logging import get_logger as _get_logger
from .path import PATH_STRATEGIES, Path


@dataclass
class SearchStats:
    pops: int = 0
    expansions: int = 0
    generated: int = 0
    pruned: int = 0
    solutions: int = 0
    max_frontier: int = 0
    runtime_ms: float = 0.0


@dataclass
class SearchParams:
    tie_break: str = "fifo"
    path_strategy: str = "linked"
    log_every: int | None = None


class AStarSolver(Generic[NodeT]):
    """A* over caller-defined nodes.

    ``solve`` returns one cheapest path and prunes already expanded nodes.
    ``solve_all`` keeps every route open and returns all paths tied for the
    cheapest cost. Both assume non-negative move costs and an admissible
    ``minimum_remaining_cost``.
    """

    def __init__(
        self,
        *,
        zero: Any = 0.0,
        params: SearchParams | None = None,
        logger: Any | None = None,
    ) -> None:
        cfg = params or SearchParams()
        assert cfg.tie_break in TIE_BREAKS, f"tie_break must be one of {TIE_BREAKS}"
        assert cfg.path_strategy in PATH_STRATEGIES, (
            f"path_strategy must be one of {tuple(PATH_STRATEGIES)}"
        )
        assert cfg.log_every is None or cfg.log_every > 0, "log_every must be positive"
        self.zero = zero
        self.tie_break = cfg.tie_break
        self.path_cls = PATH_STRATEGIES[cfg.path_strategy]
        self.log_every = cfg.log_every
        self.logger = logger or _get_logger(__name__)
        self.stats = SearchStats()

    def _start(self, start: NodeT, goal: NodeT, algo: str) -> Frontier[NodeT]:
        self.stats = SearchStats()
        self.logger.debug(
            "%s: start=%r goal=%r strategy=%s", algo, start, goal, self.path_cls.strategy
        )
        frontier: Frontier[NodeT] = Frontier(self.tie_break)
        self._push(frontier, self.path_cls.new(start, goal, self.zero))
        return frontier

    def _push(self, frontier: Frontier[NodeT], path: Path[NodeT]) -> None:
        frontier.push(path)
        self.stats.generated += 1
        if len(frontier) > self.stats.max_frontier:
            self.stats.max_frontier = len(frontier)

    def _pop(self, frontier: Frontier[NodeT]) -> tuple[Path[NodeT], Any] | None:
        popped = frontier.pop()
        if popped is None:
            return None
        self.stats.pops += 1
        if self.log_every and (self.stats.pops % self.log_every == 0):
            self.logger.info(
                "pops=%(pops)d, expansions=%(exp)d, generated=%(gen)d, pruned=%(pruned)d",
                {
                    "pops": self.stats.pops,
                    "exp": self.stats.expansions,
                    "gen": self.stats.generated,
                    "pruned": self.stats.pruned,
                },
            )
        return popped

    def solve(self, start: NodeT, goal: NodeT) -> tuple[list[NodeT], Any] | None:
        t0 = time.perf_counter()
        solution: Path[NodeT] | None = None
        visited: set[NodeT] = set()
        try:
            frontier = self._start(start, goal, "solve")
            while True:
                popped = self._pop(frontier)
                if popped is None:
                    break
                path, _ = popped
                current = path.tail
                if current in visited:
                    self.stats.pruned += 1
                    continue
                visited.add(current)
                if current == goal:
                    solution = path
                    break
                self.stats.expansions += 1
                for n in current.adjacent():
                    if n not in visited:
                        self._push(frontier, path.extend(n))
        except IncomparableCostError:
            self.logger.error("solve aborted: incomparable costs", exc_info=True)
            raise
        finally:
            self.stats.runtime_ms += (time.perf_counter() - t0) * 1000.0
        if solution is None:
            self.logger.debug("solve: no path after %d pops", self.stats.pops)
            return None
        self.stats.solutions = 1
        self.logger.debug("solve: cost=%s length=%d", solution.cost, len(solution))
        return solution.materialize(), solution.cost

    def solve_all(self, start: NodeT, goal: NodeT) -> list[tuple[list[NodeT], Any]]:
        t0 = time.perf_counter()
        solutions: list[Path[NodeT]] = []
        best_cost: Any = None
        try:
            frontier = self._start(start, goal, "solve_all")
            while True:
                popped = self._pop(frontier)
                if popped is None:
                    break
                path, estimate = popped
                # an admissible estimate above the best cost cannot lead to a tie
                if best_cost is not None and compare_costs(estimate, best_cost) > 0:
                    break
                current = path.tail
                if current == goal:
                    if best_cost is None:
                        best_cost = path.cost
                    elif compare_costs(path.cost, best_cost) > 0:
                        break
                    solutions.append(path)
                    continue
                self.stats.expansions += 1
                for n in current.adjacent():
                    self._push(frontier, path.extend(n))
        except IncomparableCostError:
            self.logger.error("solve_all aborted: incomparable costs", exc_info=True)
            raise
        finally:
            self.stats.runtime_ms += (time.perf_counter() - t0) * 1000.0
        self.stats.solutions = len(solutions)
        self.logger.debug("solve_all: %d solution(s), cost=%s", len(solutions), best_cost)
        return [(p.materialize(), p.cost) for p in solutions]


def solve(
    start: NodeT, goal: NodeT, *, zero: Any = 0.0, params: SearchParams | None = None
) -> tuple[list[NodeT], Any] | None:
    return AStarSolver[NodeT](zero=zero, params=params).solve(start, goal)


def solve_all(
    start: NodeT, goal: NodeT, *, zero: Any = 0.0, params: SearchParams | None = None
) -> list[tuple[list[NodeT], Any]]:
    return AStarSolver[NodeT](zero=zero, params=params).solve_all(start, goal)
