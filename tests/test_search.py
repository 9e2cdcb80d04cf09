import math
import unittest

from astarcore.core.errors import IncomparableCostError
from astarcore.grid import Position
from astarcore.real import Real64
from astarcore.search import AStarSolver, SearchParams, solve, solve_all

from tests.support import nodes, path_cost, simple_path_costs

ALL_PARAMS = [
    SearchParams(tie_break=tb, path_strategy=ps)
    for tb in ("fifo", "lifo", "deep")
    for ps in ("linked", "flat")
]


class TestEuclideanGrid(unittest.TestCase):
    def test_diagonal_route(self):
        for params in ALL_PARAMS:
            with self.subTest(params=params):
                found = solve(Position(-4, 5), Position(2, -1), zero=Real64.zero(), params=params)
                self.assertIsNotNone(found)
                path, cost = found
                self.assertEqual(
                    path,
                    [
                        Position(-4, 5),
                        Position(-3, 4),
                        Position(-2, 3),
                        Position(-1, 2),
                        Position(0, 1),
                        Position(1, 0),
                        Position(2, -1),
                    ],
                )
                self.assertIsInstance(cost, Real64)
                self.assertLess(abs(float(cost) - math.sqrt(72)), 1e-5)

    def test_knight_offset_has_two_optimal_routes(self):
        start, goal = Position(1, 1), Position(2, 3)
        for params in ALL_PARAMS:
            with self.subTest(params=params):
                results = solve_all(start, goal, zero=Real64.zero(), params=params)
                self.assertEqual(len(results), 2)
                middles = {path[1] for path, _ in results}
                self.assertEqual(middles, {Position(1, 2), Position(2, 2)})
                for path, cost in results:
                    self.assertEqual(len(path), 3)
                    self.assertLess(abs(float(cost) - (1 + math.sqrt(2))), 1e-9)
                    self.assertEqual(cost, path_cost(path, Real64.zero()))

    def test_start_is_goal(self):
        eng = AStarSolver(zero=Real64.zero())
        self.assertEqual(eng.solve(Position(3, 3), Position(3, 3)), ([Position(3, 3)], Real64(0.0)))
        self.assertEqual(eng.stats.pops, 1)
        self.assertEqual(eng.stats.expansions, 0)
        self.assertEqual(
            eng.solve_all(Position(3, 3), Position(3, 3)), [([Position(3, 3)], Real64(0.0))]
        )


class TestWeightedGraphs(unittest.TestCase):
    def setUp(self):
        # two equally cheap routes S-A-G and S-B-G (cost 4), a pricier S-C-G (5),
        # a cycle A <-> B and a dead end at D
        self.graph = {
            "S": {"A": 1.0, "B": 2.0, "C": 1.0, "D": 0.5},
            "A": {"G": 3.0, "B": 1.5},
            "B": {"G": 2.0, "A": 1.0},
            "C": {"G": 4.0},
            "D": {},
        }
        self.h = {"S": 3.0, "A": 2.0, "B": 2.0, "C": 3.0, "D": 3.0, "G": 0.0}

    def test_solve_is_optimal_against_exhaustive_search(self):
        for h in (None, self.h):
            n = nodes(self.graph, h)
            best = min(simple_path_costs(n["S"], n["G"]))
            for params in ALL_PARAMS:
                with self.subTest(h=h, params=params):
                    path, cost = solve(n["S"], n["G"], params=params)
                    self.assertEqual(cost, best)
                    self.assertEqual(path[0], n["S"])
                    self.assertEqual(path[-1], n["G"])
                    self.assertEqual(path_cost(path), cost)

    def test_solve_all_returns_every_cheapest_route(self):
        for h in (None, self.h):
            n = nodes(self.graph, h)
            for params in ALL_PARAMS:
                with self.subTest(h=h, params=params):
                    _, best = solve(n["S"], n["G"], params=params)
                    results = solve_all(n["S"], n["G"], params=params)
                    routes = sorted("".join(x.name for x in p) for p, _ in results)
                    self.assertEqual(routes, ["SAG", "SBG"])
                    for p, c in results:
                        self.assertEqual(c, best)
                        self.assertEqual(path_cost(p), c)

    def test_unreachable_goal(self):
        graph = {"S": {"A": 1.0}, "A": {}, "Z": {}}
        n = nodes(graph)
        eng = AStarSolver()
        self.assertIsNone(eng.solve(n["S"], n["Z"]))
        self.assertEqual(eng.stats.solutions, 0)
        self.assertEqual(eng.stats.expansions, 2)
        self.assertEqual(solve_all(n["S"], n["Z"]), [])

    def test_visited_nodes_are_pruned(self):
        n = nodes(self.graph)
        eng = AStarSolver()
        eng.solve(n["S"], n["G"])
        st = eng.stats
        self.assertGreater(st.pruned, 0)
        self.assertEqual(st.pops, st.expansions + st.pruned + 1)
        self.assertEqual(st.solutions, 1)
        self.assertGreaterEqual(st.max_frontier, 1)
        self.assertGreaterEqual(st.runtime_ms, 0.0)

    def test_solve_all_keeps_revisiting(self):
        n = nodes(self.graph)
        eng = AStarSolver()
        eng.solve_all(n["S"], n["G"])
        self.assertEqual(eng.stats.pruned, 0)
        self.assertEqual(eng.stats.solutions, 2)

    def test_solve_all_stops_beside_endless_cycle(self):
        graph = {"S": {"G": 1.0, "A": 1.0}, "A": {"B": 1.0}, "B": {"A": 1.0}}
        n = nodes(graph)
        self.assertEqual(solve(n["S"], n["G"]), ([n["S"], n["G"]], 1.0))
        for params in ALL_PARAMS:
            with self.subTest(params=params):
                eng = AStarSolver(params=params)
                self.assertEqual(eng.solve_all(n["S"], n["G"]), [([n["S"], n["G"]], 1.0)])
                self.assertLessEqual(eng.stats.pops, 4)

    def test_solve_all_zero_cost_tie(self):
        graph = {"S": {"A": 0.0, "G": 1.0}, "A": {"G": 1.0}}
        n = nodes(graph)
        routes = sorted("".join(x.name for x in p) for p, _ in solve_all(n["S"], n["G"]))
        self.assertEqual(routes, ["SAG", "SG"])


class TestIncomparableCosts(unittest.TestCase):
    def setUp(self):
        self.graph = {"S": {"A": 1.0, "B": math.nan}, "A": {"G": 1.0}, "B": {"G": 1.0}}

    def test_solve_fails_fast(self):
        n = nodes(self.graph)
        eng = AStarSolver()
        with self.assertLogs("astarcore.search", level="ERROR"):
            with self.assertRaises(IncomparableCostError):
                eng.solve(n["S"], n["G"])

    def test_solve_all_fails_fast(self):
        n = nodes(self.graph)
        with self.assertLogs("astarcore.search", level="ERROR"):
            with self.assertRaises(IncomparableCostError):
                AStarSolver().solve_all(n["S"], n["G"])

    def test_wrapped_costs_fail_fast(self):
        graph = {"S": {"A": Real64(1.0), "B": Real64(1.0)}, "B": {"G": Real64(0.0) / Real64(0.0)}}
        n = nodes(graph, {k: Real64(0.0) for k in ("S", "A", "B", "G")})
        with self.assertLogs("astarcore.search", level="ERROR"):
            with self.assertRaises(IncomparableCostError):
                AStarSolver(zero=Real64.zero()).solve(n["S"], n["G"])


class TestSolverConfig(unittest.TestCase):
    def test_invalid_params_rejected(self):
        for params in (
            SearchParams(tie_break="random"),
            SearchParams(path_strategy="rope"),
            SearchParams(log_every=0),
        ):
            with self.subTest(params=params):
                with self.assertRaises(AssertionError):
                    AStarSolver(params=params)

    def test_progress_logging(self):
        eng = AStarSolver(zero=Real64.zero(), params=SearchParams(log_every=1))
        with self.assertLogs("astarcore.search", level="INFO") as logs:
            eng.solve(Position(0, 0), Position(2, 2))
        self.assertEqual(len(logs.records), eng.stats.pops)
        self.assertIn("pops=1,", logs.output[0])

    def test_stats_reset_between_calls(self):
        eng = AStarSolver(zero=Real64.zero())
        eng.solve(Position(0, 0), Position(5, 5))
        first = eng.stats
        eng.solve(Position(0, 0), Position(1, 0))
        self.assertIsNot(eng.stats, first)
        self.assertLess(eng.stats.pops, first.pops)


if __name__ == "__main__":
    unittest.main()
