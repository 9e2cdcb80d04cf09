from astarcore import AStarSolver, Real64, SearchParams
from astarcore.grid import Grid, Position

if __name__ == "__main__":
    path, cost = AStarSolver(zero=Real64.zero()).solve(Position(-4, 5), Position(2, -1))
    print(f"diagonal: cost={cost:.3f}, path={[(p.x, p.y) for p in path]}")

    for nodes, c in AStarSolver(zero=Real64.zero()).solve_all(Position(1, 1), Position(2, 3)):
        print(f"co-optimal: cost={c:.3f}, path={[(p.x, p.y) for p in nodes]}")

    g = Grid(30, 30, walls={(15, y) for y in range(30)} - {(15, 10)})
    for strategy in ("linked", "flat"):
        eng = AStarSolver(params=SearchParams(path_strategy=strategy))
        found = eng.solve(g.cell(0, 0), g.cell(29, 29))
        assert found is not None
        nodes, c = found
        st = eng.stats
        print(
            f"{strategy}: cost={c}, len={len(nodes)}, expansions={st.expansions}, "
            f"pruned={st.pruned}, runtime_ms={st.runtime_ms:.2f}"
        )
