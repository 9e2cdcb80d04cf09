import argparse
import csv
from datetime import datetime
import os
from typing import Any

from astarcore.scenarios import (
    Scenario,
    scenario_grid4,
    scenario_maze4,
    scenario_open8,
    scenario_puzzle,
)
from astarcore.search import AStarSolver, SearchParams

KEYS = [
    "scenario",
    "kind",
    "algo",
    "path_strategy",
    "cost",
    "solutions",
    "pops",
    "expansions",
    "generated",
    "pruned",
    "max_frontier",
    "runtime_ms",
    "path_len",
]


def run_one(sc: Scenario, algo: str, params: SearchParams) -> dict[str, Any]:
    eng: AStarSolver[Any] = AStarSolver(zero=sc.zero, params=params)
    if algo == "solve":
        found = eng.solve(sc.start, sc.goal)
        results = [found] if found is not None else []
    else:
        results = eng.solve_all(sc.start, sc.goal)
    st = eng.stats
    return {
        "scenario": sc.name,
        "kind": sc.meta["kind"],
        "algo": algo,
        "path_strategy": params.path_strategy,
        "cost": (results[0][1] if results else None),
        "solutions": len(results),
        "pops": st.pops,
        "expansions": st.expansions,
        "generated": st.generated,
        "pruned": st.pruned,
        "max_frontier": st.max_frontier,
        "runtime_ms": round(st.runtime_ms, 3),
        "path_len": (len(results[0][0]) if results else None),
    }


def main():
    p = argparse.ArgumentParser(description="Benchmark solve / solve_all over sample scenarios")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--size", type=int, default=31, help="grid and maze side length")
    p.add_argument("--tie_break", type=str, default="fifo", choices=["fifo", "lifo", "deep"])
    p.add_argument(
        "--include_all", action="store_true", help="also run solve_all on the small scenarios"
    )
    p.add_argument("--out", type=str, default=None)
    args = p.parse_args()

    scenarios = [
        scenario_open8(args.size, args.size),
        scenario_grid4(args.size, args.size, density=0.2, seed=args.seed),
        scenario_maze4(args.size, args.size, seed=args.seed),
        scenario_puzzle(steps=20, seed=args.seed),
    ]
    # co-optimal path counts explode on open grids, keep solve_all to tiny instances
    small = [scenario_open8(6, 6), scenario_maze4(11, 11, seed=args.seed)]

    rows = []
    for strategy in ("linked", "flat"):
        params = SearchParams(tie_break=args.tie_break, path_strategy=strategy)
        for sc in scenarios:
            rows.append(run_one(sc, "solve", params))
        if args.include_all:
            for sc in small:
                rows.append(run_one(sc, "solve_all", params))

    out_path = args.out or os.path.join(
        "results", f"benchmark_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    )
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=KEYS)
        w.writeheader()
        w.writerows(rows)
    print(out_path)
    print(",".join(KEYS))
    for row in rows:
        print(",".join(str(row[k]) for k in KEYS))


if __name__ == "__main__":
    main()
