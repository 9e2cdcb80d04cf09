import argparse
import csv
import importlib
from typing import Any

PLT: Any | None
IMPORT_ERROR: Exception | None
try:
    PLT = importlib.import_module("matplotlib.pyplot")
except ImportError as exc:  # pragma: no cover
    PLT = None
    IMPORT_ERROR = exc
else:
    IMPORT_ERROR = None


def load_rows(path: str) -> list[dict[str, str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return [dict(row) for row in csv.DictReader(f)]


def _num(val: str) -> float:
    return 0.0 if val in ("", "None") else float(val)


def main():
    if PLT is None:
        assert IMPORT_ERROR is not None
        raise RuntimeError("matplotlib is required to plot results") from IMPORT_ERROR
    p = argparse.ArgumentParser(description="Plot benchmark CSV: runtime vs expansions by scenario")
    p.add_argument("csv", help="CSV file from astarcore-benchmark")
    args = p.parse_args()
    rows = load_rows(args.csv)
    for sc in sorted(set(r["scenario"] for r in rows)):
        sub = [r for r in rows if r["scenario"] == sc]
        PLT.figure()
        x = [_num(r["expansions"]) for r in sub]
        y = [_num(r["runtime_ms"]) for r in sub]
        labels = [f'{r["algo"]}/{r["path_strategy"]}' for r in sub]
        PLT.scatter(x, y)
        for xi, yi, lab in zip(x, y, labels, strict=False):
            PLT.annotate(lab, (xi, yi))
        PLT.xlabel("Expansions")
        PLT.ylabel("Runtime (ms)")
        PLT.title(sc)
        out_png = args.csv.replace(".csv", f"_{sc}.png")
        PLT.savefig(out_png, bbox_inches="tight")
        PLT.close()
        print(out_png)


if __name__ == "__main__":
    main()
