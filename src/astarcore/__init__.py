"""astarcore: generic A* over caller-defined nodes.

Public API:
- solve / solve_all and the AStarSolver engine
- Node and Cost protocols, compare_costs, IncomparableCostError
- Real32 / Real64 totally ordered float costs
- LinkedPath / FlatPath path representations
"""
from .core.errors import AStarError, IncomparableCostError
from .core.ordering import compare_costs
from .core.types import Cost, Node
from .path import FlatPath, LinkedPath, Path
from .real import Real32, Real64
from .search import AStarSolver, SearchParams, SearchStats, solve, solve_all

__all__ = [
    "AStarError", "IncomparableCostError", "compare_costs", "Cost", "Node",
    "FlatPath", "LinkedPath", "Path", "Real32", "Real64",
    "AStarSolver", "SearchParams", "SearchStats", "solve", "solve_all",
]

__version__ = "0.1.0"
