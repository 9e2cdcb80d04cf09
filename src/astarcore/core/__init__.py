from .errors import AStarError, IncomparableCostError
from .ordering import check_comparable, compare_costs
from .types import Cost, Node

__all__ = [
    "AStarError", "IncomparableCostError", "check_comparable", "compare_costs", "Cost", "Node"
]
