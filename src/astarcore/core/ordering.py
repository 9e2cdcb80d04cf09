from __future__ import annotations

from typing import Any

from .errors import IncomparableCostError


def compare_costs(lhs: Any, rhs: Any) -> int:
    """Return -1, 0 or 1; raise IncomparableCostError when no order exists."""
    if lhs < rhs:
        return -1
    if rhs < lhs:
        return 1
    if lhs == rhs:
        return 0
    raise IncomparableCostError(lhs, rhs)


def check_comparable(cost: Any) -> Any:
    """Reject a cost that does not even compare equal to itself."""
    compare_costs(cost, cost)
    return cost
