from __future__ import annotations

from typing import Any


class AStarError(Exception):
    """Base class for search engine failures."""


class IncomparableCostError(AStarError, ArithmeticError):
    """Two costs could not be ordered (typically a NaN); the search is aborted."""

    def __init__(self, lhs: Any, rhs: Any) -> None:
        super().__init__(f"costs {lhs!r} and {rhs!r} cannot be ordered")
        self.lhs = lhs
        self.rhs = rhs
