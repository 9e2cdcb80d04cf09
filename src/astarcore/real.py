"""Float wrappers usable as search costs.

Native floats have no total order (NaN compares false against everything), so
a NaN cost would silently corrupt the frontier. ``Real32`` and ``Real64``
support the usual arithmetic but raise ``IncomparableCostError`` from any
ordering comparison involving NaN.
"""
from __future__ import annotations

import math
import struct
from typing import Any, TypeVar

from .core.errors import IncomparableCostError

R = TypeVar("R", bound="_Real")


class _Real:
    __slots__ = ("_value",)

    def __init__(self, value: float | int | _Real = 0.0) -> None:
        if isinstance(value, _Real):
            value = value._value
        self._value = self._round(float(value))

    @staticmethod
    def _round(value: float) -> float:
        return value

    @classmethod
    def zero(cls: type[R]) -> R:
        return cls(0.0)

    @property
    def value(self) -> float:
        return self._value

    def _other(self, other: Any) -> float | None:
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    # ordering

    def partial_cmp(self, other: Any) -> int | None:
        o = self._other(other)
        if o is None:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        if self._value < o:
            return -1
        if self._value > o:
            return 1
        if self._value == o:
            return 0
        return None

    def cmp(self, other: Any) -> int:
        res = self.partial_cmp(other)
        if res is None:
            raise IncomparableCostError(self, other)
        return res

    def __lt__(self, other: Any) -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: Any) -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: Any) -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: Any) -> bool:
        return self.cmp(other) >= 0

    def __eq__(self, other: object) -> bool:
        o = self._other(other)
        if o is None:
            return NotImplemented
        return self._value == o

    def __hash__(self) -> int:
        return hash(self._value)

    # arithmetic

    def _binary(self, other: Any, op) -> Any:
        o = self._other(other)
        if o is None:
            return NotImplemented
        return type(self)(op(self._value, o))

    def __add__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: b + a)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: b - a)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: b * a)

    def __truediv__(self, other: Any) -> Any:
        # IEEE semantics: x/0 is inf or NaN rather than an exception
        return self._binary(other, _ieee_div)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: _ieee_div(b, a))

    def __mod__(self, other: Any) -> Any:
        return self._binary(other, _ieee_rem)

    def __rmod__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: _ieee_rem(b, a))

    def __neg__(self: R) -> R:
        return type(self)(-self._value)

    def __abs__(self: R) -> R:
        return type(self)(abs(self._value))

    # conversions

    def __float__(self) -> float:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0.0

    def is_nan(self) -> bool:
        return math.isnan(self._value)

    def __repr__(self) -> str:
        return repr(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, spec: str) -> str:
        return format(self._value, spec)


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _ieee_rem(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    if math.isinf(b):
        return a
    # truncated remainder, sign follows the dividend
    return math.fmod(a, b)


class Real64(_Real):
    """Double precision cost."""

    __slots__ = ()


class Real32(_Real):
    """Single precision cost; every result is rounded to an IEEE binary32 value."""

    __slots__ = ()

    @staticmethod
    def _round(value: float) -> float:
        try:
            return struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)
