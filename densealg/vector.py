"""Dense vectors of floating-point values with element-wise arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import TextIO, Union

MAX_DIM = 1 << 20

Scalar = Union[int, float]


class DimensionError(ValueError):
    """Raised when a dimension is out of range or two operands do not match."""


def _check_dim(dim: int) -> None:
    if dim < 0 or dim >= MAX_DIM:
        raise DimensionError(f"dimension {dim} outside [0, {MAX_DIM})")


def _divide(lhs: float, rhs: float) -> float:
    """Divide with IEEE semantics: division by zero yields inf or nan."""
    if rhs != 0.0:
        return lhs / rhs
    if lhs == 0.0 or math.isnan(lhs):
        return math.nan
    negative = (lhs < 0.0) != (math.copysign(1.0, rhs) < 0.0)
    return -math.inf if negative else math.inf


class Vector:
    """A fixed-length sequence of floats supporting element-wise operations."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Scalar] = ()) -> None:
        data = [float(value) for value in values]
        _check_dim(len(data))
        self._values = data

    @classmethod
    def zeros(cls, dim: int) -> Vector:
        """Return a vector of ``dim`` zeros."""
        _check_dim(dim)
        return cls([0.0] * dim)

    @classmethod
    def from_scalar(cls, value: Scalar) -> Vector:
        """Return a one-element vector holding ``value``."""
        return cls([value])

    def copy(self) -> Vector:
        return type(self)(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        if not isinstance(index, int):
            raise TypeError("vector indices must be integers")
        return self._values[index]

    def __setitem__(self, index: int, value: Scalar) -> None:
        if not isinstance(index, int):
            raise TypeError("vector indices must be integers")
        self._values[index] = float(value)

    def __str__(self) -> str:
        return "[" + ",".join(f"{value:8.5f}" for value in self._values) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def write(self, stream: TextIO) -> None:
        """Write the formatted vector to ``stream``."""
        stream.write(str(self))

    def _zip(self, other: Vector) -> Iterator[tuple[float, float]]:
        if len(self) != len(other):
            raise DimensionError(
                f"dimension mismatch: {len(self)} and {len(other)}"
            )
        return zip(self._values, other._values)

    def _apply(self, other: object, op) -> Vector:
        if isinstance(other, Vector):
            return type(self)(op(a, b) for a, b in self._zip(other))
        if isinstance(other, Real):
            rhs = float(other)
            return type(self)(op(a, rhs) for a in self._values)
        return NotImplemented

    def __add__(self, other: Vector | Scalar) -> Vector:
        return self._apply(other, lambda a, b: a + b)

    def __sub__(self, other: Vector | Scalar) -> Vector:
        return self._apply(other, lambda a, b: a - b)

    def __mul__(self, other: Vector | Scalar) -> Vector:
        return self._apply(other, lambda a, b: a * b)

    def __truediv__(self, other: Vector | Scalar) -> Vector:
        return self._apply(other, _divide)

    def dot(self, other: Vector) -> float:
        """Return the inner product with ``other``."""
        total = 0.0
        for a, b in self._zip(other):
            total += a * b
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self._values, other._values))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _greater(self, other: Vector) -> bool:
        for a, b in zip(self._values, other._values):
            if a < b:
                return False
            if a > b:
                return True
        return len(self) > len(other)

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._greater(other)

    def __ge__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._greater(other) or self == other

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return other._greater(self)

    def __le__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return other._greater(self) or self == other