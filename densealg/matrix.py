"""Dense matrices stored as rows of vectors, with element-wise arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real
from typing import TextIO, Union

from densealg.vector import MAX_DIM, DimensionError, Vector

Scalar = Union[int, float]
Operand = Union["Matrix", Vector, Scalar]


def _check_shape(rows: int, cols: int) -> None:
    if rows < 0 or rows >= MAX_DIM:
        raise DimensionError(f"row count {rows} outside [0, {MAX_DIM})")
    if cols < 0 or cols >= MAX_DIM:
        raise DimensionError(f"column count {cols} outside [0, {MAX_DIM})")
    if rows * cols >= MAX_DIM:
        raise DimensionError(
            f"matrix of {rows}x{cols} exceeds {MAX_DIM} elements"
        )


class Matrix:
    """A rectangular grid of floats supporting element-wise operations."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[Scalar]] = ()) -> None:
        data = [Vector(row) for row in rows]
        cols = len(data[0]) if data else 0
        for row in data:
            if len(row) != cols:
                raise DimensionError(
                    f"ragged rows: expected {cols} columns, got {len(row)}"
                )
        _check_shape(len(data), cols)
        self._rows = data
        self._cols = cols

    @classmethod
    def _from_rows(cls, rows: list[Vector], cols: int) -> Matrix:
        result = cls.__new__(cls)
        result._rows = rows
        result._cols = cols
        return result

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a ``rows`` by ``cols`` matrix of zeros."""
        _check_shape(rows, cols)
        return cls._from_rows([Vector.zeros(cols) for _ in range(rows)], cols)

    @classmethod
    def from_scalar(cls, value: Scalar) -> Matrix:
        """Return a 1x1 matrix holding ``value``."""
        return cls([[value]])

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """Return a column matrix with the entries of ``vector``."""
        rows = len(vector)
        _check_shape(rows, 1)
        return cls._from_rows([Vector([value]) for value in vector], 1)

    def copy(self) -> Matrix:
        return self._from_rows([row.copy() for row in self._rows], self._cols)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """The pair ``(rows, cols)``."""
        return (self.rows, self.cols)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __getitem__(self, index: int | tuple[int, int]) -> Vector | float:
        if isinstance(index, tuple):
            row, col = index
            if not isinstance(row, int) or not isinstance(col, int):
                raise TypeError("matrix indices must be integers")
            return self._rows[row][col]
        if not isinstance(index, int):
            raise TypeError("matrix indices must be integers or pairs")
        return self._rows[index]

    def __setitem__(
        self, index: int | tuple[int, int], value: Scalar | Iterable[Scalar]
    ) -> None:
        if isinstance(index, tuple):
            row, col = index
            if not isinstance(row, int) or not isinstance(col, int):
                raise TypeError("matrix indices must be integers")
            self._rows[row][col] = value  # type: ignore[assignment]
            return
        if not isinstance(index, int):
            raise TypeError("matrix indices must be integers or pairs")
        new_row = Vector(value)  # type: ignore[arg-type]
        if len(new_row) != self._cols:
            raise DimensionError(
                f"row of length {len(new_row)} does not fit {self._cols} columns"
            )
        self._rows[index] = new_row

    def __str__(self) -> str:
        return "[" + ",\n ".join(str(row) for row in self._rows) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self._rows]!r})"

    def write(self, stream: TextIO) -> None:
        """Write the formatted matrix to ``stream``."""
        stream.write(str(self))

    def _apply(self, other: object, op) -> Matrix:
        if isinstance(other, Matrix):
            if self.shape != other.shape:
                raise DimensionError(
                    f"shape mismatch: {self.shape} and {other.shape}"
                )
            rows = [op(a, b) for a, b in zip(self._rows, other._rows)]
        elif isinstance(other, Vector):
            if len(other) != self.rows:
                raise DimensionError(
                    f"vector of length {len(other)} does not match "
                    f"{self.rows} rows"
                )
            rows = [op(row, value) for row, value in zip(self._rows, other)]
        elif isinstance(other, Real):
            rhs = float(other)
            rows = [op(row, rhs) for row in self._rows]
        else:
            return NotImplemented
        return self._from_rows(rows, self._cols)

    def __add__(self, other: Operand) -> Matrix:
        return self._apply(other, lambda a, b: a + b)

    def __sub__(self, other: Operand) -> Matrix:
        return self._apply(other, lambda a, b: a - b)

    def __mul__(self, other: Operand) -> Matrix:
        return self._apply(other, lambda a, b: a * b)

    def __truediv__(self, other: Operand) -> Matrix:
        return self._apply(other, lambda a, b: a / b)

    def dot(self, other: Matrix | Vector) -> Matrix | Vector:
        """Return the matrix product with a matrix or a vector."""
        if isinstance(other, Vector):
            if len(other) != self._cols:
                raise DimensionError(
                    f"vector of length {len(other)} does not match "
                    f"{self._cols} columns"
                )
            return Vector(row.dot(other) for row in self._rows)
        if not isinstance(other, Matrix):
            raise TypeError("dot requires a Matrix or a Vector")
        if self._cols != other.rows:
            raise DimensionError(
                f"inner dimensions differ: {self._cols} and {other.rows}"
            )
        _check_shape(self.rows, other.cols)
        if other._rows:
            columns = [Vector(column) for column in zip(*other._rows)]
        else:
            columns = [Vector() for _ in range(other.cols)]
        rows = [
            Vector(row.dot(column) for column in columns) for row in self._rows
        ]
        return self._from_rows(rows, other.cols)

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.dot(other)