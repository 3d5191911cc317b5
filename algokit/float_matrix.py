"""Dense floating-point matrices and column vectors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real


class FloatColumnVector:
    """A column vector of floats."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        self.values = [float(v) for v in values]

    @classmethod
    def zeros(cls, rows: int) -> FloatColumnVector:
        """Return a vector of ``rows`` zeros."""
        return cls([0.0] * rows)

    @property
    def rows(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __setitem__(self, index: int, value: float) -> None:
        self.values[index] = float(value)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatColumnVector):
            return NotImplemented
        return self.values == other.values

    def __repr__(self) -> str:
        return f"FloatColumnVector({self.values!r})"


class FloatMatrix:
    """A dense ``rows`` by ``cols`` matrix of floats, indexed as ``m[row][col]``."""

    def __init__(self, values: Iterable[Iterable[float]] = ()) -> None:
        rows = [[float(x) for x in row] for row in values]
        cols = len(rows[0]) if rows else 0
        if any(len(row) != cols for row in rows):
            raise ValueError("all rows must have the same length")
        self.values = rows
        self.rows = len(rows)
        self.cols = cols

    @classmethod
    def _with_shape(cls, values: list[list[float]], rows: int, cols: int) -> FloatMatrix:
        matrix = cls(values)
        matrix.rows, matrix.cols = rows, cols
        return matrix

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> FloatMatrix:
        """Return a zero matrix; square when ``cols`` is omitted."""
        cols = rows if cols is None else cols
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        return cls._with_shape([[0.0] * cols for _ in range(rows)], rows, cols)

    @classmethod
    def identity(cls, n: int) -> FloatMatrix:
        """Return the ``n`` by ``n`` identity matrix."""
        matrix = cls.zeros(n)
        for i, row in enumerate(matrix.values):
            row[i] = 1.0
        return matrix

    def __getitem__(self, index: int) -> list[float]:
        return self.values[index]

    def is_square(self) -> bool:
        """True if the matrix has as many rows as columns."""
        return self.rows == self.cols

    def _matmul(self, other: FloatMatrix) -> FloatMatrix:
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}")
        product = [[0.0] * other.cols for _ in range(self.rows)]
        for row, out in zip(self.values, product):
            for a, other_row in zip(row, other.values):
                if a != 0:
                    for k, b in enumerate(other_row):
                        out[k] += a * b
        return FloatMatrix._with_shape(product, self.rows, other.cols)

    def _vecmul(self, column: FloatColumnVector) -> FloatColumnVector:
        if self.cols != column.rows:
            raise ValueError(f"cannot multiply {self.rows}x{self.cols} by a vector of {column.rows}")
        return FloatColumnVector(sum(a * b for a, b in zip(row, column)) for row in self.values)

    def _scale(self, mult: float) -> FloatMatrix:
        return FloatMatrix._with_shape(
            [[x * mult for x in row] for row in self.values], self.rows, self.cols
        )

    def __mul__(self, other):
        if isinstance(other, FloatMatrix):
            return self._matmul(other)
        if isinstance(other, FloatColumnVector):
            return self._vecmul(other)
        if isinstance(other, Real):
            return self._scale(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._scale(float(other))
        return NotImplemented

    def _elementwise(self, other: FloatMatrix, sign: float) -> FloatMatrix:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrices must have the same shape")
        values = [
            [a + sign * b for a, b in zip(row, other_row)]
            for row, other_row in zip(self.values, other.values)
        ]
        return FloatMatrix._with_shape(values, self.rows, self.cols)

    def __add__(self, other):
        if not isinstance(other, FloatMatrix):
            return NotImplemented
        return self._elementwise(other, 1.0)

    def __sub__(self, other):
        if not isinstance(other, FloatMatrix):
            return NotImplemented
        return self._elementwise(other, -1.0)

    def pow(self, p: int) -> FloatMatrix:
        """Raise a square matrix to a non-negative integer power."""
        if p < 0:
            raise ValueError("exponent must be non-negative")
        if not self.is_square():
            raise ValueError("only square matrices can be raised to a power")
        base = self
        result = FloatMatrix.identity(self.rows)
        while p > 0:
            if p & 1:
                result = result * base
            p >>= 1
            if p > 0:
                base = base * base
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatMatrix):
            return NotImplemented
        return (self.rows, self.cols, self.values) == (other.rows, other.cols, other.values)

    def __repr__(self) -> str:
        return f"FloatMatrix({self.values!r})"

    def __str__(self) -> str:
        lines = []
        if self.cols:
            lines = [" ".join(f"{x:.16g}" for x in row) + "\n" for row in self.values]
        return "".join(lines) + "\n"