"""Sparse matrices stored as a dictionary of keys with cached compressed views."""

from __future__ import annotations

import numbers
from collections.abc import Callable, Sequence

import numpy as np

from .compressed import (
    ZERO,
    Compressed,
    compress_columns,
    compress_rows,
    csc_vecmat,
    csr_matvec,
)


def _is_index(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


class Sparse:
    """Real sparse matrix.

    Entries live in a dictionary keyed by ``row * columns + column``; row- and
    column-compressed views are built on demand and dropped on every change.
    """

    # Lets NumPy operands defer to this class' reflected operators.
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int) -> None:
        if not (_is_index(rows) and _is_index(columns)):
            raise TypeError("dimensions must be integers")
        if rows < 0 or columns < 0:
            raise ValueError("dimensions must be non-negative")
        self._rows = int(rows)
        self._columns = int(columns)
        self._entries: dict[int, float] = {}
        self._csr: Compressed | None = None
        self._csc: Compressed | None = None

    # Shape.

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    def size(self) -> int:
        """Number of positions, rows times columns."""
        return self._rows * self._columns

    # Construction helpers.

    def _invalidate(self) -> None:
        self._csr = None
        self._csc = None

    def _with_entries(self, entries: dict[int, float]) -> Sparse:
        result = Sparse(self._rows, self._columns)
        result._entries = entries
        return result

    def copy(self) -> Sparse:
        """Independent copy of this matrix."""
        result = self._with_entries(dict(self._entries))
        result._csr = self._csr
        result._csc = self._csc
        return result

    def _check_indices(self, indices, limit: int, what: str) -> list[int]:
        values = [int(i) for i in indices]
        if not values:
            raise ValueError(f"{what} indices must not be empty")
        for value in values:
            if not 0 <= value < limit:
                raise IndexError(f"{what} index {value} out of range for {limit}")
        return values

    def submatrix(self, rows: Sequence[int], columns: Sequence[int]) -> Sparse:
        """Matrix made of the given rows and columns, in the given order."""
        row_indices = self._check_indices(rows, self._rows, "row")
        column_indices = self._check_indices(columns, self._columns, "column")
        result = Sparse(len(row_indices), len(column_indices))
        for j, row in enumerate(row_indices):
            for k, column in enumerate(column_indices):
                value = self._entries.get(row * self._columns + column)
                if value is not None:
                    result._entries[j * result._columns + k] = value
        return result

    # Compressed views.

    def csr(self) -> Compressed:
        """Row-compressed storage of the non-zero entries."""
        if self._csr is None:
            self._csr = compress_rows(self._entries, self._rows, self._columns)
        return self._csr

    def csc(self) -> Compressed:
        """Column-compressed storage of the non-zero entries."""
        if self._csc is None:
            self._csc = compress_columns(self._entries, self._rows, self._columns)
        return self._csc

    # Access and insertion.

    def _position(self, j: int, k: int) -> int:
        if not 0 <= j < self._rows:
            raise IndexError(f"row index {j} out of range for {self._rows}")
        if not 0 <= k < self._columns:
            raise IndexError(f"column index {k} out of range for {self._columns}")
        return int(j) * self._columns + int(k)

    @staticmethod
    def _split(key) -> tuple:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("index with a pair: [row, column] or [rows, columns]")
        return key

    def __getitem__(self, key):
        j, k = self._split(key)
        if _is_index(j) and _is_index(k):
            return self._entries.get(self._position(j, k), 0.0)
        if _is_index(j) or _is_index(k):
            raise TypeError("index with two integers or two sequences")
        row_indices = self._check_indices(j, self._rows, "row")
        column_indices = self._check_indices(k, self._columns, "column")
        matrix = np.zeros((len(row_indices), len(column_indices)))
        for a, row in enumerate(row_indices):
            for b, column in enumerate(column_indices):
                matrix[a, b] = self._entries.get(row * self._columns + column, 0.0)
        return matrix

    def _store(self, position: int, value: float) -> None:
        if abs(value) > ZERO:
            self._entries[position] = float(value)
        else:
            self._entries.pop(position, None)

    def __setitem__(self, key, value) -> None:
        j, k = self._split(key)
        if _is_index(j) and _is_index(k):
            if not _is_scalar(value):
                raise TypeError("a single position takes a scalar")
            position = self._position(j, k)
            self._invalidate()
            self._store(position, value)
            return
        if _is_index(j) or _is_index(k):
            raise TypeError("index with two integers or two sequences")
        row_indices = self._check_indices(j, self._rows, "row")
        column_indices = self._check_indices(k, self._columns, "column")
        matrix = np.asarray(value, dtype=float)
        if matrix.shape != (len(row_indices), len(column_indices)):
            raise ValueError(
                f"matrix of shape {matrix.shape} does not fit "
                f"{len(row_indices)}x{len(column_indices)} indices"
            )
        self._invalidate()
        for a, row in enumerate(row_indices):
            for b, column in enumerate(column_indices):
                self._store(row * self._columns + column, matrix[a, b])

    def row(self, j: int) -> np.ndarray:
        """Dense copy of row ``j``."""
        if not 0 <= j < self._rows:
            raise IndexError(f"row index {j} out of range for {self._rows}")
        result = np.zeros(self._columns)
        for column, value in self.csr().segment(j):
            result[column] = value
        return result

    def column(self, k: int) -> np.ndarray:
        """Dense copy of column ``k``."""
        if not 0 <= k < self._columns:
            raise IndexError(f"column index {k} out of range for {self._columns}")
        result = np.zeros(self._rows)
        for row, value in self.csc().segment(k):
            result[row] = value
        return result

    def transpose(self) -> Sparse:
        """Transposed matrix."""
        result = Sparse(self._columns, self._rows)
        for index, value in self._entries.items():
            row, column = divmod(index, self._columns)
            result._entries[column * self._rows + row] = value
        return result

    # Unary and scalar operations, applied to stored entries.

    def _map(self, function: Callable[[float], float]) -> Sparse:
        return self._with_entries(
            {index: function(value) for index, value in self._entries.items()}
        )

    def _map_in_place(self, function: Callable[[float], float]) -> None:
        for index, value in self._entries.items():
            self._entries[index] = function(value)
        self._invalidate()

    def __pos__(self) -> Sparse:
        return self.copy()

    def __neg__(self) -> Sparse:
        return self._map(lambda value: -value)

    # Matrix sums.

    def _check_shape(self, other: Sparse) -> None:
        if (self._rows, self._columns) != (other._rows, other._columns):
            raise ValueError(
                f"shapes {self._rows}x{self._columns} and "
                f"{other._rows}x{other._columns} differ"
            )

    def _merge(self, other: Sparse, sign: float) -> None:
        self._check_shape(other)
        for index, value in other._entries.items():
            combined = self._entries.get(index, 0.0) + sign * value
            if index in self._entries and abs(combined) <= ZERO:
                del self._entries[index]
            else:
                self._entries[index] = combined
        self._invalidate()

    def __add__(self, other):
        if isinstance(other, Sparse):
            result = self.copy()
            result._merge(other, 1.0)
            return result
        if _is_scalar(other):
            return self._map(lambda value: value + other)
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return self._map(lambda value: other + value)
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, Sparse):
            self._merge(other, 1.0)
            return self
        if _is_scalar(other):
            self._map_in_place(lambda value: value + other)
            return self
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Sparse):
            result = self.copy()
            result._merge(other, -1.0)
            return result
        if _is_scalar(other):
            return self._map(lambda value: value - other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return self._map(lambda value: other - value)
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, Sparse):
            self._merge(other, -1.0)
            return self
        if _is_scalar(other):
            self._map_in_place(lambda value: value - other)
            return self
        return NotImplemented

    # Scalar products and quotients.

    def __mul__(self, other):
        if _is_scalar(other):
            return self._map(lambda value: value * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._map(lambda value: other * value)
        return NotImplemented

    def __imul__(self, other):
        if _is_scalar(other):
            self._map_in_place(lambda value: value * other)
            return self
        return NotImplemented

    def __truediv__(self, other):
        if _is_scalar(other):
            return self._map(lambda value: value / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            return self._map(lambda value: other / value)
        return NotImplemented

    def __itruediv__(self, other):
        if _is_scalar(other):
            self._map_in_place(lambda value: value / other)
            return self
        return NotImplemented

    # Row by column products.

    def __matmul__(self, other):
        if isinstance(other, Sparse):
            if self._columns != other._rows:
                raise ValueError(
                    f"cannot multiply {self._rows}x{self._columns} "
                    f"by {other._rows}x{other._columns}"
                )
            left, right = self.csr(), other.csr()
            entries: dict[int, float] = {}
            for j in range(self._rows):
                for k, left_value in left.segment(j):
                    for h, right_value in right.segment(k):
                        index = j * other._columns + h
                        entries[index] = entries.get(index, 0.0) + left_value * right_value
            result = Sparse(self._rows, other._columns)
            result._entries = {i: v for i, v in entries.items() if abs(v) > ZERO}
            return result
        if isinstance(other, (np.ndarray, list, tuple)):
            vector = np.asarray(other, dtype=float)
            if vector.ndim != 1 or vector.size != self._columns:
                raise ValueError(
                    f"expected a vector of size {self._columns}, got shape {vector.shape}"
                )
            return csr_matvec(self.csr(), vector)
        return NotImplemented

    def __rmatmul__(self, other):
        if isinstance(other, (np.ndarray, list, tuple)):
            vector = np.asarray(other, dtype=float)
            if vector.ndim != 1 or vector.size != self._rows:
                raise ValueError(
                    f"expected a vector of size {self._rows}, got shape {vector.shape}"
                )
            return csc_vecmat(self.csc(), vector)
        return NotImplemented

    # Output.

    def __str__(self) -> str:
        return "\n".join(
            f"({index // self._columns}, {index % self._columns}): {value:g}"
            for index, value in sorted(self._entries.items())
        )

    def __repr__(self) -> str:
        return f"Sparse({self._rows}, {self._columns}, stored={len(self._entries)})"