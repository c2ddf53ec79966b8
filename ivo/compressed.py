"""Compressed row and column storage built from dictionary-of-keys entries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import NamedTuple

import numpy as np

#: Entries whose magnitude does not exceed this threshold are not stored.
ZERO = 0.0


class Compressed(NamedTuple):
    """Compressed storage: pointer array, minor indices and values.

    For row storage ``inner[j]:inner[j + 1]`` spans row ``j``; ``outer`` holds
    the column of each stored value. Column storage swaps the roles.
    """

    inner: tuple[int, ...]
    outer: tuple[int, ...]
    entries: tuple[float, ...]

    @property
    def major(self) -> int:
        """Number of rows (row storage) or columns (column storage)."""
        return len(self.inner) - 1

    @property
    def nnz(self) -> int:
        """Number of stored values."""
        return len(self.entries)

    def segment(self, index: int) -> list[tuple[int, float]]:
        """Pairs of (minor index, value) stored for one row or column."""
        if not 0 <= index < self.major:
            raise IndexError(f"index {index} out of range for {self.major}")
        start, stop = self.inner[index], self.inner[index + 1]
        return list(zip(self.outer[start:stop], self.entries[start:stop]))


def _checked(
    entries: Mapping[int, float], rows: int, columns: int
) -> Iterable[tuple[int, int, float]]:
    if rows < 0 or columns < 0:
        raise ValueError("dimensions must be non-negative")
    limit = rows * columns
    for index, value in entries.items():
        if not 0 <= index < limit:
            raise ValueError(f"entry index {index} outside a {rows}x{columns} matrix")
        if abs(value) > ZERO:
            yield index // columns, index % columns, value


def _compress(triples: list[tuple[int, int, float]], major: int) -> Compressed:
    triples.sort(key=lambda item: (item[0], item[1]))
    counts = [0] * (major + 1)
    for position, _, _ in triples:
        counts[position + 1] += 1
    for position in range(major):
        counts[position + 1] += counts[position]
    return Compressed(
        inner=tuple(counts),
        outer=tuple(minor for _, minor, _ in triples),
        entries=tuple(value for _, _, value in triples),
    )


def compress_rows(entries: Mapping[int, float], rows: int, columns: int) -> Compressed:
    """Row-compressed storage of entries keyed by ``row * columns + column``."""
    triples = [(j, k, v) for j, k, v in _checked(entries, rows, columns)]
    return _compress(triples, rows)


def compress_columns(
    entries: Mapping[int, float], rows: int, columns: int
) -> Compressed:
    """Column-compressed storage of entries keyed by ``row * columns + column``."""
    triples = [(k, j, v) for j, k, v in _checked(entries, rows, columns)]
    return _compress(triples, columns)


def _reduce(compressed: Compressed, vector) -> np.ndarray:
    values = np.asarray(vector, dtype=float)
    if values.ndim != 1:
        raise ValueError("vector must be one-dimensional")
    outer = np.asarray(compressed.outer, dtype=np.intp)
    if outer.size and outer.max() >= values.size:
        raise ValueError(
            f"vector of size {values.size} too short for index {int(outer.max())}"
        )
    owners = np.repeat(
        np.arange(compressed.major, dtype=np.intp), np.diff(compressed.inner)
    )
    products = np.asarray(compressed.entries, dtype=float) * values[outer]
    return np.bincount(owners, weights=products, minlength=compressed.major).astype(
        float
    )


def csr_matvec(csr: Compressed, vector) -> np.ndarray:
    """Matrix times column vector, using row-compressed storage."""
    return _reduce(csr, vector)


def csc_vecmat(csc: Compressed, vector) -> np.ndarray:
    """Row vector times matrix, using column-compressed storage."""
    return _reduce(csc, vector)