# -*- coding: utf-8 -*-
"""
vectors.py
  - SparseVector: sorted index set of one row or column over GF(2); the sum
    of two vectors is their symmetric difference.
  - ColumnVectorMatrix: a matrix held as one SparseVector per column, for
    cheap elementary column operations (swap, add).
"""

from typing import Iterable, Iterator, Optional

import numpy as np

from .errors import DimensionMismatch, OutOfRange
from .sparse import Coordinate, SparseMatrix


class SparseVector:
    """
    Args:
        dimension: Length of the dense vector this represents.
        indices: Positions of the ones. Repeated positions cancel in pairs.
    """

    __slots__ = ("dimension", "indices")

    def __init__(self, dimension: int, indices: Optional[Iterable[int]] = None):
        if dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {dimension}")
        self.dimension = int(dimension)
        idx = np.fromiter(indices if indices is not None else (), dtype=np.int64)
        if idx.size and (idx.min() < 0 or idx.max() >= dimension):
            raise OutOfRange(f"indices outside [0, {dimension})")
        values, counts = np.unique(idx, return_counts=True)
        self.indices: np.ndarray = values[counts % 2 == 1]

    @classmethod
    def _from_sorted(cls, dimension: int, indices: np.ndarray) -> "SparseVector":
        v = object.__new__(cls)
        v.dimension = dimension
        v.indices = indices
        return v

    def __add__(self, other: "SparseVector") -> "SparseVector":
        if not isinstance(other, SparseVector):
            return NotImplemented
        if self.dimension != other.dimension:
            raise DimensionMismatch(f"vector dimensions differ ({self.dimension} != {other.dimension})")
        return self._from_sorted(self.dimension, np.setxor1d(self.indices, other.indices, assume_unique=True))

    def __len__(self) -> int:
        return int(self.indices.size)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices.tolist())

    def __contains__(self, index) -> bool:
        k = np.searchsorted(self.indices, index)
        return bool(k < self.indices.size and self.indices[k] == index)

    def __eq__(self, other):
        if not isinstance(other, SparseVector):
            return NotImplemented
        return self.dimension == other.dimension and np.array_equal(self.indices, other.indices)

    __hash__ = None

    def __repr__(self):
        return f"SparseVector({self.dimension}, {self.indices.tolist()})"


class ColumnVectorMatrix:
    """
    Matrix stored column by column: columns[j] holds the sorted row indices
    of the ones in column j.
    """

    __slots__ = ("rows", "cols", "columns")

    def __init__(self, rows: int, cols: int, columns: Optional[list[SparseVector]] = None):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix shape must be non-negative, got ({rows}, {cols})")
        self.rows = int(rows)
        self.cols = int(cols)
        if columns is None:
            columns = [SparseVector(rows) for _ in range(cols)]
        if len(columns) != cols:
            raise DimensionMismatch(f"expected {cols} columns, got {len(columns)}")
        for v in columns:
            if v.dimension != rows:
                raise DimensionMismatch(f"column of dimension {v.dimension} in a matrix with {rows} rows")
        self.columns = list(columns)

    @classmethod
    def identity(cls, n: int) -> "ColumnVectorMatrix":
        return cls(n, n, [SparseVector._from_sorted(n, np.array([j], dtype=np.int64)) for j in range(n)])

    @classmethod
    def from_matrix(cls, M: SparseMatrix) -> "ColumnVectorMatrix":
        """Column view of a SparseMatrix (entries parity-folded)."""
        per_col: list[list[int]] = [[] for _ in range(M.cols)]
        for c in M.ones:
            per_col[c.col].append(c.row)
        return cls(M.rows, M.cols, [SparseVector(M.rows, rows) for rows in per_col])

    def _check_col(self, j: int) -> None:
        if j < 0 or j >= self.cols:
            raise OutOfRange(f"column {j} outside [0, {self.cols})")

    def swap(self, i: int, j: int) -> None:
        """Exchanges columns i and j. Swapping a column with itself is a no-op."""
        self._check_col(i)
        self._check_col(j)
        self.columns[i], self.columns[j] = self.columns[j], self.columns[i]

    def add(self, i: int, j: int) -> None:
        """
        Replaces column i with column i + column j (mod 2).

        Raises:
            OutOfRange: i or j outside [0, cols).
            ValueError: i == j, which would zero the column.
        """
        self._check_col(i)
        self._check_col(j)
        if i == j:
            raise ValueError(f"cannot add column {i} to itself")
        self.columns[i] = self.columns[i] + self.columns[j]

    def hamming_weight(self) -> int:
        return sum(len(v) for v in self.columns)

    def convert_matrix(self) -> SparseMatrix:
        """
        Returns:
            Canonical SparseMatrix with the same ones, sorted row-major.
        """
        M = SparseMatrix(self.rows, self.cols)
        M.ones = [Coordinate(r, j) for j, v in enumerate(self.columns) for r in v]
        M.ones.sort()
        return M

    def is_identity(self) -> bool:
        if self.rows != self.cols:
            return False
        return all(len(v) == 1 and int(v.indices[0]) == j for j, v in enumerate(self.columns))

    def __repr__(self):
        return f"ColumnVectorMatrix(rows={self.rows}, cols={self.cols}, nnz={self.hamming_weight()})"
