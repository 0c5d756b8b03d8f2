# -*- coding: utf-8 -*-
"""
sparse.py
  - Coordinate-list (COO) sparse matrices over GF(2).
  - The entry list is a multiset: a coordinate is one iff it occurs an odd
    number of times. remove_duplicates() folds the list into canonical form
    (sorted row-major, every coordinate at most once).
  - transpose(), concatenate() and multiply() never touch their operands and
    always return a fresh canonical matrix.
  - multiply() is a merge-join of the row groups of the left operand against
    the column groups of the right operand over the shared inner index.
"""

import operator
from typing import Iterable, Iterator, NamedTuple, Optional

import numpy as np
from scipy import sparse as sp

from .errors import DimensionMismatch, OutOfRange


class Coordinate(NamedTuple):
    """Position (row, col) of a one-entry. Tuple order is row-major."""
    row: int
    col: int


def by_col_row(c: Coordinate) -> tuple[int, int]:
    """Column-major sort key."""
    return c.col, c.row


def make_rng(rng: Optional[np.random.Generator] = None, seed=None) -> np.random.Generator:
    """
    Returns the random source used by the random constructors.

    Args:
        rng: An existing NumPy Generator, used as is.
        seed: Seed for np.random.default_rng when rng is not given.

    Returns:
        np.random.Generator.
    """
    if rng is not None and seed is not None:
        raise ValueError("pass either rng or seed, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def _fold_parity(ones: Iterable[Coordinate]) -> list[Coordinate]:
    # Runs of equal coordinates cancel in pairs after sorting.
    out: list[Coordinate] = []
    for c in sorted(ones):
        if out and out[-1] == c:
            out.pop()
        else:
            out.append(c)
    return out


class SparseMatrix:
    """
    Binary matrix stored as the list of its one-entries.

    Args:
        rows, cols: Declared shape.
        ones: Optional initial entries, bounds-checked like add_unchecked().
    """

    __slots__ = ("rows", "cols", "ones")

    def __init__(self, rows: int, cols: int, ones: Optional[Iterable[tuple[int, int]]] = None):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix shape must be non-negative, got ({rows}, {cols})")
        self.rows = int(rows)
        self.cols = int(cols)
        self.ones: list[Coordinate] = []
        if ones is not None:
            for row, col in ones:
                self.add_unchecked(row, col)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def copy(self) -> "SparseMatrix":
        other = object.__new__(self.__class__)
        other.rows = self.rows
        other.cols = self.cols
        other.ones = self.ones.copy()
        return other

    def add_unchecked(self, row: int, col: int) -> None:
        """
        Appends a one-entry without cancelling against existing entries.

        "Unchecked" refers to duplicates only: the position itself is
        validated.

        Raises:
            OutOfRange: row or col lies outside the matrix shape.
            TypeError: row or col is not an integer.
        """
        row = operator.index(row)
        col = operator.index(col)
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols:
            raise OutOfRange(f"({row}, {col}) outside {self.rows}x{self.cols} matrix")
        self.ones.append(Coordinate(row, col))

    def remove_duplicates(self) -> "SparseMatrix":
        """
        Folds the entry list into canonical form in place.

        Coordinates inserted an odd number of times survive once, those
        inserted an even number of times vanish (addition over GF(2)).

        Returns:
            self, for chaining.
        """
        self.ones = _fold_parity(self.ones)
        return self

    def is_canonical(self) -> bool:
        ones = self.ones
        return all(ones[k] < ones[k + 1] for k in range(len(ones) - 1))

    def _canonical(self) -> list[Coordinate]:
        if self.is_canonical():
            return self.ones.copy()
        return _fold_parity(self.ones)

    def __iter__(self) -> Iterator[Coordinate]:
        """Yields the canonical one-entries in row-major order."""
        return iter(self._canonical())

    ones_iter = __iter__

    def hamming_weight(self) -> int:
        return len(self._canonical())

    def hamming_weights_of_rows(self) -> np.ndarray:
        """
        Returns:
            1-D int array of length rows with the one-count of each row.
        """
        rows = np.fromiter((c.row for c in self._canonical()), dtype=np.int64)
        return np.bincount(rows, minlength=self.rows)

    def hamming_weights_of_cols(self) -> np.ndarray:
        """
        Returns:
            1-D int array of length cols with the one-count of each column.
        """
        cols = np.fromiter((c.col for c in self._canonical()), dtype=np.int64)
        return np.bincount(cols, minlength=self.cols)

    def is_identity(self) -> bool:
        """True iff the matrix is square and its ones are exactly the diagonal."""
        if self.rows != self.cols:
            return False
        ones = self._canonical()
        if len(ones) != self.cols:
            return False
        return all(c.row == k and c.col == k for k, c in enumerate(ones))

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self._canonical() == other._canonical()

    __hash__ = None

    def __repr__(self):
        return f"SparseMatrix(rows={self.rows}, cols={self.cols}, nnz={len(self.ones)})"

    # ==== scipy interop ====
    def to_scipy(self) -> sp.csr_matrix:
        """
        Returns:
            CSR matrix of dtype uint8 holding the canonical ones.
        """
        ones = self._canonical()
        rows = np.fromiter((c.row for c in ones), dtype=np.int64, count=len(ones))
        cols = np.fromiter((c.col for c in ones), dtype=np.int64, count=len(ones))
        data = np.ones(len(ones), dtype=np.uint8)
        return sp.csr_matrix((data, (rows, cols)), shape=self.shape)

    @classmethod
    def from_scipy(cls, M) -> "SparseMatrix":
        """
        Builds a matrix from the mod-2 pattern of a SciPy sparse matrix or
        a dense array.

        Args:
            M: Anything scipy.sparse.coo_matrix accepts, integer or bool valued.

        Returns:
            Canonical SparseMatrix of the same shape.
        """
        C = sp.coo_matrix(M)
        C.sum_duplicates()
        odd = (C.data.astype(np.int64) % 2) != 0
        out = cls(*C.shape)
        out.ones = [Coordinate(int(r), int(c)) for r, c in zip(C.row[odd], C.col[odd])]
        return out.remove_duplicates()


# =========================
# Constructors
# =========================
def identity_matrix(n: int) -> SparseMatrix:
    m = SparseMatrix(n, n)
    m.ones = [Coordinate(i, i) for i in range(n)]
    return m


def random_sparse_matrix(rows: int, cols: int, n_ones: int,
                         rng: Optional[np.random.Generator] = None, seed=None) -> SparseMatrix:
    """
    Inserts n_ones uniformly drawn coordinates and canonicalizes.

    Coordinates drawn twice cancel, so the weight can be below n_ones.

    Args:
        rows, cols: Shape.
        n_ones: Number of random insertions.
        rng: NumPy Generator; seed is used when it is None.
        seed: Seed for a fresh Generator.

    Returns:
        Canonical SparseMatrix.
    """
    if n_ones < 0:
        raise ValueError(f"n_ones must be non-negative, got {n_ones}")
    m = SparseMatrix(rows, cols)
    if n_ones == 0:
        return m
    if rows == 0 or cols == 0:
        raise ValueError(f"cannot place ones in an empty {rows}x{cols} matrix")
    rng = make_rng(rng, seed)
    rr = rng.integers(0, rows, n_ones)
    cc = rng.integers(0, cols, n_ones)
    for r, c in zip(rr.tolist(), cc.tolist()):
        m.add_unchecked(r, c)
    return m.remove_duplicates()


# =========================
# Structural operations
# =========================
def transpose(M: SparseMatrix) -> SparseMatrix:
    out = SparseMatrix(M.cols, M.rows)
    out.ones = [Coordinate(c.col, c.row) for c in M.ones]
    return out.remove_duplicates()


def concatenate(left: SparseMatrix, right: SparseMatrix) -> SparseMatrix:
    """
    Places right to the right of left: [left | right].

    Raises:
        DimensionMismatch: The operands have different row counts.
    """
    if left.rows != right.rows:
        raise DimensionMismatch(f"left.rows != right.rows ({left.rows} != {right.rows})")
    out = SparseMatrix(left.rows, left.cols + right.cols)
    shift = left.cols
    out.ones = left.ones + [Coordinate(c.row, c.col + shift) for c in right.ones]
    return out.remove_duplicates()


def min_max(weights) -> tuple[int, int]:
    """(min, max) of a weight vector; (0, 0) when it is empty."""
    a = np.asarray(weights)
    if a.size == 0:
        return 0, 0
    return int(a.min()), int(a.max())


# ==== GF(2) product ====
def _column_groups(ones: list[Coordinate]) -> list[tuple[int, int, int]]:
    # (col, begin, end) for each run of a column-major sorted entry list
    groups = []
    begin = 0
    while begin < len(ones):
        col = ones[begin].col
        end = begin + 1
        while end < len(ones) and ones[end].col == col:
            end += 1
        groups.append((col, begin, end))
        begin = end
    return groups


def multiply(left: SparseMatrix, right: SparseMatrix) -> SparseMatrix:
    """
    Sparse matrix product over GF(2).

    Entry (r, c) of the result is one iff an odd number of k satisfy
    left[r, k] = right[k, c] = 1. Both operands are canonicalized into
    private copies, left sorted row-major and right column-major, so each
    (row group, column group) pair is a linear merge on the inner index.

    Args:
        left: Matrix of shape (m, k).
        right: Matrix of shape (k, n).

    Returns:
        Canonical SparseMatrix of shape (m, n), sorted row-major.

    Raises:
        DimensionMismatch: left.cols != right.rows.
    """
    if left.cols != right.rows:
        raise DimensionMismatch(f"left.cols != right.rows ({left.cols} != {right.rows})")
    lhs = left._canonical()
    rhs = sorted(right._canonical(), key=by_col_row)
    col_groups = _column_groups(rhs)

    product = SparseMatrix(left.rows, right.cols)
    out = product.ones
    n_l = len(lhs)
    l_begin = 0
    while l_begin < n_l:
        row = lhs[l_begin].row
        l_end = l_begin + 1
        while l_end < n_l and lhs[l_end].row == row:
            l_end += 1
        for col, r_begin, r_end in col_groups:
            parity = False
            l, r = l_begin, r_begin
            while l < l_end and r < r_end:
                inner_l = lhs[l].col
                inner_r = rhs[r].row
                if inner_l < inner_r:
                    l += 1
                elif inner_l > inner_r:
                    r += 1
                else:
                    parity = not parity
                    l += 1
                    r += 1
            if parity:
                out.append(Coordinate(row, col))
        l_begin = l_end
    return product
