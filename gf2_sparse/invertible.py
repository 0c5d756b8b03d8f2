# -*- coding: utf-8 -*-
"""
invertible.py
  - Builds a random invertible sparse matrix A together with its exact
    inverse B, without Gaussian elimination.
  - A starts as the identity and is right-multiplied by elementary column
    operations E_1, E_2, ...; B = ... E_2^-1 E_1^-1 is tracked through its
    transpose BT, to which every operation is applied with its arguments
    reversed:
        swap(i, j) on A   <->   swap(j, i) on BT
        add(i, j)  on A   <->   add(j, i)  on BT
  - Both operations are self-inverse over GF(2), so A * B = I holds after
    every step. verify() checks it with a sparse product.
"""

from typing import NamedTuple, Optional, Sequence

import numpy as np

from .sparse import SparseMatrix, make_rng, multiply, transpose
from .vectors import ColumnVectorMatrix


class Operation(NamedTuple):
    """Logged elementary column operation on A ("swap" or "add")."""
    kind: str
    i: int
    j: int


class InvertibleBuilder:
    """
    Args:
        n: Dimension of the square matrices.
        rng: NumPy Generator for the random operations.
        seed: Seed for a fresh Generator when rng is None.
    """

    def __init__(self, n: int, rng: Optional[np.random.Generator] = None, seed=None):
        if n < 0:
            raise ValueError(f"dimension must be non-negative, got {n}")
        self.n = n
        self.rng = make_rng(rng, seed)
        self.a = ColumnVectorMatrix.identity(n)
        self.bt = ColumnVectorMatrix.identity(n)
        self.log: list[Operation] = []

    def swap(self, i: int, j: int) -> None:
        self.a.swap(i, j)
        self.bt.swap(j, i)
        self.log.append(Operation("swap", i, j))

    def add(self, i: int, j: int) -> None:
        self.a.add(i, j)
        self.bt.add(j, i)
        self.log.append(Operation("add", i, j))

    def _distinct_pair(self) -> tuple[int, int]:
        if self.n < 2:
            raise ValueError(f"random column operations need n >= 2, got {self.n}")
        i = int(self.rng.integers(self.n))
        j = int(self.rng.integers(self.n))
        while i == j:
            j = int(self.rng.integers(self.n))
        return i, j

    def random_swap(self) -> Operation:
        self.swap(*self._distinct_pair())
        return self.log[-1]

    def random_add(self) -> Operation:
        self.add(*self._distinct_pair())
        return self.log[-1]

    def scramble(self, n_swaps: Optional[int] = None, n_adds: Optional[int] = None) -> "InvertibleBuilder":
        """
        Applies n_swaps random swaps followed by n_adds random additions.

        Args:
            n_swaps: Defaults to n (0 when n < 2).
            n_adds: Defaults to n // 2 (0 when n < 2).

        Returns:
            self, for chaining.
        """
        if n_swaps is None:
            n_swaps = self.n if self.n >= 2 else 0
        if n_adds is None:
            n_adds = self.n // 2 if self.n >= 2 else 0
        for _ in range(n_swaps):
            self.random_swap()
        for _ in range(n_adds):
            self.random_add()
        return self

    def replay(self, ops: Sequence[Operation]) -> "InvertibleBuilder":
        """Applies a previously logged operation sequence."""
        for kind, i, j in ops:
            if kind == "swap":
                self.swap(i, j)
            elif kind == "add":
                self.add(i, j)
            else:
                raise ValueError(f"unknown operation {kind!r}")
        return self

    def matrix(self) -> SparseMatrix:
        return self.a.convert_matrix()

    def inverse(self) -> SparseMatrix:
        return transpose(self.bt.convert_matrix())

    def verify(self) -> bool:
        """True iff matrix() * inverse() is the identity over GF(2)."""
        return multiply(self.matrix(), self.inverse()).is_identity()


def random_invertible_pair(n: int, rng: Optional[np.random.Generator] = None, seed=None,
                           n_swaps: Optional[int] = None,
                           n_adds: Optional[int] = None) -> tuple[SparseMatrix, SparseMatrix]:
    """
    Random invertible matrix and its inverse.

    Args:
        n: Dimension.
        rng, seed: Random source, see InvertibleBuilder.
        n_swaps, n_adds: Operation counts, see InvertibleBuilder.scramble.

    Returns:
        (A, B) with A * B = I over GF(2).
    """
    builder = InvertibleBuilder(n, rng=rng, seed=seed).scramble(n_swaps, n_adds)
    return builder.matrix(), builder.inverse()
