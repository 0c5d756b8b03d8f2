"""Sparse matrix algebra over GF(2)."""

from .errors import DimensionMismatch, OutOfRange
from .sparse import (Coordinate, SparseMatrix, by_col_row, concatenate, identity_matrix,
                     min_max, multiply, random_sparse_matrix, transpose)
from .vectors import ColumnVectorMatrix, SparseVector
from .invertible import InvertibleBuilder, Operation, random_invertible_pair

__all__ = [
    "DimensionMismatch", "OutOfRange",
    "Coordinate", "SparseMatrix", "by_col_row", "concatenate", "identity_matrix",
    "min_max", "multiply", "random_sparse_matrix", "transpose",
    "ColumnVectorMatrix", "SparseVector",
    "InvertibleBuilder", "Operation", "random_invertible_pair",
]
