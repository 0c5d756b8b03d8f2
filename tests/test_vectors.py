"""Tests for SparseVector and ColumnVectorMatrix."""

import pytest

from gf2_sparse import (ColumnVectorMatrix, DimensionMismatch, OutOfRange, SparseMatrix,
                        SparseVector, random_sparse_matrix)


def test_vector_folds_repeats():
    v = SparseVector(6, [5, 3, 1, 3, 3])
    assert list(v) == [1, 3, 5]
    assert len(v) == 3
    assert 3 in v and 4 not in v
    assert list(SparseVector(6, [2, 2])) == []


def test_vector_sum_is_symmetric_difference():
    u = SparseVector(6, [0, 1, 2])
    v = SparseVector(6, [1, 2, 4])
    assert list(u + v) == [0, 4]
    assert u + v == v + u
    assert len(u + u) == 0
    assert list(u) == [0, 1, 2]


def test_vector_errors():
    with pytest.raises(OutOfRange):
        SparseVector(3, [3])
    with pytest.raises(OutOfRange):
        SparseVector(3, [-1])
    with pytest.raises(DimensionMismatch):
        SparseVector(3, [0]) + SparseVector(4, [0])


def test_identity_columns():
    I = ColumnVectorMatrix.identity(3)
    assert I.is_identity()
    assert I.hamming_weight() == 3
    assert I.convert_matrix().is_identity()


def test_swap():
    M = ColumnVectorMatrix.identity(3)
    M.swap(0, 2)
    assert M.convert_matrix().ones == [(0, 2), (1, 1), (2, 0)]
    assert not M.is_identity()
    M.swap(2, 0)
    assert M.is_identity()
    M.swap(1, 1)
    assert M.is_identity()


def test_add():
    M = ColumnVectorMatrix.identity(3)
    M.add(0, 1)
    assert M.convert_matrix().ones == [(0, 0), (1, 0), (1, 1), (2, 2)]
    M.add(0, 1)
    assert M.is_identity()


def test_column_operation_errors():
    M = ColumnVectorMatrix.identity(3)
    with pytest.raises(OutOfRange):
        M.swap(0, 3)
    with pytest.raises(OutOfRange):
        M.add(-1, 0)
    with pytest.raises(ValueError):
        M.add(1, 1)
    assert M.is_identity()


def test_from_matrix_round_trip(fx_rng):
    S = random_sparse_matrix(8, 5, 20, rng=fx_rng)
    C = ColumnVectorMatrix.from_matrix(S)
    assert (C.rows, C.cols) == (8, 5)
    assert C.convert_matrix() == S
    assert C.convert_matrix().is_canonical()


def test_from_matrix_cancels_pairs():
    S = SparseMatrix(2, 2, [(0, 0), (1, 1), (0, 0)])
    assert ColumnVectorMatrix.from_matrix(S).convert_matrix().ones == [(1, 1)]


def test_negative_column_matrix_shape_rejected():
    with pytest.raises(ValueError):
        ColumnVectorMatrix(-3, 0)
    with pytest.raises(ValueError):
        ColumnVectorMatrix(2, -1)


def test_non_square_is_not_identity():
    assert not ColumnVectorMatrix(2, 3).is_identity()
    with pytest.raises(DimensionMismatch):
        ColumnVectorMatrix(2, 2, [SparseVector(2)])
