################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import pytest

from physics_matrix.math_utils.matrix import Matrix
from physics_matrix.math_utils.matrix_errors import IndexOutOfRangeError


def _grid() -> list[list[float]]:
    return [
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [7.0, 8.0, 9.0],
    ]


def test_swap_rows_exchanges_contents() -> None:
    mat: Matrix = Matrix(_grid())
    mat.swap_rows(0, 2)

    assert mat.to_list() == [
        [7.0, 8.0, 9.0],
        [4.0, 5.0, 6.0],
        [1.0, 2.0, 3.0],
    ]


def test_swap_rows_with_itself_is_noop() -> None:
    mat: Matrix = Matrix(_grid())
    mat.swap_rows(0, 0)

    assert mat == Matrix(_grid())


def test_swap_rows_rejects_bad_index_without_mutation() -> None:
    mat: Matrix = Matrix(_grid())

    with pytest.raises(IndexOutOfRangeError):
        mat.swap_rows(0, 3)
    with pytest.raises(IndexOutOfRangeError):
        mat.swap_rows(-1, 1)

    assert mat == Matrix(_grid())


def test_scale_row_in_place() -> None:
    mat: Matrix = Matrix(_grid())
    mat.scale_row(1, 0.5)

    assert mat.row(1) == [2.0, 2.5, 3.0]
    assert mat.row(0) == [1.0, 2.0, 3.0]


def test_scale_row_by_zero_zeroes_row() -> None:
    mat: Matrix = Matrix(_grid())
    mat.scale_row(2, 0.0)

    assert mat.row(2) == [0.0, 0.0, 0.0]


def test_scale_row_rejects_bad_index() -> None:
    mat: Matrix = Matrix(_grid())

    with pytest.raises(IndexOutOfRangeError):
        mat.scale_row(3, 2.0)

    assert mat == Matrix(_grid())


def test_add_rows_adds_multiple() -> None:
    mat: Matrix = Matrix(_grid())
    mat.add_rows(1, 0, -4.0)

    assert mat.row(1) == [0.0, -3.0, -6.0]
    assert mat.row(0) == [1.0, 2.0, 3.0]


def test_add_rows_same_row_doubles() -> None:
    mat: Matrix = Matrix(_grid())
    mat.add_rows(2, 2, 1.0)

    assert mat.row(2) == [14.0, 16.0, 18.0]


def test_add_rows_rejects_bad_index_without_mutation() -> None:
    mat: Matrix = Matrix(_grid())

    with pytest.raises(IndexOutOfRangeError):
        mat.add_rows(0, 5, 1.0)
    with pytest.raises(IndexOutOfRangeError):
        mat.add_rows(5, 0, 1.0)

    assert mat == Matrix(_grid())


def test_row_ops_reduce_to_upper_triangular() -> None:
    # Caller-side forward elimination on a 3x3 system
    mat: Matrix = Matrix(
        [
            [0.0, 2.0, 1.0],
            [1.0, 1.0, 1.0],
            [2.0, 1.0, 3.0],
        ]
    )
    mat.swap_rows(0, 1)
    mat.add_rows(2, 0, -2.0)
    mat.scale_row(1, 0.5)
    mat.add_rows(2, 1, 1.0)

    assert mat.to_list() == [
        [1.0, 1.0, 1.0],
        [0.0, 1.0, 0.5],
        [0.0, 0.0, 1.5],
    ]


def test_row_ops_on_rectangular_matrix() -> None:
    mat: Matrix = Matrix([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    mat.swap_rows(0, 2)
    mat.scale_row(0, 2.0)
    mat.add_rows(1, 0, 1.0)

    assert mat.to_list() == [[10.0, 12.0], [13.0, 16.0], [1.0, 2.0]]
