################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for matrix validation helpers."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from physics_matrix.math_utils.matrix_errors import IndexOutOfRangeError
from physics_matrix.math_utils.matrix_errors import InvalidDimensionError
from physics_matrix.math_utils.matrix_errors import MatrixError
from physics_matrix.math_utils.matrix_errors import MatrixValueError
from physics_matrix.math_utils.validation import as_cell
from physics_matrix.math_utils.validation import copy_grid
from physics_matrix.math_utils.validation import require_dimension
from physics_matrix.math_utils.validation import require_index


def test_require_dimension() -> None:
    """Checks dimensions accept non-negative ints only."""
    assert require_dimension(0, "rows") == 0
    assert require_dimension(np.int64(4), "rows") == 4
    with pytest.raises(InvalidDimensionError, match="rows"):
        require_dimension(-1, "rows")
    with pytest.raises(InvalidDimensionError):
        require_dimension(False, "rows")


def test_require_index_bounds() -> None:
    """Checks indices must lie in [0, extent)."""
    assert require_index(0, 1, "row") == 0
    assert require_index(2, 3, "row") == 2
    for bad in (-1, 3, 1.0, None):
        with pytest.raises(IndexOutOfRangeError):
            require_index(bad, 3, "row")
    with pytest.raises(IndexOutOfRangeError):
        require_index(0, 0, "row")


def test_as_cell() -> None:
    """Checks real numbers are coerced to float."""
    assert as_cell(3) == 3.0
    assert isinstance(as_cell(np.float32(1.5)), float)
    assert as_cell(True) == 1.0
    assert as_cell(float("inf")) == float("inf")
    with pytest.raises(MatrixValueError):
        as_cell(1 + 2j)
    with pytest.raises(MatrixValueError):
        as_cell("1")


def test_copy_grid_isolated() -> None:
    """Checks copy_grid produces new row lists."""
    data: list[list[float]] = [[1.0, 2.0], [3.0, 4.0]]
    grid: list[list[float]] = copy_grid(data, reject_jagged_rows=True)
    assert grid == data
    assert grid[0] is not data[0]


def test_copy_grid_padding_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Checks padded rows emit a debug record."""
    with caplog.at_level(logging.DEBUG, logger="physics_matrix.math_utils.validation"):
        grid: list[list[float]] = copy_grid([[1.0, 2.0], []], reject_jagged_rows=False)
    assert grid == [[1.0, 2.0], [0.0, 0.0]]
    assert "Padding matrix row 1" in caplog.text


def test_errors_share_base_class() -> None:
    """Checks every engine error is a MatrixError."""
    with pytest.raises(MatrixError):
        copy_grid([], reject_jagged_rows=True)
    with pytest.raises(MatrixError):
        require_index(9, 1, "col")
    with pytest.raises(MatrixError):
        as_cell(None)


def test_as_cell_out_of_float_range() -> None:
    """Checks oversized ints raise MatrixValueError, not OverflowError."""
    with pytest.raises(MatrixValueError, match="float range"):
        as_cell(10**400)
