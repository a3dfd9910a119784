################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for matrix shapes, indices and cell values."""

from __future__ import annotations

import logging
import numbers
from typing import Any
from typing import Sequence

import numpy as np

from .matrix_errors import IndexOutOfRangeError
from .matrix_errors import InvalidDimensionError
from .matrix_errors import MatrixValueError


_LOG: logging.Logger = logging.getLogger(__name__)


Grid = list[list[float]]


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def require_dimension(value: Any, name: str) -> int:
    """Return a validated non-negative dimension.

    Raises:
        InvalidDimensionError: If the value is not an int or is negative
    """
    if not _is_int(value):
        raise InvalidDimensionError(f"{name} must be an int")
    size: int = int(value)
    if size < 0:
        raise InvalidDimensionError(f"{name} must be non-negative, got {size}")
    return size


def require_index(index: Any, extent: int, name: str) -> int:
    """Return a validated index in ``[0, extent)``.

    Negative indices are rejected rather than wrapped.

    Raises:
        IndexOutOfRangeError: If the index is not an int or is out of range
    """
    if not _is_int(index):
        raise IndexOutOfRangeError(f"{name} must be an int")
    value: int = int(index)
    if value < 0 or value >= extent:
        raise IndexOutOfRangeError(
            f"Invalid {name} index: {value} (extent {extent})"
        )
    return value


def as_cell(value: Any) -> float:
    """Coerce a real number to a float cell value.

    Raises:
        MatrixValueError: If the value is not a real number
    """
    if not isinstance(value, numbers.Real):
        raise MatrixValueError(
            f"matrix values must be real numbers, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as exc:
        raise MatrixValueError(f"matrix value out of float range: {exc}") from exc


def _as_row(row: Any, index: int) -> Sequence[Any]:
    """Return a row as a sequence, unpacking 1-D numpy arrays."""
    if isinstance(row, np.ndarray):
        if row.ndim != 1:
            raise InvalidDimensionError(f"Matrix row {index} must be one-dimensional")
        return row.tolist()
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise InvalidDimensionError(f"Matrix row {index} must be a sequence")
    return row


def copy_grid(data: Sequence[Sequence[Any]], reject_jagged_rows: bool) -> Grid:
    """Return a deep copy of ``data`` as a rectangular grid of floats.

    The first row fixes the column count. When ``reject_jagged_rows`` is
    False, shorter rows are zero-padded to that width; longer rows are
    always rejected. Rows may be sequences or 1-D numpy arrays.

    Raises:
        InvalidDimensionError: If ``data`` is empty, its first row is empty,
            or a row has the wrong width
        MatrixValueError: If a cell is not a real number
    """
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise InvalidDimensionError("Matrix data must be a sequence of rows")
    if len(data) == 0:
        raise InvalidDimensionError("Matrix cannot be empty")
    rows: list[Sequence[Any]] = [_as_row(row, r) for r, row in enumerate(data)]
    cols: int = len(rows[0])
    if cols == 0:
        raise InvalidDimensionError("Matrix cannot be empty")

    grid: Grid = []
    for r, row in enumerate(rows):
        width: int = len(row)
        if width > cols or (width < cols and reject_jagged_rows):
            raise InvalidDimensionError(
                f"Matrix row {r} has {width} entries, expected {cols}"
            )
        copied: list[float] = [as_cell(value) for value in row]
        if width < cols:
            _LOG.debug("Padding matrix row %d from %d to %d entries", r, width, cols)
            copied.extend([0.0] * (cols - width))
        grid.append(copied)
    return grid
