################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Dense matrix of double-precision values

Cells are stored as a list of rows, each a list of Python floats. Element
(r, c) lives at ``values[r][c]``. Every operation checks shapes and indices
before touching storage, so a failed call never leaves a partial update.

Operations fall in three groups:

    - Any-size arithmetic: add, subtract, multiply, scalar_multiply,
      transpose, norm
    - In-place elementary row operations: swap_rows, scale_row, add_rows.
      These are the building blocks of Gaussian elimination; elimination
      itself is left to callers.
    - Closed-form 2x2 operations: determinant, inverse, rotate, scale.
      Other sizes raise UnsupportedOperationError.

Equality is exact. Two matrices are equal only when every cell has the same
bit pattern (``nan`` equals ``nan``, ``0.0`` differs from ``-0.0``). Use
``is_close`` for tolerance comparisons.
"""

from __future__ import annotations

import logging
import math
import numbers
import struct
from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..config.matrix_params import MatrixParams
from .matrix_errors import DimensionMismatchError
from .matrix_errors import InvalidDimensionError
from .matrix_errors import InvalidExponentError
from .matrix_errors import NotSquareError
from .matrix_errors import SingularMatrixError
from .matrix_errors import UnsupportedOperationError
from .units import Angle
from .validation import Grid
from .validation import as_cell
from .validation import copy_grid
from .validation import require_dimension
from .validation import require_index


_LOG: logging.Logger = logging.getLogger(__name__)


# Bit pattern every NaN collapses to for equality and hashing
_CANONICAL_NAN_BITS: int = 0x7FF8000000000000

# Hash fold state is kept to 64 bits
_HASH_MASK: int = 0xFFFFFFFFFFFFFFFF


def _cell_bits(value: float) -> int:
    if math.isnan(value):
        return _CANONICAL_NAN_BITS
    bits: int = struct.unpack("<q", struct.pack("<d", value))[0]
    return bits


class Matrix:
    """Fixed-shape, mutable dense matrix of floats.

    Construct either a zero-filled matrix from a shape or a deep copy of
    existing data:

        Matrix(2, 3)
        Matrix([[1.0, 2.0], [3.0, 4.0]])

    Args:
        rows_or_data: Row count, or a non-empty grid of real numbers
        cols: Column count when ``rows_or_data`` is a row count
        params: Engine configuration, inherited by derived matrices

    Raises:
        InvalidDimensionError: If the shape is negative or the data is empty
            or jagged
        MatrixValueError: If a cell is not a real number
    """

    __slots__ = ("_rows", "_cols", "_values", "_params")

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(
        self,
        rows_or_data: int | Sequence[Sequence[float]] | NDArray[np.float64],
        cols: int | None = None,
        *,
        params: MatrixParams | None = None,
    ) -> None:
        if params is None:
            params = MatrixParams.defaults()
        else:
            params.validate()
        self._params: MatrixParams = params

        if cols is not None:
            self._rows: int = require_dimension(rows_or_data, "rows")
            self._cols: int = require_dimension(cols, "cols")
            self._values: Grid = [[0.0] * self._cols for _ in range(self._rows)]
            return

        data: Any = rows_or_data
        if isinstance(data, numbers.Integral):
            raise InvalidDimensionError("cols must be given with a row count")
        if isinstance(data, np.ndarray):
            if data.ndim != 2:
                raise InvalidDimensionError("Matrix data must be two-dimensional")
            data = data.tolist()

        # Deep copy so later mutation of either side is isolated
        grid: Grid = copy_grid(data, params.reject_jagged_rows)
        self._rows = len(grid)
        self._cols = len(grid[0])
        self._values = grid

    @classmethod
    def _wrap(cls, grid: Grid, cols: int, params: MatrixParams) -> Matrix:
        """Adopt a freshly built grid without copying it."""
        result: Matrix = cls.__new__(cls)
        result._params = params
        result._rows = len(grid)
        result._cols = cols
        result._values = grid
        return result

    #
    # Factories
    #

    @staticmethod
    def identity(size: int, *, params: MatrixParams | None = None) -> Matrix:
        """Return a ``size x size`` identity matrix.

        Raises:
            InvalidDimensionError: If ``size`` is negative
        """
        result: Matrix = Matrix(size, size, params=params)
        for i in range(result._rows):
            result._values[i][i] = 1.0
        return result

    @staticmethod
    def zero(rows: int, cols: int, *, params: MatrixParams | None = None) -> Matrix:
        """Return a zero-filled matrix, same as ``Matrix(rows, cols)``."""
        return Matrix(rows, cols, params=params)

    @staticmethod
    def rotation(
        angle_degrees: float, *, params: MatrixParams | None = None
    ) -> Matrix:
        """Return the 2x2 counter-clockwise rotation matrix for an angle.

        Args:
            angle_degrees: Rotation angle in degrees

        Returns:
            ``[[cos t, -sin t], [sin t, cos t]]`` with ``t`` in radians
        """
        cos_angle: float
        sin_angle: float
        cos_angle, sin_angle = Angle.rotation_terms(angle_degrees)
        return Matrix(
            [
                [cos_angle, -sin_angle],
                [sin_angle, cos_angle],
            ],
            params=params,
        )

    @staticmethod
    def scaling(
        scale_x: float, scale_y: float, *, params: MatrixParams | None = None
    ) -> Matrix:
        """Return the 2x2 diagonal scaling matrix ``[[sx, 0], [0, sy]]``."""
        return Matrix(
            [
                [scale_x, 0.0],
                [0.0, scale_y],
            ],
            params=params,
        )

    @classmethod
    def from_numpy(
        cls, array: NDArray[np.float64], *, params: MatrixParams | None = None
    ) -> Matrix:
        """Return a matrix holding a copy of a 2-D array.

        Raises:
            InvalidDimensionError: If the array is not 2-D or has no cells
        """
        arr: NDArray[np.float64] = np.asarray(array, dtype=np.float64)
        if arr.ndim != 2:
            raise InvalidDimensionError("array must be two-dimensional")
        if arr.size == 0:
            raise InvalidDimensionError("Matrix cannot be empty")
        return cls(arr.tolist(), params=params)

    #
    # Shape and element access
    #

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """The ``(rows, cols)`` pair."""
        return (self._rows, self._cols)

    @property
    def params(self) -> MatrixParams:
        """Engine configuration of this matrix."""
        return self._params

    def is_square(self) -> bool:
        """Return True when the matrix has as many rows as columns."""
        return self._rows == self._cols

    def get(self, row: int, col: int) -> float:
        """Return the value at ``(row, col)``.

        Raises:
            IndexOutOfRangeError: If either index is out of range
        """
        r: int = require_index(row, self._rows, "row")
        c: int = require_index(col, self._cols, "column")
        return self._values[r][c]

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the value at ``(row, col)``.

        Raises:
            IndexOutOfRangeError: If either index is out of range
            MatrixValueError: If ``value`` is not a real number
        """
        r: int = require_index(row, self._rows, "row")
        c: int = require_index(col, self._cols, "column")
        self._values[r][c] = as_cell(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row: int
        col: int
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row: int
        col: int
        row, col = key
        self.set(row, col, value)

    def row(self, index: int) -> list[float]:
        """Return a copy of one row."""
        r: int = require_index(index, self._rows, "row")
        return list(self._values[r])

    def column(self, index: int) -> list[float]:
        """Return a copy of one column."""
        c: int = require_index(index, self._cols, "column")
        return [values[c] for values in self._values]

    def copy(self) -> Matrix:
        """Return an independent deep copy."""
        return Matrix._wrap(
            [list(values) for values in self._values], self._cols, self._params
        )

    def to_list(self) -> list[list[float]]:
        """Return a deep copy of the cells as nested lists."""
        return [list(values) for values in self._values]

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the cells as a new ``float64`` array of shape ``(rows, cols)``."""
        return np.array(self._values, dtype=np.float64).reshape(
            (self._rows, self._cols)
        )

    #
    # Arithmetic
    #

    def _require_same_shape(self, other: Matrix, operation: str) -> None:
        if self._rows != other._rows or self._cols != other._cols:
            raise DimensionMismatchError(
                f"Matrix dimensions do not match for {operation}: "
                f"{self.shape} vs {other.shape}"
            )

    def add(self, other: Matrix) -> Matrix:
        """Return the element-wise sum.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        self._require_same_shape(other, "addition")
        grid: Grid = [
            [a + b for a, b in zip(lhs, rhs)]
            for lhs, rhs in zip(self._values, other._values)
        ]
        return Matrix._wrap(grid, self._cols, self._params)

    def subtract(self, other: Matrix) -> Matrix:
        """Return the element-wise difference ``self - other``.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        self._require_same_shape(other, "subtraction")
        grid: Grid = [
            [a - b for a, b in zip(lhs, rhs)]
            for lhs, rhs in zip(self._values, other._values)
        ]
        return Matrix._wrap(grid, self._cols, self._params)

    def multiply(self, other: Matrix) -> Matrix:
        """Return the matrix product ``self @ other``.

        Uses the straightforward triple loop, accumulating each dot product
        from 0.0 in column order.

        Args:
            other: Right operand with ``other.rows == self.cols``

        Returns:
            Product with shape ``(self.rows, other.cols)``

        Raises:
            DimensionMismatchError: If the inner dimensions differ
        """
        if self._cols != other._rows:
            raise DimensionMismatchError(
                "Matrix dimensions do not match for multiplication: "
                f"{self.shape} vs {other.shape}"
            )
        inner: int = self._cols
        out_cols: int = other._cols
        rhs: Grid = other._values
        grid: Grid = []
        for lhs_row in self._values:
            out_row: list[float] = [0.0] * out_cols
            for c in range(out_cols):
                total: float = 0.0
                for k in range(inner):
                    total += lhs_row[k] * rhs[k][c]
                out_row[c] = total
            grid.append(out_row)
        return Matrix._wrap(grid, out_cols, self._params)

    def scalar_multiply(self, scalar: float) -> Matrix:
        """Return a copy with every cell multiplied by ``scalar``."""
        factor: float = as_cell(scalar)
        grid: Grid = [[value * factor for value in values] for values in self._values]
        return Matrix._wrap(grid, self._cols, self._params)

    def transpose(self) -> Matrix:
        """Return the transpose, with shape ``(cols, rows)``."""
        grid: Grid = [
            [self._values[r][c] for r in range(self._rows)] for c in range(self._cols)
        ]
        return Matrix._wrap(grid, self._rows, self._params)

    def norm(self) -> float:
        """Return the Frobenius norm, the root of the sum of squared cells."""
        total: float = 0.0
        for values in self._values:
            for value in values:
                total += value * value
        return math.sqrt(total)

    def is_close(self, other: Matrix, tol: float = 1.0e-9) -> bool:
        """Return True when the norm of ``self - other`` is at most ``tol``.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        return self.subtract(other).norm() <= tol

    #
    # Elementary row operations
    #

    def swap_rows(self, row1: int, row2: int) -> None:
        """Exchange two rows in place.

        Raises:
            IndexOutOfRangeError: If either row index is out of range
        """
        r1: int = require_index(row1, self._rows, "row")
        r2: int = require_index(row2, self._rows, "row")
        self._values[r1], self._values[r2] = self._values[r2], self._values[r1]

    def scale_row(self, row: int, factor: float) -> None:
        """Multiply every entry of a row by ``factor`` in place.

        Raises:
            IndexOutOfRangeError: If the row index is out of range
        """
        r: int = require_index(row, self._rows, "row")
        scale: float = as_cell(factor)
        values: list[float] = self._values[r]
        for c in range(self._cols):
            values[c] *= scale

    def add_rows(self, row1: int, row2: int, factor: float) -> None:
        """Add ``factor`` times ``row2`` to ``row1`` in place.

        When both indices name the same row, that row is scaled by
        ``1 + factor``.

        Raises:
            IndexOutOfRangeError: If either row index is out of range
        """
        r1: int = require_index(row1, self._rows, "row")
        r2: int = require_index(row2, self._rows, "row")
        scale: float = as_cell(factor)
        target: list[float] = self._values[r1]
        source: list[float] = self._values[r2]
        for c in range(self._cols):
            target[c] += scale * source[c]

    #
    # Square and closed-form 2x2 operations
    #

    def _require_square(self, operation: str) -> None:
        if self._rows != self._cols:
            raise NotSquareError(
                f"Matrix must be square to compute {operation}, got {self.shape}"
            )

    def _require_2x2(self, operation: str) -> None:
        if self._rows != 2 or self._cols != 2:
            raise UnsupportedOperationError(
                f"{operation} is only implemented for 2x2 matrices, got {self.shape}"
            )

    def determinant(self) -> float:
        """Return the determinant of a 2x2 matrix.

        Raises:
            NotSquareError: If the matrix is not square
            UnsupportedOperationError: If the matrix is square but not 2x2
        """
        self._require_square("determinant")
        self._require_2x2("Determinant")
        a: float = self._values[0][0]
        b: float = self._values[0][1]
        c: float = self._values[1][0]
        d: float = self._values[1][1]
        return a * d - b * c

    def inverse(self) -> Matrix:
        """Return the inverse of a 2x2 matrix.

        Returns:
            ``[[d, -b], [-c, a]] / det`` for ``[[a, b], [c, d]]``

        Raises:
            NotSquareError: If the matrix is not square
            UnsupportedOperationError: If the matrix is square but not 2x2
            SingularMatrixError: If the determinant is exactly zero
        """
        self._require_square("inverse")
        self._require_2x2("Inverse")
        det: float = self.determinant()
        if det == 0.0:
            raise SingularMatrixError("Matrix is singular and cannot be inverted")
        a: float = self._values[0][0]
        b: float = self._values[0][1]
        c: float = self._values[1][0]
        d: float = self._values[1][1]
        grid: Grid = [
            [d / det, -b / det],
            [-c / det, a / det],
        ]
        return Matrix._wrap(grid, 2, self._params)

    def power(self, n: int) -> Matrix:
        """Return the matrix raised to a non-negative integer power.

        The identity is multiplied by the matrix ``n`` times in sequence, so
        the cost grows linearly with ``n``.

        Raises:
            NotSquareError: If the matrix is not square
            InvalidExponentError: If ``n`` is negative or not an int
        """
        self._require_square("power")
        if not isinstance(n, numbers.Integral) or isinstance(n, bool):
            raise InvalidExponentError("Exponent must be an int")
        if n < 0:
            raise InvalidExponentError(f"Exponent must be non-negative, got {n}")

        result: Matrix = Matrix.identity(self._rows, params=self._params)
        base: Matrix = self.copy()
        _LOG.debug("Raising %dx%d matrix to power %d", self._rows, self._cols, n)
        for _ in range(int(n)):
            result = result.multiply(base)
        return result

    def rotate(self, angle_degrees: float) -> Matrix:
        """Return ``self`` right-multiplied by a 2x2 rotation matrix.

        Raises:
            UnsupportedOperationError: If the matrix is not 2x2
        """
        self._require_2x2("Rotation")
        return self.multiply(Matrix.rotation(angle_degrees, params=self._params))

    def scale(self, scale_x: float, scale_y: float) -> Matrix:
        """Return ``self`` right-multiplied by a 2x2 scaling matrix.

        Raises:
            UnsupportedOperationError: If the matrix is not 2x2
        """
        self._require_2x2("Scaling")
        return self.multiply(Matrix.scaling(scale_x, scale_y, params=self._params))

    #
    # Operators
    #

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar: Any) -> Matrix:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scalar_multiply(scalar)

    def __rmul__(self, scalar: Any) -> Matrix:
        """Scale from the left, e.g. ``2.0 * m`` or ``np.float64(2.0) * m``."""
        return self.__mul__(scalar)

    def __neg__(self) -> Matrix:
        return self.scalar_multiply(-1.0)

    #
    # Equality, hashing and formatting
    #

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        for lhs, rhs in zip(self._values, other._values):
            for a, b in zip(lhs, rhs):
                if _cell_bits(a) != _cell_bits(b):
                    return False
        return True

    def __hash__(self) -> int:
        # Mutating a cell changes the hash, so do not mutate dict keys
        h: int = 1
        for values in self._values:
            for value in values:
                h = (31 * h + _cell_bits(value)) & _HASH_MASK
        return hash((self._rows, self._cols, h))

    def __str__(self) -> str:
        precision: int = self._params.format_precision
        return "\n".join(
            " ".join(f"{value:.{precision}f}" for value in values)
            for values in self._values
        )

    def __repr__(self) -> str:
        if self._rows == 0 or self._cols == 0:
            return f"Matrix.zero({self._rows}, {self._cols})"
        return f"Matrix({self._values!r})"
