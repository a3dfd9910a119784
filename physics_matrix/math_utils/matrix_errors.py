################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exception hierarchy for the dense matrix engine.

Each error kind also derives from the closest builtin exception so callers
that only know the standard library (``ValueError``, ``IndexError``...) can
still catch it.
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix engine errors."""


class InvalidDimensionError(MatrixError, ValueError):
    """Raised when a constructor receives a negative or empty shape."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when a row or column index is outside ``[0, extent)``."""


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible."""


class NotSquareError(MatrixError, ValueError):
    """Raised when a square-only operation is called on a non-square matrix."""


class UnsupportedOperationError(MatrixError, NotImplementedError):
    """Raised when a closed-form 2x2 operation is called on another size."""


class SingularMatrixError(MatrixError, ArithmeticError):
    """Raised when inverting a matrix whose determinant is exactly zero."""


class InvalidExponentError(MatrixError, ValueError):
    """Raised when ``power`` receives a negative or non-integer exponent."""


class MatrixValueError(MatrixError, TypeError):
    """Raised when a cell value is not a real number."""
