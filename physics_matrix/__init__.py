################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrix engine with shape-checked operations."""

from __future__ import annotations

from physics_matrix.config.matrix_params import MatrixParams
from physics_matrix.config.matrix_params import MatrixParamsError
from physics_matrix.math_utils.matrix import Matrix
from physics_matrix.math_utils.matrix_errors import DimensionMismatchError
from physics_matrix.math_utils.matrix_errors import IndexOutOfRangeError
from physics_matrix.math_utils.matrix_errors import InvalidDimensionError
from physics_matrix.math_utils.matrix_errors import InvalidExponentError
from physics_matrix.math_utils.matrix_errors import MatrixError
from physics_matrix.math_utils.matrix_errors import MatrixValueError
from physics_matrix.math_utils.matrix_errors import NotSquareError
from physics_matrix.math_utils.matrix_errors import SingularMatrixError
from physics_matrix.math_utils.matrix_errors import UnsupportedOperationError


__all__ = [
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InvalidDimensionError",
    "InvalidExponentError",
    "Matrix",
    "MatrixError",
    "MatrixParams",
    "MatrixParamsError",
    "MatrixValueError",
    "NotSquareError",
    "SingularMatrixError",
    "UnsupportedOperationError",
]
