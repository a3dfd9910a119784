################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the dense matrix engine."""

from physics_matrix.config.matrix_params import MatrixParams
from physics_matrix.config.matrix_params import MatrixParamsError


__all__ = ["MatrixParams", "MatrixParamsError"]
