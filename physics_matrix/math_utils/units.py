################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Angle unit conversions for 2-D transforms."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


class Angle:
    """Angular unit conversions."""

    @staticmethod
    def deg2rad(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
        """Convert degrees to radians."""
        arr: NDArray[np.float64] = np.asarray(x, dtype=float)
        result: NDArray[np.float64] = np.deg2rad(arr)
        if np.ndim(result) == 0:
            return float(result)
        return result

    @staticmethod
    def rotation_terms(angle_degrees: float) -> tuple[float, float]:
        """Return ``(cos, sin)`` of an angle given in degrees."""
        theta: float = float(Angle.deg2rad(angle_degrees))
        return float(np.cos(theta)), float(np.sin(theta))
