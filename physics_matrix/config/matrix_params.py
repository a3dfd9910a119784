################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Engine configuration for the dense matrix type."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Digits after the decimal point when rendering cells
FORMAT_PRECISION: int = 2
# Reject rows whose width differs from the first row
REJECT_JAGGED_ROWS: bool = True


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_non_negative_int(value: Any, name: str) -> None:
    """Require a non-negative int that is not a bool."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise MatrixParamsError(f"{name} must be an int")
    if value < 0:
        raise MatrixParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class MatrixParams:
    """Configuration shared by a matrix and every matrix derived from it.

    Attributes:
        format_precision: Digits after the decimal point used by ``str``
        reject_jagged_rows: Fail construction on rows of unequal width
            instead of zero-padding short rows
    """

    # Digits after the decimal point when rendering cells
    format_precision: int = FORMAT_PRECISION
    # Reject rows whose width differs from the first row
    reject_jagged_rows: bool = REJECT_JAGGED_ROWS

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameter set."""
        return cls()

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> MatrixParams:
        """Build validated parameters from a mapping, filling in defaults.

        Raises:
            MatrixParamsError: If a key is unknown or a value is invalid
        """
        known: set[str] = {field.name for field in fields(cls)}
        unknown: list[str] = sorted(set(params) - known)
        if unknown:
            raise MatrixParamsError(f"Unknown matrix parameters: {', '.join(unknown)}")
        result: MatrixParams = cls(**dict(params))
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_non_negative_int(self.format_precision, "format_precision")
        if not isinstance(self.reject_jagged_rows, bool):
            raise MatrixParamsError("reject_jagged_rows must be a bool")

    def replace(self, **overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return a plain dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}
