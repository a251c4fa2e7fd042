################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Parameter schema for the math library."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Storage order shared by every matrix in the process
LAYOUT_ROW_MAJOR: str = "row_major"
LAYOUT_COLUMN_MAJOR: str = "column_major"
LAYOUTS: frozenset[str] = frozenset({LAYOUT_ROW_MAJOR, LAYOUT_COLUMN_MAJOR})

# Default storage order, column-major as consumed by OpenGL-style buffers
LAYOUT_DEFAULT: str = LAYOUT_COLUMN_MAJOR

# Determinant threshold, relative to the product of row norms
SINGULAR_EPS: float = 1e-12

# Length threshold below which a vector cannot be normalized
DEGENERATE_EPS: float = 1e-12


class MathParamsError(Exception):
    """Raised when math parameter validation fails."""


def _require_positive_finite(value: float, name: str) -> None:
    """Require a positive, finite tolerance."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise MathParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise MathParamsError(f"{name} must be finite")
    if value <= 0.0:
        raise MathParamsError(f"{name} must be positive")


@dataclass(frozen=True, slots=True)
class MathParams:
    """Process-wide math parameters.

    Fields:
        layout: Matrix storage order, "row_major" or "column_major"
        singular_eps: Relative determinant threshold used by inverse(); a
            matrix is singular when abs(det) < singular_eps times the
            product of its row norms
        degenerate_eps: Length threshold used by normalize()
    """

    layout: str = LAYOUT_DEFAULT
    singular_eps: float = SINGULAR_EPS
    degenerate_eps: float = DEGENERATE_EPS

    @classmethod
    def defaults(cls) -> MathParams:
        """Return the default parameter set."""
        return cls()

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> MathParams:
        """Build parameters from a flat mapping, rejecting unknown keys."""
        known: set[str] = {f.name for f in fields(cls)}
        unknown: set[str] = set(params) - known
        if unknown:
            raise MathParamsError(f"unknown parameters: {', '.join(sorted(unknown))}")
        result: MathParams = cls(**dict(params))
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameter invariants."""
        if self.layout not in LAYOUTS:
            raise MathParamsError("layout must be 'row_major' or 'column_major'")
        _require_positive_finite(self.singular_eps, "singular_eps")
        _require_positive_finite(self.degenerate_eps, "degenerate_eps")

    def replace(self, **overrides: Any) -> MathParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return a flat dict representation for debugging."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
