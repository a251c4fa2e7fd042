################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""3x3 matrix."""

from __future__ import annotations

from typing import ClassVar

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_base import det2
from oasis_math.matrix.matrix_base import det3
from oasis_math.vector.vector2 import Vector2
from oasis_math.vector.vector3 import Vector3
from oasis_math.vector.vector_base import VectorBase


class Matrix3(MatrixBase):
    """3x3 matrix operating on Vector3 columns.

    ``transform_point()`` also accepts a Vector2, treated as the 2D affine
    point (x, y, 1).
    """

    __slots__ = ()

    ORDER: ClassVar[int] = 3
    VECTOR: ClassVar[type[VectorBase]] = Vector3
    POINT: ClassVar[type[VectorBase] | None] = Vector2

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        return det3(self.to_rows())

    def _minor_determinant(self, row: int, col: int) -> float:
        minor: list[list[float]] = self._minor(row, col)
        return det2(minor[0][0], minor[0][1], minor[1][0], minor[1][1])
