################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""2x2 matrix."""

from __future__ import annotations

from typing import ClassVar

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_base import det2
from oasis_math.vector.vector2 import Vector2
from oasis_math.vector.vector_base import VectorBase


class Matrix2(MatrixBase):
    """2x2 matrix operating on Vector2 columns."""

    __slots__ = ()

    ORDER: ClassVar[int] = 2
    VECTOR: ClassVar[type[VectorBase]] = Vector2

    def determinant(self) -> float:
        """Return ``a*d - b*c`` for [[a, b], [c, d]]."""
        return det2(
            self.element(0, 0),
            self.element(0, 1),
            self.element(1, 0),
            self.element(1, 1),
        )

    def _minor_determinant(self, row: int, col: int) -> float:
        # Removing one row and column leaves a single element
        return self.element(1 - row, 1 - col)
