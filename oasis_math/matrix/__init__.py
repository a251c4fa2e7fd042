################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Square matrices."""

from __future__ import annotations

from oasis_math.matrix.matrix2 import Matrix2
from oasis_math.matrix.matrix3 import Matrix3
from oasis_math.matrix.matrix4 import Matrix4
from oasis_math.matrix.matrix_base import MatrixBase


__all__ = [
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixBase",
]
