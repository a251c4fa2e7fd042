################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Fixed-size vector and matrix value types for transform math
"""

from __future__ import annotations

from oasis_math import layout_policy
from oasis_math.config import MathConfig
from oasis_math.config import MathConfigError
from oasis_math.config import MathParams
from oasis_math.config import MathParamsError
from oasis_math.errors import DegenerateVectorError
from oasis_math.errors import SingularMatrixError
from oasis_math.matrix import Matrix2
from oasis_math.matrix import Matrix3
from oasis_math.matrix import Matrix4
from oasis_math.memory_layout import MemoryLayout
from oasis_math.scalar import Scalar
from oasis_math.vector import Vector2
from oasis_math.vector import Vector3
from oasis_math.vector import Vector4


__all__ = [
    "DegenerateVectorError",
    "MathConfig",
    "MathConfigError",
    "MathParams",
    "MathParamsError",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MemoryLayout",
    "Scalar",
    "SingularMatrixError",
    "Vector2",
    "Vector3",
    "Vector4",
    "layout_policy",
]
