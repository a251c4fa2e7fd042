################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vectors."""

from __future__ import annotations

from oasis_math.vector.vector2 import Vector2
from oasis_math.vector.vector3 import Vector3
from oasis_math.vector.vector4 import Vector4
from oasis_math.vector.vector_base import VectorBase


__all__ = [
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorBase",
]
