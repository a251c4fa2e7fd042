################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Four-component vector."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from oasis_math.vector.vector_base import VectorBase
from oasis_math.vector.vector_base import component


if TYPE_CHECKING:
    from oasis_math.vector.vector3 import Vector3


class Vector4(VectorBase):
    """Vector with components (x, y, z, w)."""

    __slots__ = ()

    ORDER: ClassVar[int] = 4

    z = component(2, "Third component")
    w = component(3, "Fourth component")

    @classmethod
    def from_vector3(cls, v: Vector3, w: float = 0.0) -> Vector4:
        """Return (v.x, v.y, v.z, w); w defaults to 0 for directions."""
        return cls(v.x, v.y, v.z, w)
