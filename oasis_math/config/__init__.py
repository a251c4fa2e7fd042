################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the math library."""

from __future__ import annotations

from oasis_math.config.math_config import MathConfig
from oasis_math.config.math_config import MathConfigError
from oasis_math.config.math_params import MathParams
from oasis_math.config.math_params import MathParamsError


__all__ = [
    "MathConfig",
    "MathConfigError",
    "MathParams",
    "MathParamsError",
]
