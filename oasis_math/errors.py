################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Errors raised by vector and matrix algebra."""


class DegenerateVectorError(ValueError):
    """Raised when normalizing a vector whose length is numerically zero."""


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is numerically zero."""
