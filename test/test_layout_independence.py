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
Tests that the storage layout changes buffer order and nothing else

Each case builds the same logical matrices under row-major storage, records
the results, resets the policy, and repeats under column-major storage.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from oasis_math import layout_policy
from oasis_math.config import MathConfig
from oasis_math.config import MathParams
from oasis_math.matrix import Matrix2
from oasis_math.matrix import Matrix3
from oasis_math.matrix import Matrix4
from oasis_math.matrix import MatrixBase


ROWS: dict[type[MatrixBase], list[list[float]]] = {
    Matrix2: [[1.0, 2.0], [3.0, 4.0]],
    Matrix3: [[2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0]],
    Matrix4: [
        [1.0, 0.0, 2.0, -1.0],
        [3.0, 0.0, 0.0, 5.0],
        [2.0, 1.0, 4.0, -3.0],
        [1.0, 0.0, 5.0, 0.0],
    ],
}


def _evaluate(cls: type[MatrixBase], layout: str) -> dict[str, Any]:
    layout_policy.reset()
    layout_policy.configure(MathConfig(MathParams(layout=layout)))
    m: MatrixBase = cls.make(*ROWS[cls])
    return {
        "rows": m.to_rows(),
        "det": m.determinant(),
        "transpose": m.transpose().to_rows(),
        "square": (m * m).to_rows(),
        "inverse": m.inverse().to_rows(),
        "column": m.column(1).to_tuple(),
        "buffer": m.to_buffer(),
    }


@pytest.mark.parametrize("cls", list(ROWS))
def test_results_do_not_depend_on_layout(cls: type[MatrixBase]) -> None:
    """Checks logical results match across layouts."""
    row_major: dict[str, Any] = _evaluate(cls, "row_major")
    column_major: dict[str, Any] = _evaluate(cls, "column_major")
    for key in ("rows", "det", "transpose", "square", "inverse", "column"):
        assert row_major[key] == column_major[key], key


@pytest.mark.parametrize("cls", list(ROWS))
def test_buffer_follows_layout(cls: type[MatrixBase]) -> None:
    """Checks the physical buffer is row-major or column-major."""
    rows: np.ndarray = np.array(ROWS[cls])
    row_major: dict[str, Any] = _evaluate(cls, "row_major")
    column_major: dict[str, Any] = _evaluate(cls, "column_major")
    assert np.array_equal(row_major["buffer"], rows.flatten())
    assert np.array_equal(column_major["buffer"], rows.T.flatten())
    assert not np.array_equal(row_major["buffer"], column_major["buffer"])


def test_matrix2_buffers() -> None:
    """Checks the literal buffer order for a 2x2 matrix."""
    assert list(_evaluate(Matrix2, "row_major")["buffer"]) == [1.0, 2.0, 3.0, 4.0]
    assert list(_evaluate(Matrix2, "column_major")["buffer"]) == [1.0, 3.0, 2.0, 4.0]


def test_from_buffer_reads_physical_order() -> None:
    """Checks from_buffer interprets values in the active layout."""
    layout_policy.configure(MathConfig(MathParams(layout="row_major")))
    assert Matrix2.from_buffer([1.0, 2.0, 3.0, 4.0]).element(0, 1) == 2.0
    layout_policy.reset()
    assert Matrix2.from_buffer([1.0, 2.0, 3.0, 4.0]).element(0, 1) == 3.0
