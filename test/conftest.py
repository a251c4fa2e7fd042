################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shared fixtures for oasis_math tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from oasis_math import layout_policy


@pytest.fixture(autouse=True)
def reset_layout_policy() -> Iterator[None]:
    """Give every test an unlocked default configuration."""
    layout_policy.reset()
    yield
    layout_policy.reset()
