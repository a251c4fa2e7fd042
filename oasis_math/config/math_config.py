################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for the math library."""

from __future__ import annotations

from dataclasses import dataclass

from oasis_math.config.math_params import MathParams
from oasis_math.config.math_params import MathParamsError
from oasis_math.memory_layout import MemoryLayout


class MathConfigError(Exception):
    """Raised when math configuration validation fails."""


@dataclass(frozen=True)
class MathConfig:
    """Convenience wrapper around math parameters."""

    params: MathParams

    def __init__(self, params: MathParams | None = None) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(
            self, "params", params if params is not None else MathParams.defaults()
        )
        self.validate()

    @classmethod
    def defaults(cls) -> MathConfig:
        """Return a configuration built from default parameters."""
        return cls(MathParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except MathParamsError as exc:
            raise MathConfigError(str(exc)) from exc

    def layout(self) -> MemoryLayout:
        """Return the configured matrix storage order."""
        return MemoryLayout(self.params.layout)

    def singular_eps(self) -> float:
        """Return the relative determinant threshold used by inverse()."""
        return self.params.singular_eps

    def degenerate_eps(self) -> float:
        """Return the length threshold used by normalize()."""
        return self.params.degenerate_eps
