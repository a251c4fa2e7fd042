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
Process-wide math configuration

The storage layout is shared by every matrix in the process. It may be
configured during initialization, and it locks as soon as the first matrix is
constructed: changing it afterwards would reinterpret the storage of live
matrices, so a conflicting ``configure()`` raises ``MathConfigError``.
"""

from __future__ import annotations

import logging
import threading

from oasis_math.config.math_config import MathConfig
from oasis_math.config.math_config import MathConfigError
from oasis_math.memory_layout import MemoryLayout


_LOG: logging.Logger = logging.getLogger(__name__)


class _PolicyState:
    def __init__(self) -> None:
        self.config: MathConfig = MathConfig.defaults()
        self.locked: bool = False
        self.lock: threading.Lock = threading.Lock()


_STATE: _PolicyState = _PolicyState()


def configure(config: MathConfig) -> None:
    """Install the process-wide math configuration.

    Args:
        config: Validated configuration to install

    Raises:
        MathConfigError: If matrices already exist and ``config`` differs from
            the active configuration
    """
    with _STATE.lock:
        if config == _STATE.config:
            return
        if _STATE.locked:
            raise MathConfigError(
                "math configuration is locked once matrices have been constructed"
            )
        _STATE.config = config

    _LOG.info(
        "Math configured: layout=%s singular_eps=%g degenerate_eps=%g",
        config.layout().value,
        config.singular_eps(),
        config.degenerate_eps(),
    )


def active_config() -> MathConfig:
    """Return the active configuration."""
    return _STATE.config


def active_layout() -> MemoryLayout:
    """Return the active matrix storage order."""
    return _STATE.config.layout()


def lock_layout() -> MemoryLayout:
    """Lock the configuration and return the storage order.

    Called whenever a matrix is constructed.
    """
    if not _STATE.locked:
        with _STATE.lock:
            if not _STATE.locked:
                _STATE.locked = True
                _LOG.debug(
                    "Math configuration locked: layout=%s",
                    _STATE.config.layout().value,
                )
    return _STATE.config.layout()


def is_locked() -> bool:
    """Return True once a matrix has been constructed."""
    return _STATE.locked


def reset() -> None:
    """Restore the default configuration and drop the lock.

    Intended for test harnesses only. Matrices constructed before the reset
    must not be used afterwards.
    """
    with _STATE.lock:
        _STATE.config = MathConfig.defaults()
        _STATE.locked = False
