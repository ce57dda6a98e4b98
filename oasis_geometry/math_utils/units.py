################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Numeric constants and input checks shared by the geometry utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


class NumericConstants:
    """Constants used by math utilities."""

    EPS: float = 1e-12


def assert_finite(x: NDArray[np.float64], name: str) -> None:
    """Raise ValueError when the array contains non-finite values."""
    if not np.all(np.isfinite(x)):
        raise ValueError(f"{name} must be finite")


def as_vector3(x: NDArray[np.float64], name: str) -> NDArray[np.float64]:
    """Return a finite float64 copy of a 3-vector."""
    vec: NDArray[np.float64] = np.array(x, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"{name} must be shape (3,)")
    assert_finite(vec, name)
    return vec
