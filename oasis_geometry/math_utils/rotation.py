################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Capabilities a rotation must provide to back a rigid transform."""

from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class UnitRotation(Protocol):
    """A unit rotation usable as the rotation part of a Rigid3d.

    Inputs/outputs:
        - r1 * r2 applies r2 first, then r1.
        - rotate(v) maps a 3-vector, as_matrix() returns the 3x3 form.
        - to_xyzw() returns the coefficients used for exact comparison and
          printing.
    """

    def __mul__(self, other: Any) -> Any:
        ...

    def inverse(self) -> Any:
        ...

    def rotate(self, v: NDArray[np.float64]) -> NDArray[np.float64]:
        ...

    def as_matrix(self) -> NDArray[np.float64]:
        ...

    def to_xyzw(self) -> NDArray[np.float64]:
        ...
