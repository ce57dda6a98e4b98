################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration schema for rigid transform utilities."""

from __future__ import annotations

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import replace
from typing import Any

from oasis_geometry.math_utils.linalg import SMALL_ANGLE_RAD


# Significant digits when printing transform components
PRINT_PRECISION: int = 6

# Tolerance on ||R^T R - I|| before a matrix rotation block is reported as
# projected onto SO(3)
ORTHONORMAL_TOL: float = 1e-6

# Angle below which exp/log maps use series expansions in radians
SMALL_ANGLE: float = SMALL_ANGLE_RAD


class GeometryParamsError(Exception):
    """Raised when geometry parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if value <= 0.0:
        raise GeometryParamsError(f"{name} must be positive")


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise GeometryParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class GeometryParams:
    """Tunable numeric behavior of the geometry utilities."""

    # Significant digits when printing transform components
    print_precision: int = PRINT_PRECISION
    # Orthonormality tolerance for matrix rotation blocks
    orthonormal_tol: float = ORTHONORMAL_TOL
    # Series expansion threshold for exp/log maps in radians
    small_angle_rad: float = SMALL_ANGLE

    @classmethod
    def defaults(cls) -> GeometryParams:
        """Return parameters populated with module defaults."""
        return cls()

    def validate(self) -> None:
        """Validate parameter ranges."""
        if isinstance(self.print_precision, bool) or not isinstance(
            self.print_precision, int
        ):
            raise GeometryParamsError("print_precision must be an int")
        _require_positive(self.print_precision, "print_precision")
        _require_non_negative(self.orthonormal_tol, "orthonormal_tol")
        _require_positive(self.small_angle_rad, "small_angle_rad")

    def replace(self, **overrides: Any) -> GeometryParams:
        """Return a copy with fields replaced."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return the parameters as a plain dictionary."""
        return asdict(self)
