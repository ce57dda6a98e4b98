################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for geometry parameter schema."""

from __future__ import annotations

import dataclasses

import pytest

from oasis_geometry.config.geometry_params import ORTHONORMAL_TOL
from oasis_geometry.config.geometry_params import PRINT_PRECISION
from oasis_geometry.config.geometry_params import GeometryParams
from oasis_geometry.config.geometry_params import GeometryParamsError


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: GeometryParams = GeometryParams.defaults()
    params.validate()
    assert params.print_precision == PRINT_PRECISION
    assert params.orthonormal_tol == ORTHONORMAL_TOL


def test_replace_returns_copy() -> None:
    """Replace should leave the original untouched."""
    params: GeometryParams = GeometryParams.defaults()
    updated: GeometryParams = params.replace(print_precision=10)
    assert updated.print_precision == 10
    assert params.print_precision == PRINT_PRECISION


def test_frozen() -> None:
    """Parameters are immutable."""
    params: GeometryParams = GeometryParams.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.print_precision = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"print_precision": 0},
        {"print_precision": 2.5},
        {"print_precision": True},
        {"orthonormal_tol": -1.0},
        {"small_angle_rad": 0.0},
    ],
)
def test_invalid_values(overrides: dict[str, object]) -> None:
    """Out-of-range values should fail validation."""
    params: GeometryParams = GeometryParams.defaults().replace(**overrides)
    with pytest.raises(GeometryParamsError):
        params.validate()


def test_as_dict() -> None:
    """Parameters export as a flat dictionary."""
    data: dict[str, object] = GeometryParams.defaults().as_dict()
    assert set(data) == {"print_precision", "orthonormal_tol", "small_angle_rad"}
