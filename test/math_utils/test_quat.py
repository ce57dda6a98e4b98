################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for quaternion utilities."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_geometry.math_utils.linalg import SO3
from oasis_geometry.math_utils.quat import Quaternion
from oasis_geometry.math_utils.rotation import UnitRotation


def test_identity_properties() -> None:
    """Checks identity quaternion properties."""
    q: Quaternion = Quaternion.identity()
    mat: NDArray[np.float64] = q.as_matrix()
    assert np.allclose(mat, np.eye(3))
    assert np.array_equal(q.to_xyzw(), np.array([0.0, 0.0, 0.0, 1.0]))


def test_satisfies_unit_rotation() -> None:
    """Quaternion provides the rotation capabilities of a transform."""
    assert isinstance(Quaternion.identity(), UnitRotation)
    assert not isinstance(np.eye(3), UnitRotation)


def test_xyzw_roundtrip() -> None:
    """Checks xyzw conversion preserves components."""
    xyzw: NDArray[np.float64] = np.array([0.1, 0.2, 0.3, 0.9], dtype=float)
    q: Quaternion = Quaternion.from_xyzw(xyzw)
    assert np.array_equal(q.wxyz, np.array([0.9, 0.1, 0.2, 0.3]))
    assert np.array_equal(q.to_xyzw(), xyzw)


def test_exact_equality() -> None:
    """Checks equality compares components exactly."""
    q: Quaternion = Quaternion.from_wxyz(1.0, 0.0, 0.0, 0.0)
    assert q == Quaternion.identity()
    assert q != Quaternion.from_wxyz(1.0, 0.0, 0.0, 1e-15)
    assert q != Quaternion.from_wxyz(-1.0, 0.0, 0.0, 0.0)


def test_storage_not_normalized() -> None:
    """Checks construction keeps components as given."""
    q: Quaternion = Quaternion.from_wxyz(2.0, 0.0, 0.0, 0.0)
    assert np.isclose(q.norm(), 2.0)
    assert np.isclose(q.normalized().norm(), 1.0)
    with pytest.raises(ValueError):
        q.wxyz[0] = 1.0


def test_multiplication_inverse() -> None:
    """Checks quaternion multiplication with inverse returns identity."""
    q: Quaternion = Quaternion.from_rotvec(np.array([0.2, 0.0, -0.1], dtype=float))
    identity: Quaternion = q * q.inverse()
    assert identity.almost_equal(Quaternion.identity())


def test_inverse_of_non_unit() -> None:
    """Checks inverse divides by the squared norm."""
    q: Quaternion = Quaternion.from_wxyz(0.0, 2.0, 0.0, 0.0)
    assert (q * q.inverse()).almost_equal(Quaternion.identity())
    assert np.allclose(q.conjugate().wxyz, np.array([0.0, -2.0, 0.0, 0.0]))


def test_zero_norm() -> None:
    """Checks degenerate quaternions are rejected."""
    q: Quaternion = Quaternion.from_wxyz(0.0, 0.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        q.normalized()
    with pytest.raises(ValueError):
        q.inverse()


def test_composition_order() -> None:
    """Checks q1 * q2 rotates by q2 first."""
    q1: Quaternion = Quaternion.from_axis_angle(np.array([0.0, 0.0, 1.0]), 0.4)
    q2: Quaternion = Quaternion.from_axis_angle(np.array([1.0, 0.0, 0.0]), -0.7)
    vec: NDArray[np.float64] = np.array([0.3, -1.0, 2.0], dtype=float)
    assert np.allclose((q1 * q2).rotate(vec), q1.rotate(q2.rotate(vec)))
    assert np.allclose((q1 * q2).as_matrix(), q1.as_matrix() @ q2.as_matrix())


def test_from_matrix_roundtrip() -> None:
    """Checks conversion between matrix and quaternion."""
    R: NDArray[np.float64] = SO3.exp(np.array([0.1, 0.2, 0.3], dtype=float))
    q: Quaternion = Quaternion.from_matrix(R)
    roundtrip: NDArray[np.float64] = q.as_matrix()
    assert np.allclose(roundtrip, R, atol=1e-8)


def test_from_matrix_half_turns() -> None:
    """Checks non-positive trace branches recover the rotation."""
    axis: NDArray[np.float64]
    for axis in np.eye(3):
        R: NDArray[np.float64] = SO3.exp(np.pi * axis)
        q: Quaternion = Quaternion.from_matrix(R)
        assert np.allclose(q.as_matrix(), R, atol=1e-8)


def test_from_rotvec_matches_exp() -> None:
    """Checks from_rotvec matches SO3.exp."""
    vec: NDArray[np.float64] = np.array([0.0, 0.0, 0.2], dtype=float)
    q: Quaternion = Quaternion.from_rotvec(vec)
    assert np.allclose(q.as_matrix(), SO3.exp(vec), atol=1e-8)


def test_from_axis_angle_matches_rotvec() -> None:
    """Checks axis-angle and rotation vector constructions agree."""
    axis: NDArray[np.float64] = np.array([1.0, -2.0, 0.5], dtype=float)
    angle: float = 1.1
    q: Quaternion = Quaternion.from_axis_angle(axis, angle)
    rotvec: NDArray[np.float64] = angle * axis / np.linalg.norm(axis)
    assert q.almost_equal(Quaternion.from_rotvec(rotvec))
    assert np.allclose(q.as_rotvec(), rotvec)


def test_as_rotvec_small_angle() -> None:
    """Checks rotation vector extraction near identity."""
    vec: NDArray[np.float64] = np.array([1e-13, 0.0, 0.0], dtype=float)
    q: Quaternion = Quaternion.from_wxyz(1.0, 0.5e-13, 0.0, 0.0)
    assert np.allclose(q.as_rotvec(), vec, atol=1e-20)


def test_rotate_matches_matrix() -> None:
    """Checks vector rotation matches matrix multiply."""
    vec: NDArray[np.float64] = np.array([1.0, 2.0, 3.0], dtype=float)
    q: Quaternion = Quaternion.from_rotvec(np.array([0.1, 0.2, 0.1], dtype=float))
    rotated: NDArray[np.float64] = q.rotate(vec)
    expected: NDArray[np.float64] = q.as_matrix() @ vec
    assert np.allclose(rotated, expected)


def test_random_is_unit() -> None:
    """Checks random samples are unit quaternions."""
    rng: np.random.Generator = np.random.default_rng(0)
    for _ in range(10):
        q: Quaternion = Quaternion.random(rng)
        assert np.isclose(q.norm(), 1.0)
        R: NDArray[np.float64] = q.as_matrix()
        assert np.allclose(R.T @ R, np.eye(3), atol=1e-12)


def test_almost_equal_sign_flip() -> None:
    """Checks almost_equal handles sign flips."""
    q: Quaternion = Quaternion.from_rotvec(np.array([0.1, -0.2, 0.1], dtype=float))
    q_neg: Quaternion = Quaternion(-q.wxyz)
    assert q.almost_equal(q_neg)
