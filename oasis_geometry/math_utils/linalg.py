################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Linear algebra utilities for rotations and matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .units import assert_finite


# Angle below which series expansions replace closed forms, in radians
SMALL_ANGLE_RAD: float = 1e-8


class SO3:
    """SO(3) rotation utilities."""

    @staticmethod
    def hat(w: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the skew-symmetric matrix for a rotation vector."""
        vec: NDArray[np.float64] = np.asarray(w, dtype=float)
        Linalg.ensure_shape(vec, (3,), "w")
        assert_finite(vec, "w")
        wx: float = float(vec[0])
        wy: float = float(vec[1])
        wz: float = float(vec[2])
        return np.array(
            [
                [0.0, -wz, wy],
                [wz, 0.0, -wx],
                [-wy, wx, 0.0],
            ],
            dtype=float,
        )

    @staticmethod
    def vee(W: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the rotation vector from a skew-symmetric matrix."""
        mat: NDArray[np.float64] = np.asarray(W, dtype=float)
        Linalg.ensure_shape(mat, (3, 3), "W")
        assert_finite(mat, "W")
        return np.array([mat[2, 1], mat[0, 2], mat[1, 0]], dtype=float)

    @staticmethod
    def exp(
        w: NDArray[np.float64], small_angle: float = SMALL_ANGLE_RAD
    ) -> NDArray[np.float64]:
        """Exponentiate a rotation vector to a rotation matrix."""
        vec: NDArray[np.float64] = np.asarray(w, dtype=float)
        Linalg.ensure_shape(vec, (3,), "w")
        assert_finite(vec, "w")
        theta: float = float(np.linalg.norm(vec))
        W: NDArray[np.float64] = SO3.hat(vec)
        eye: NDArray[np.float64] = np.eye(3, dtype=float)
        if theta < small_angle:
            return eye + W + 0.5 * (W @ W)
        A: float = float(np.sin(theta)) / theta
        B: float = (1.0 - float(np.cos(theta))) / (theta * theta)
        return eye + A * W + B * (W @ W)

    @staticmethod
    def left_jacobian(
        w: NDArray[np.float64], small_angle: float = SMALL_ANGLE_RAD
    ) -> NDArray[np.float64]:
        """Return the left Jacobian V(w) coupling rotation and translation.

        Exp([w; v]) has translation V(w) @ v:

            V = I + (1 - cos θ) / θ² [w]x + (θ - sin θ) / θ³ [w]x²
        """
        vec: NDArray[np.float64] = np.asarray(w, dtype=float)
        Linalg.ensure_shape(vec, (3,), "w")
        theta: float = float(np.linalg.norm(vec))
        W: NDArray[np.float64] = SO3.hat(vec)
        eye: NDArray[np.float64] = np.eye(3, dtype=float)
        if theta < small_angle:
            return eye + 0.5 * W + (W @ W) / 6.0
        theta2: float = theta * theta
        sin_half: float = float(np.sin(0.5 * theta))
        A: float = 2.0 * sin_half * sin_half / theta2
        B: float = (theta - float(np.sin(theta))) / (theta2 * theta)
        return eye + A * W + B * (W @ W)

    @staticmethod
    def left_jacobian_inverse(
        w: NDArray[np.float64], small_angle: float = SMALL_ANGLE_RAD
    ) -> NDArray[np.float64]:
        """Return the inverse of the left Jacobian V(w)."""
        vec: NDArray[np.float64] = np.asarray(w, dtype=float)
        Linalg.ensure_shape(vec, (3,), "w")
        theta: float = float(np.linalg.norm(vec))
        W: NDArray[np.float64] = SO3.hat(vec)
        eye: NDArray[np.float64] = np.eye(3, dtype=float)
        if theta < small_angle:
            return eye - 0.5 * W + (W @ W) / 12.0
        # Half-angle form of 1 - θ sin θ / (2 (1 - cos θ))
        half: float = 0.5 * theta
        coeff: float = 1.0 - half * float(np.cos(half)) / float(np.sin(half))
        return eye - 0.5 * W + (coeff / (theta * theta)) * (W @ W)

    @staticmethod
    def project_to_so3(R: NDArray[np.float64]) -> NDArray[np.float64]:
        """Project a matrix to the nearest SO(3) rotation matrix."""
        mat: NDArray[np.float64] = np.asarray(R, dtype=float)
        Linalg.ensure_shape(mat, (3, 3), "R")
        assert_finite(mat, "R")
        U: NDArray[np.float64]
        S: NDArray[np.float64]
        Vt: NDArray[np.float64]
        U, S, Vt = np.linalg.svd(mat)
        R_proj: NDArray[np.float64] = U @ Vt
        if np.linalg.det(R_proj) < 0.0:
            U[:, -1] *= -1.0
            R_proj = U @ Vt
        return R_proj

    @staticmethod
    def orthonormal_error(R: NDArray[np.float64]) -> float:
        """Return the Frobenius norm of R^T R - I."""
        mat: NDArray[np.float64] = np.asarray(R, dtype=float)
        Linalg.ensure_shape(mat, (3, 3), "R")
        return float(np.linalg.norm(mat.T @ mat - np.eye(3, dtype=float)))


class Linalg:
    """General linear algebra helpers."""

    @staticmethod
    def ensure_shape(x: NDArray[np.float64], shape: tuple[int, ...], name: str) -> None:
        """Ensure an array has the expected shape."""
        if x.shape != shape:
            raise ValueError(f"{name} must have shape {shape}")

    @staticmethod
    def congruence(
        J: NDArray[np.float64], P: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        """Return J P J^T, the first-order covariance mapping through J."""
        return J @ P @ J.T
