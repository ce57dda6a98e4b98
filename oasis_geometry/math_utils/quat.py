################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Quaternion utilities using the wxyz convention."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .linalg import SMALL_ANGLE_RAD
from .linalg import SO3
from .units import NumericConstants
from .units import as_vector3
from .units import assert_finite


@dataclass(frozen=True, eq=False)
class Quaternion:
    """Quaternion stored in wxyz order.

    Components are stored as given. Rotation helpers assume a unit quaternion
    and do not renormalize, so a non-unit input scales the rotated vectors.
    """

    wxyz: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate quaternion inputs and freeze storage."""
        wxyz: NDArray[np.float64] = np.array(self.wxyz, dtype=float)
        if wxyz.shape != (4,):
            raise ValueError("wxyz must be shape (4,)")
        assert_finite(wxyz, "wxyz")
        wxyz.setflags(write=False)
        object.__setattr__(self, "wxyz", wxyz)

    @staticmethod
    def identity() -> "Quaternion":
        """Return the identity quaternion."""
        return Quaternion.from_wxyz(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_wxyz(w: float, x: float, y: float, z: float) -> "Quaternion":
        """Create a quaternion from components."""
        return Quaternion(np.array([w, x, y, z], dtype=float))

    @staticmethod
    def from_xyzw(xyzw: NDArray[np.float64]) -> "Quaternion":
        """Create a quaternion from components in xyzw order."""
        vec: NDArray[np.float64] = np.asarray(xyzw, dtype=float)
        if vec.shape != (4,):
            raise ValueError("xyzw must be shape (4,)")
        return Quaternion(np.roll(vec, 1))

    @staticmethod
    def from_axis_angle(axis: NDArray[np.float64], angle: float) -> "Quaternion":
        """Create a rotation of angle radians about an axis."""
        vec: NDArray[np.float64] = as_vector3(axis, "axis")
        norm: float = float(np.linalg.norm(vec))
        if norm < NumericConstants.EPS:
            raise ValueError("axis norm is too small")
        half: float = 0.5 * float(angle)
        xyz: NDArray[np.float64] = np.sin(half) * vec / norm
        return Quaternion.from_wxyz(
            float(np.cos(half)), float(xyz[0]), float(xyz[1]), float(xyz[2])
        )

    @staticmethod
    def from_rotvec(
        w: NDArray[np.float64], small_angle: float = SMALL_ANGLE_RAD
    ) -> "Quaternion":
        """Create a quaternion from a rotation vector."""
        R: NDArray[np.float64] = SO3.exp(w, small_angle)
        return Quaternion.from_matrix(R)

    @staticmethod
    def from_matrix(R: NDArray[np.float64]) -> "Quaternion":
        """Create a normalized quaternion from a rotation matrix."""
        mat: NDArray[np.float64] = np.asarray(R, dtype=float)
        if mat.shape != (3, 3):
            raise ValueError("R must be shape (3, 3)")
        assert_finite(mat, "R")
        trace: float = float(np.trace(mat))
        if trace > 0.0:
            s: float = float(np.sqrt(trace + 1.0) * 2.0)
            w: float = 0.25 * s
            x: float = float((mat[2, 1] - mat[1, 2]) / s)
            y: float = float((mat[0, 2] - mat[2, 0]) / s)
            z: float = float((mat[1, 0] - mat[0, 1]) / s)
        else:
            diag: NDArray[np.float64] = np.diag(mat)
            idx: int = int(np.argmax(diag))
            if idx == 0:
                s = float(np.sqrt(1.0 + mat[0, 0] - mat[1, 1] - mat[2, 2]) * 2.0)
                w = float((mat[2, 1] - mat[1, 2]) / s)
                x = 0.25 * s
                y = float((mat[0, 1] + mat[1, 0]) / s)
                z = float((mat[0, 2] + mat[2, 0]) / s)
            elif idx == 1:
                s = float(np.sqrt(1.0 + mat[1, 1] - mat[0, 0] - mat[2, 2]) * 2.0)
                w = float((mat[0, 2] - mat[2, 0]) / s)
                x = float((mat[0, 1] + mat[1, 0]) / s)
                y = 0.25 * s
                z = float((mat[1, 2] + mat[2, 1]) / s)
            else:
                s = float(np.sqrt(1.0 + mat[2, 2] - mat[0, 0] - mat[1, 1]) * 2.0)
                w = float((mat[1, 0] - mat[0, 1]) / s)
                x = float((mat[0, 2] + mat[2, 0]) / s)
                y = float((mat[1, 2] + mat[2, 1]) / s)
                z = 0.25 * s
        return Quaternion.from_wxyz(w, x, y, z).normalized()

    @staticmethod
    def random(rng: np.random.Generator) -> "Quaternion":
        """Sample a rotation uniformly from SO(3).

        A normalized 4D standard normal sample is uniform on S^3.
        """
        sample: NDArray[np.float64] = rng.standard_normal(4)
        while float(np.linalg.norm(sample)) < NumericConstants.EPS:
            sample = rng.standard_normal(4)
        return Quaternion(sample).normalized()

    def as_matrix(self) -> NDArray[np.float64]:
        """Return the rotation matrix representation."""
        w: float = float(self.wxyz[0])
        x: float = float(self.wxyz[1])
        y: float = float(self.wxyz[2])
        z: float = float(self.wxyz[3])
        return np.array(
            [
                [
                    1.0 - 2.0 * (y * y + z * z),
                    2.0 * (x * y - z * w),
                    2.0 * (x * z + y * w),
                ],
                [
                    2.0 * (x * y + z * w),
                    1.0 - 2.0 * (x * x + z * z),
                    2.0 * (y * z - x * w),
                ],
                [
                    2.0 * (x * z - y * w),
                    2.0 * (y * z + x * w),
                    1.0 - 2.0 * (x * x + y * y),
                ],
            ],
            dtype=float,
        )

    def as_rotvec(self) -> NDArray[np.float64]:
        """Return the rotation vector with angle in [0, pi]."""
        q: NDArray[np.float64] = self.normalized().wxyz
        if q[0] < 0.0:
            q = -q
        xyz: NDArray[np.float64] = q[1:]
        norm: float = float(np.linalg.norm(xyz))
        if norm < NumericConstants.EPS:
            return 2.0 * xyz / float(q[0])
        angle: float = 2.0 * float(np.arctan2(norm, q[0]))
        return angle * xyz / norm

    def norm(self) -> float:
        """Return the Euclidean norm of the components."""
        return float(np.linalg.norm(self.wxyz))

    def normalized(self) -> "Quaternion":
        """Return a normalized quaternion."""
        norm: float = self.norm()
        if norm < NumericConstants.EPS:
            raise ValueError("Quaternion norm is too small")
        return Quaternion(self.wxyz / norm)

    def conjugate(self) -> "Quaternion":
        """Return the conjugate quaternion."""
        q: NDArray[np.float64] = self.wxyz
        return Quaternion.from_wxyz(
            float(q[0]), float(-q[1]), float(-q[2]), float(-q[3])
        )

    def inverse(self) -> "Quaternion":
        """Return the inverse quaternion."""
        norm2: float = float(np.dot(self.wxyz, self.wxyz))
        if norm2 < NumericConstants.EPS * NumericConstants.EPS:
            raise ValueError("Quaternion norm is too small")
        return Quaternion(self.conjugate().wxyz / norm2)

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Multiply two quaternions using the Hamilton product."""
        q1: NDArray[np.float64] = self.wxyz
        q2: NDArray[np.float64] = other.wxyz
        w1: float = float(q1[0])
        x1: float = float(q1[1])
        y1: float = float(q1[2])
        z1: float = float(q1[3])
        w2: float = float(q2[0])
        x2: float = float(q2[1])
        y2: float = float(q2[2])
        z2: float = float(q2[3])
        w: float = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x: float = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
        y: float = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
        z: float = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
        return Quaternion.from_wxyz(w, x, y, z)

    def __eq__(self, other: Any) -> bool:
        """Compare components exactly."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self.wxyz, other.wxyz))

    __hash__ = None  # type: ignore[assignment]

    def rotate(self, v: NDArray[np.float64]) -> NDArray[np.float64]:
        """Rotate a 3-vector by this quaternion."""
        vec: NDArray[np.float64] = as_vector3(v, "v")
        return self.as_matrix() @ vec

    def to_xyzw(self) -> NDArray[np.float64]:
        """Return a copy of the components in xyzw order."""
        return np.roll(self.wxyz, -1)

    def almost_equal(self, other: "Quaternion", atol: float = 1e-9) -> bool:
        """Check approximate equality, accounting for sign ambiguity."""
        q1: NDArray[np.float64] = self.wxyz
        q2: NDArray[np.float64] = other.wxyz
        if np.allclose(q1, q2, atol=atol):
            return True
        return bool(np.allclose(q1, -q2, atol=atol))
