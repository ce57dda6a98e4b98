################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Rigid-body transforms in SE(3).

A Rigid3d named b_from_a maps points expressed in frame {A} into frame {B}:

    x_B = R_BA * x_A + t_BA

Chained transforms read right to left, so c_from_a = c_from_b * b_from_a.

Tangent vectors are 6-vectors with rotation first, xi = [omega; v], and
perturb a transform on the right, T = T_hat * Exp(xi). With this layout the
adjoint is

    Ad_T = [[R, 0], [[t]x R, R]]

and satisfies T * Exp(xi) = Exp(Ad_T xi) * T.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Optional
from typing import Union
from typing import overload

import numpy as np
from numpy.typing import NDArray

from oasis_geometry.config.geometry_params import GeometryParams
from oasis_geometry.math_utils.linalg import SO3
from oasis_geometry.math_utils.linalg import Linalg
from oasis_geometry.math_utils.quat import Quaternion
from oasis_geometry.math_utils.rotation import UnitRotation
from oasis_geometry.math_utils.units import as_vector3
from oasis_geometry.math_utils.units import assert_finite


_LOG: logging.Logger = logging.getLogger(__name__)


def _params_or_default(params: Optional[GeometryParams]) -> GeometryParams:
    if params is None:
        return GeometryParams.defaults()
    params.validate()
    return params


def _format_components(values: NDArray[np.float64], precision: int) -> str:
    return ", ".join(f"{float(value):.{precision}g}" for value in values)


@dataclass(frozen=True, eq=False)
class Rigid3d:
    """Rigid-body transform with a unit rotation and a translation."""

    rotation: UnitRotation = field(default_factory=Quaternion.identity)
    translation: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=float)
    )

    def __post_init__(self) -> None:
        """Validate inputs and freeze the translation storage.

        The rotation is stored as given. It is not renormalized.
        """
        if not isinstance(self.rotation, UnitRotation):
            raise TypeError("rotation must provide the UnitRotation operations")
        translation: NDArray[np.float64] = as_vector3(self.translation, "translation")
        translation.setflags(write=False)
        object.__setattr__(self, "translation", translation)

    @staticmethod
    def identity() -> "Rigid3d":
        """Return the identity transform."""
        return Rigid3d()

    @staticmethod
    def from_matrix(
        matrix: NDArray[np.float64], params: Optional[GeometryParams] = None
    ) -> "Rigid3d":
        """Create a transform from a 3x4 matrix [R | t].

        The rotation block is projected onto the nearest rotation and stored
        as a normalized quaternion.
        """
        config: GeometryParams = _params_or_default(params)
        mat: NDArray[np.float64] = np.asarray(matrix, dtype=float)
        Linalg.ensure_shape(mat, (3, 4), "matrix")
        assert_finite(mat, "matrix")
        block: NDArray[np.float64] = mat[:, :3]
        error: float = SO3.orthonormal_error(block)
        if error > config.orthonormal_tol:
            _LOG.debug(
                "Projecting rotation block onto SO(3), orthonormality error %.3g",
                error,
            )
        R: NDArray[np.float64] = SO3.project_to_so3(block)
        return Rigid3d(Quaternion.from_matrix(R), mat[:, 3])

    @staticmethod
    def exp(
        xi: NDArray[np.float64], params: Optional[GeometryParams] = None
    ) -> "Rigid3d":
        """Exponentiate a tangent vector [omega; v] to a transform."""
        config: GeometryParams = _params_or_default(params)
        vec: NDArray[np.float64] = np.asarray(xi, dtype=float)
        Linalg.ensure_shape(vec, (6,), "xi")
        assert_finite(vec, "xi")
        omega: NDArray[np.float64] = vec[:3]
        v: NDArray[np.float64] = vec[3:]
        V: NDArray[np.float64] = SO3.left_jacobian(omega, config.small_angle_rad)
        return Rigid3d(
            Quaternion.from_rotvec(omega, config.small_angle_rad),
            V @ v,
        )

    def log(self, params: Optional[GeometryParams] = None) -> NDArray[np.float64]:
        """Return the tangent vector [omega; v] with Exp(xi) == self."""
        config: GeometryParams = _params_or_default(params)
        omega: NDArray[np.float64] = Quaternion.from_matrix(
            self.rotation.as_matrix()
        ).as_rotvec()
        V_inv: NDArray[np.float64] = SO3.left_jacobian_inverse(
            omega, config.small_angle_rad
        )
        return np.concatenate([omega, V_inv @ self.translation])

    def transform_point(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map a point from the source frame into the target frame."""
        vec: NDArray[np.float64] = as_vector3(x, "x")
        return self.rotation.rotate(vec) + self.translation

    def compose(self, other: "Rigid3d") -> "Rigid3d":
        """Return self * other, applying other first."""
        return Rigid3d(
            self.rotation * other.rotation,
            self.rotation.rotate(other.translation) + self.translation,
        )

    def inverse(self) -> "Rigid3d":
        """Return the inverse transform."""
        rotation_inv: UnitRotation = self.rotation.inverse()
        return Rigid3d(rotation_inv, -rotation_inv.rotate(self.translation))

    def to_matrix(self) -> NDArray[np.float64]:
        """Return the 3x4 matrix [R | t]."""
        mat: NDArray[np.float64] = np.zeros((3, 4), dtype=float)
        mat[:, :3] = self.rotation.as_matrix()
        mat[:, 3] = self.translation
        return mat

    def adjoint(self) -> NDArray[np.float64]:
        """Return the 6x6 adjoint matrix in the [omega; v] layout."""
        R: NDArray[np.float64] = self.rotation.as_matrix()
        Ad: NDArray[np.float64] = np.zeros((6, 6), dtype=float)
        Ad[:3, :3] = R
        Ad[3:, :3] = SO3.hat(self.translation) @ R
        Ad[3:, 3:] = R
        return Ad

    def tgt_origin_in_src(self) -> NDArray[np.float64]:
        """Return the origin of the target frame expressed in the source frame.

        For a cam_from_world pose this is the camera center in world
        coordinates.
        """
        return -self.rotation.inverse().rotate(self.translation)

    @overload
    def __mul__(self, other: "Rigid3d") -> "Rigid3d":
        ...

    @overload
    def __mul__(self, other: NDArray[np.float64]) -> NDArray[np.float64]:
        ...

    def __mul__(
        self, other: Union["Rigid3d", NDArray[np.float64]]
    ) -> Union["Rigid3d", NDArray[np.float64]]:
        """Compose with a transform or apply to a point."""
        if isinstance(other, Rigid3d):
            return self.compose(other)
        return self.transform_point(other)

    def __eq__(self, other: Any) -> bool:
        """Compare rotation coefficients and translation exactly."""
        if not isinstance(other, Rigid3d):
            return NotImplemented
        return bool(
            np.array_equal(self.rotation.to_xyzw(), other.rotation.to_xyzw())
            and np.array_equal(self.translation, other.translation)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return Rigid3d(rotation_xyzw=[...], translation=[...])."""
        return self.format()

    def format(self, params: Optional[GeometryParams] = None) -> str:
        """Return the textual form using the configured print precision."""
        config: GeometryParams = _params_or_default(params)
        return (
            "Rigid3d(rotation_xyzw=["
            + _format_components(self.rotation.to_xyzw(), config.print_precision)
            + "], translation=["
            + _format_components(self.translation, config.print_precision)
            + "])"
        )


def compose(c_from_b: Rigid3d, b_from_a: Rigid3d) -> Rigid3d:
    """Return c_from_a by chaining b_from_a and then c_from_b."""
    return c_from_b.compose(b_from_a)


def inverse(b_from_a: Rigid3d) -> Rigid3d:
    """Return a_from_b."""
    return b_from_a.inverse()
