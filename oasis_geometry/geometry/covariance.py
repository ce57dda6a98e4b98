################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""First-order covariance propagation for Rigid3d poses.

Responsibility:
    Map pose covariances through inversion, composition and relative-pose
    computation using the SE(3) adjoint.

Data contract:
    - Covariances are over right perturbations T = T_hat * Exp(xi) with
      xi = [omega; v], rotation first.
    - Joint covariances of two poses are 12x12 with the first pose's block
      first.
    - Inputs are mapped as given. Symmetry and positive semi-definiteness are
      not checked, and outputs are not symmetrized.

Equations:
    Inverse, a_from_b = inverse(b_from_a):
        Σ_ab = Ad(b_from_a) Σ_ba Ad(b_from_a)^T

    Composition, c_from_a = c_from_b * b_from_a:
        J = [Ad(inverse(b_from_a)), I]
        Σ_ca = J Σ_joint J^T

    Relative pose, cam2_from_cam1 = cam2_from_world * inverse(cam1_from_world):
        J = Ad(cam1_from_world) [-I, I]
        Σ_21 = J Σ_joint J^T
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oasis_geometry.geometry.rigid3 import Rigid3d
from oasis_geometry.math_utils.linalg import Linalg
from oasis_geometry.math_utils.units import assert_finite


def _as_covariance(
    cov: NDArray[np.float64], size: int, name: str
) -> NDArray[np.float64]:
    """Return a finite float64 view of a square covariance."""
    mat: NDArray[np.float64] = np.asarray(cov, dtype=float)
    Linalg.ensure_shape(mat, (size, size), name)
    assert_finite(mat, name)
    return mat


def get_covariance_for_rigid3d_inverse(
    b_from_a: Rigid3d, cov_b_from_a: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Return the covariance of inverse(b_from_a)."""
    cov: NDArray[np.float64] = _as_covariance(cov_b_from_a, 6, "cov_b_from_a")
    return Linalg.congruence(b_from_a.adjoint(), cov)


def get_covariance_for_composed_rigid3d(
    b_from_a: Rigid3d, joint_cov: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Return the covariance of c_from_b * b_from_a.

    joint_cov is the 12x12 covariance of (c_from_b, b_from_a). Only the right
    operand enters the Jacobian.
    """
    cov: NDArray[np.float64] = _as_covariance(joint_cov, 12, "joint_cov")
    J: NDArray[np.float64] = np.hstack(
        [b_from_a.inverse().adjoint(), np.eye(6, dtype=float)]
    )
    return Linalg.congruence(J, cov)


def get_covariance_for_relative_rigid3d(
    cam1_from_world: Rigid3d, joint_cov: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Return the covariance of cam2_from_world * inverse(cam1_from_world).

    joint_cov is the 12x12 covariance of (cam1_from_world, cam2_from_world).
    """
    cov: NDArray[np.float64] = _as_covariance(joint_cov, 12, "joint_cov")
    Ad: NDArray[np.float64] = cam1_from_world.adjoint()
    J: NDArray[np.float64] = np.hstack([-Ad, Ad])
    return Linalg.congruence(J, cov)
