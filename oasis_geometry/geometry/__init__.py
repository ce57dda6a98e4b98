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
Rigid transforms in SE(3) and their covariance
"""

from __future__ import annotations

from oasis_geometry.geometry.covariance import get_covariance_for_composed_rigid3d
from oasis_geometry.geometry.covariance import get_covariance_for_relative_rigid3d
from oasis_geometry.geometry.covariance import get_covariance_for_rigid3d_inverse
from oasis_geometry.geometry.rigid3 import Rigid3d
from oasis_geometry.geometry.rigid3 import compose
from oasis_geometry.geometry.rigid3 import inverse


__all__ = [
    "Rigid3d",
    "compose",
    "get_covariance_for_composed_rigid3d",
    "get_covariance_for_relative_rigid3d",
    "get_covariance_for_rigid3d_inverse",
    "inverse",
]
