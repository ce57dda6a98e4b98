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
Rotation, quaternion and numeric helpers
"""

from __future__ import annotations

from oasis_geometry.math_utils.linalg import SO3
from oasis_geometry.math_utils.linalg import Linalg
from oasis_geometry.math_utils.quat import Quaternion
from oasis_geometry.math_utils.rotation import UnitRotation


__all__ = ["Linalg", "Quaternion", "SO3", "UnitRotation"]
