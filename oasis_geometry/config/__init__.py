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
Configuration for geometry utilities
"""

from __future__ import annotations

from oasis_geometry.config.geometry_params import GeometryParams
from oasis_geometry.config.geometry_params import GeometryParamsError


__all__ = ["GeometryParams", "GeometryParamsError"]
