################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of physics_matrix
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric helpers for the dense matrix engine."""
