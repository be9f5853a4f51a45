#!/usr/bin/env python3
# =============================================================================
#     File: errors.py
#  Created: 2026-10-19 09:12
#   Author: Bernie Roesler
#
"""
Description: Exceptions raised by the grid approximation engine.
"""
# =============================================================================


class GridApproxError(ValueError):
    """Base class for all grid approximation errors."""


class InvalidParameter(GridApproxError):
    """Malformed distribution parameters, e.g. a non-positive scale."""


class InvalidGrid(GridApproxError):
    """Empty, non-finite, or non-increasing grid definition."""


class DegenerateGrid(GridApproxError):
    """The joint density is zero (or not finite) everywhere on the grid."""


class InvalidAxis(GridApproxError):
    """Marginalization over a dimension that does not exist."""


class DegenerateDistribution(GridApproxError):
    """All sampling weights are zero."""


class GridResolutionWarning(UserWarning):
    """The grid is too coarse to resolve the posterior."""

# =============================================================================
# =============================================================================
