#!/usr/bin/env python3
# =============================================================================
#     File: marginal.py
#  Created: 2026-10-19 10:48
#   Author: Bernie Roesler
#
"""
Description: Marginal distributions of a joint posterior grid.
"""
# =============================================================================

import numpy as np
import pandas as pd

from numbers import Integral

from .errors import InvalidAxis


def _axis_num(axis, ndim, names=None):
    """Validate `axis` and return it as a non-negative index."""
    if isinstance(axis, str):
        if names is None or axis not in names:
            raise InvalidAxis(f"Unknown parameter '{axis}'.")
        return names.index(axis)
    if not isinstance(axis, Integral) or isinstance(axis, bool):
        raise InvalidAxis(f"Axis must be an integer, got {axis!r}.")
    if not 0 <= axis < ndim:
        raise InvalidAxis(f"Axis {axis} is out of range for a "
                          f"{ndim}-dimensional grid.")
    return int(axis)


def marginal(posterior, axis):
    """Sum the joint posterior over every axis except `axis`.

    Parameters
    ----------
    posterior : :obj:`GridPosterior` or array_like
        The joint posterior probability grid.
    axis : int or str
        Index of the parameter to keep, or its name if `posterior` is a
        :obj:`GridPosterior`.

    Returns
    -------
    result : Series or ndarray
        If `posterior` is a :obj:`GridPosterior`, a Series of probabilities
        indexed by the grid values of the kept parameter. Otherwise a 1-D
        ndarray.

    Raises
    ------
    InvalidAxis
        If `axis` is not a dimension of the grid.

    Examples
    --------
    >>> post = evaluate(heights, normal_likelihood, (mu_grid, sigma_grid))
    >>> post.marginal('mu').sum()
    === 1.0
    """
    probs = getattr(posterior, 'probs', posterior)
    probs = np.asarray(probs, dtype=float)
    grid = getattr(posterior, 'grid', None)
    names = None if grid is None else list(grid.names)

    i = _axis_num(axis, probs.ndim, names)
    others = tuple(j for j in range(probs.ndim) if j != i)
    result = probs.sum(axis=others)

    if grid is None:
        return result

    return pd.Series(result,
                     index=pd.Index(grid.grids[i].values, name=names[i]),
                     name=names[i])

# =============================================================================
# =============================================================================
