#!/usr/bin/env python3
# =============================================================================
#     File: sampling.py
#  Created: 2026-10-19 11:02
#   Author: Bernie Roesler
#
"""
Description: Weighted sampling from a grid of candidate values.
"""
# =============================================================================

import numpy as np

from numbers import Integral

from .errors import DegenerateDistribution


def sample(values, probabilities, count, with_replacement=True, rng=None):
    """Draw `count` values with probability proportional to their weights.

    Parameters
    ----------
    values : (N,) or (N, ...) array_like
        Candidate values. Multi-dimensional input is sampled by row.
    probabilities : (N,) array_like of float
        Non-negative weights. They need not sum to 1.
    count : int
        Number of draws.
    with_replacement : bool, optional, default True
        If False, each value is drawn at most once.
    rng : int or :obj:`numpy.random.Generator`, optional
        Seed or generator. None uses fresh OS entropy.

    Returns
    -------
    samples : (count,) or (count, ...) ndarray
        The drawn values, in draw order.

    Raises
    ------
    DegenerateDistribution
        If all weights are zero.

    Examples
    --------
    >>> p_grid, posterior, _ = grid_binom_posterior(1000, k=6, n=9)
    >>> samples = sample(p_grid, posterior, 10_000, rng=56)
    >>> samples.shape
    === (10000,)
    """
    values = np.asarray(values)
    probs = np.asarray(probabilities, dtype=float).ravel()
    if values.ndim == 0:
        raise ValueError('`values` must be a sequence.')
    if len(values) != probs.size:
        raise ValueError(f"Got {len(values)} values but {probs.size} "
                         "probabilities.")
    if not isinstance(count, Integral) or isinstance(count, bool) or count < 0:
        raise ValueError(f"`count` must be a non-negative integer, got "
                         f"{count!r}.")
    if not np.all(np.isfinite(probs)) or np.any(probs < 0):
        raise ValueError('Probabilities must be finite and non-negative.')

    total = probs.sum()
    if total <= 0:
        raise DegenerateDistribution('All sampling weights are zero.')

    if not with_replacement and count > np.count_nonzero(probs):
        raise ValueError(f"Cannot draw {count} values without replacement "
                         f"from {np.count_nonzero(probs)} non-zero weights.")

    rng = np.random.default_rng(rng)
    idx = rng.choice(len(values), size=count, replace=with_replacement,
                     p=probs / total)
    return values[idx]

# =============================================================================
# =============================================================================
