#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2026-10-19 09:05
#   Author: Bernie Roesler
#
"""
Description: Grid approximation of Bayesian posterior distributions.

Typical usage::

    import grid_rethinking as grt

    p_grid = grt.Grid.from_range(0, 1, 0.01, name='p')
    post = grt.evaluate((5, 10), grt.binomial_likelihood, p_grid,
                        grt.Beta(2, 2))
    samples = post.sample(10_000, rng=56)
"""
# =============================================================================

from .distributions import (
    Beta,
    Binomial,
    BinomialLikelihood,
    Cauchy,
    Density,
    FAMILIES,
    Likelihood,
    Normal,
    NormalLikelihood,
    Uniform,
    binom_mass,
    binomial_likelihood,
    make_density,
    normal_likelihood,
)
from .errors import (
    DegenerateDistribution,
    DegenerateGrid,
    GridApproxError,
    GridResolutionWarning,
    InvalidAxis,
    InvalidGrid,
    InvalidParameter,
)
from .grid import Grid, JointGrid, expand_grid
from .marginal import marginal
from .posterior import (
    GridPosterior,
    evaluate,
    grid_binom_posterior,
    log_likelihood_grid,
    log_prior,
    log_unnormalized,
    normalize,
)
from .sampling import sample
from .summary import hpdi, percentiles, precis, quantile

# =============================================================================
# =============================================================================
