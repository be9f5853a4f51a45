#!/usr/bin/env python3
# =============================================================================
#     File: posterior.py
#  Created: 2026-10-19 10:05
#   Author: Bernie Roesler
#
r"""
Description: Grid approximation of the posterior distribution.

Bayes' rule numerator:

    ..math::
        P(p | data) \propto P(data | p) P(p),

evaluated at every point of a (joint) parameter grid, taking advantage of the
fact that :math:`\log(ab) = \log(a) + \log(b)` to avoid underflow when the
likelihood of many observations is tiny everywhere.
"""
# =============================================================================

import numpy as np
import pandas as pd
import warnings

from tqdm import tqdm
from tqdm.contrib.concurrent import thread_map

from .distributions import Likelihood, binomial_likelihood
from .errors import DegenerateGrid, GridResolutionWarning, InvalidParameter
from .grid import Grid, JointGrid
from .marginal import marginal
from .sampling import sample

# Warn when a single grid point carries more than this much posterior mass
POINT_MASS_WARN = 0.5


class GridPosterior:
    """Posterior probability mass function over a joint parameter grid.

    Parameters
    ----------
    grid : :obj:`JointGrid`
        The grid on which the posterior was evaluated.
    probs : ndarray of shape ``grid.shape``
        Non-negative probabilities summing to 1.

    Attributes
    ----------
    probs : ndarray
        Read-only copy of the probability grid.
    """

    def __init__(self, grid, probs):
        grid = JointGrid.coerce(grid)
        probs = np.array(probs, dtype=float)
        if probs.shape != grid.shape:
            raise ValueError(f"Probability shape {probs.shape} does not "
                             f"match grid shape {grid.shape}.")
        probs.setflags(write=False)
        self.grid = grid
        self.probs = probs

    @property
    def names(self):
        return self.grid.names

    @property
    def ndim(self):
        return self.grid.ndim

    @property
    def shape(self):
        return self.grid.shape

    def marginal(self, axis):
        """Marginal distribution of one parameter. See `marginal`."""
        return marginal(self, axis)

    def marginals(self):
        """Dictionary of the marginal distribution of every parameter."""
        return {name: marginal(self, name) for name in self.names}

    def mode(self):
        """Return the maximum a posteriori grid point as a dict."""
        idx = np.unravel_index(np.argmax(self.probs), self.shape)
        return dict(zip(self.names, self.grid.point(idx)))

    def to_frame(self):
        """Long-form DataFrame of grid points and their posterior mass."""
        df = self.grid.to_frame()
        df['posterior'] = self.probs.ravel()
        return df

    def sample(self, count, rng=None):
        """Draw joint samples from the posterior.

        Parameters
        ----------
        count : int
            Number of samples.
        rng : int or :obj:`numpy.random.Generator`, optional
            Seed or generator used for the draws.

        Returns
        -------
        samples : DataFrame
            One column per parameter, `count` rows.
        """
        idx = sample(np.arange(self.probs.size), self.probs.ravel(), count,
                     rng=rng)
        coords = np.unravel_index(idx, self.shape)
        return pd.DataFrame({name: g.values[c] for name, g, c
                             in zip(self.names, self.grid.grids, coords)})

    def __repr__(self):
        return f"GridPosterior({self.grid!r})"


def _prior_list(prior_specs, ndim):
    """Return one prior (or None) per grid axis."""
    if prior_specs is None:
        return [None] * ndim
    if hasattr(prior_specs, 'logpdf') or callable(prior_specs):
        prior_specs = [prior_specs]
    prior_specs = list(prior_specs)
    if len(prior_specs) != ndim:
        raise ValueError(f"Got {len(prior_specs)} priors for a "
                         f"{ndim}-dimensional grid.")
    return prior_specs


def _safe_log(values, what):
    """Log of non-negative values, with log(0) == -inf."""
    values = np.asarray(values, dtype=float)
    if np.any(values < 0):
        raise InvalidParameter(f"The {what} must be non-negative.")
    with np.errstate(divide='ignore'):
        return np.log(values)


def _log_mul(a, b):
    """Log of a product of densities, where 0 * inf == 0."""
    zero = np.isneginf(a) | np.isneginf(b)
    with np.errstate(invalid='ignore'):
        return np.where(zero, -np.inf, a + b)


def log_prior(prior, values):
    """Log prior density of one parameter evaluated on its grid values.

    `prior` may be anything with a `logpdf` method (e.g. a :obj:`Density`),
    a plain callable returning prior densities, or None for a flat prior.
    """
    values = np.asarray(values, dtype=float)
    if prior is None:
        return np.zeros(values.shape)
    if hasattr(prior, 'logpdf'):
        lp = np.asarray(prior.logpdf(values), dtype=float)
    else:
        lp = _safe_log(prior(values), 'prior density')
    return np.broadcast_to(lp, values.shape)


def log_likelihood_grid(data, likelihood_fn, grid, log_likelihood=False,
                        vectorized=None, parallel=False, max_workers=None,
                        progressbar=False):
    """Evaluate the log likelihood at every point of the joint grid.

    Parameters
    ----------
    data : Any
        The observed data, passed through to `likelihood_fn`.
    likelihood_fn : :obj:`Likelihood` or callable ``f(data, point)``
        The likelihood. `point` is a tuple with one value per parameter.
    grid : :obj:`JointGrid`
        The joint parameter grid.
    log_likelihood : bool, optional, default False
        If True, a plain callable `likelihood_fn` returns the log likelihood.
    vectorized : bool, optional
        If True, call `likelihood_fn` once with the mesh arrays of the grid
        instead of once per point. Defaults to True for :obj:`Likelihood`
        objects and False otherwise.
    parallel : bool, optional, default False
        If True, evaluate the points in a pool of threads. Ignored when
        `vectorized` is True.
    max_workers : int, optional
        Number of threads when `parallel` is True.
    progressbar : bool, optional, default False
        If True, show a progress bar for point-wise evaluation.

    Returns
    -------
    result : ndarray of shape ``grid.shape``
    """
    if isinstance(likelihood_fn, Likelihood):
        func = likelihood_fn.logpdf
    elif log_likelihood:
        func = likelihood_fn
    else:
        def func(data, point):
            return _safe_log(likelihood_fn(data, point), 'likelihood')

    if vectorized is None:
        vectorized = isinstance(likelihood_fn, Likelihood)

    if vectorized:
        ll = np.asarray(func(data, grid.mesh()), dtype=float)
        return np.broadcast_to(ll, grid.shape).copy()

    points = list(grid)

    def point_func(point):
        return float(func(data, point))

    if parallel:
        ll = thread_map(point_func, points, max_workers=max_workers,
                        desc='grid', leave=False, disable=not progressbar)
    else:
        if progressbar:
            points = tqdm(points, desc='grid', leave=False)
        ll = [point_func(p) for p in points]

    # Points are joined in index order, so the reduction does not depend on
    # the number of threads.
    return np.reshape(np.asarray(ll, dtype=float), grid.shape)


def log_unnormalized(data, likelihood_fn, grid, prior_specs=None, **kwargs):
    r"""Log of the unnormalized joint posterior on the grid.

    .. math::
        \log u(p) = \log L(data, p) + \sum_i \log P_i(p_i)

    The priors form an outer product over the axes of the grid.

    Parameters
    ----------
    data, likelihood_fn, grid, prior_specs
        See `evaluate`.
    **kwargs
        Passed to `log_likelihood_grid`.

    Returns
    -------
    result : ndarray of shape ``grid.shape``
    """
    grid = JointGrid.coerce(grid)
    priors = _prior_list(prior_specs, grid.ndim)
    log_u = log_likelihood_grid(data, likelihood_fn, grid, **kwargs)
    for i, (prior, g) in enumerate(zip(priors, grid.grids)):
        shape = [1] * grid.ndim
        shape[i] = len(g)
        log_u = _log_mul(log_u, log_prior(prior, g.values).reshape(shape))
    return log_u


def normalize(log_u, grid):
    """Convert a log unnormalized joint density into a :obj:`GridPosterior`.

    Parameters
    ----------
    log_u : ndarray
        Log unnormalized density, of shape ``grid.shape``.
    grid : :obj:`JointGrid`, :obj:`Grid`, or sequence of :obj:`Grid`
        The grid on which `log_u` was evaluated.

    Returns
    -------
    result : :obj:`GridPosterior`

    Raises
    ------
    DegenerateGrid
        If the density is zero everywhere, or contains NaN or +inf values.
    """
    grid = JointGrid.coerce(grid)
    log_u = np.asarray(log_u, dtype=float)
    if np.any(np.isnan(log_u)):
        raise DegenerateGrid('Joint density is NaN on part of the grid.')
    if np.any(np.isposinf(log_u)):
        raise DegenerateGrid('Joint density is infinite on part of the grid.')
    log_max = log_u.max()
    if np.isneginf(log_max):
        raise DegenerateGrid('Joint density is zero at every grid point.')
    # Un-logify relative to the maximum, then standardize to sum to 1
    unstd_post = np.exp(log_u - log_max)
    posterior = unstd_post / np.sum(unstd_post)

    if grid.size > 1 and posterior.max() > POINT_MASS_WARN:
        warnings.warn(f"{posterior.max():.2%} of the posterior mass lies on "
                      'a single grid point. Consider a finer grid.',
                      GridResolutionWarning, stacklevel=2)

    return GridPosterior(grid, posterior)


def evaluate(data, likelihood_fn, grid, prior_specs=None, **kwargs):
    """Compute the posterior probability grid.

    Parameters
    ----------
    data : Any
        The observed data, passed through to `likelihood_fn`.
    likelihood_fn : :obj:`Likelihood` or callable ``f(data, point)``
        The likelihood of the data at a grid point ``(p1, ..., pN)``.
    grid : :obj:`JointGrid`, :obj:`Grid`, or sequence of :obj:`Grid`
        One grid per parameter.
    prior_specs : :obj:`Density`, callable, or sequence thereof, optional
        One prior per parameter. None, or a None entry, is a flat prior.
    **kwargs
        `log_likelihood`, `vectorized`, `parallel`, `max_workers`,
        `progressbar`. See `log_likelihood_grid`.

    Returns
    -------
    result : :obj:`GridPosterior`

    Examples
    --------
    >>> p_grid = Grid.from_range(0, 1, 0.01, name='p')
    >>> post = evaluate((5, 10), binomial_likelihood, p_grid, Beta(2, 2))
    >>> post.mode()
    === {'p': 0.5}
    """
    grid = JointGrid.coerce(grid)
    log_u = log_unnormalized(data, likelihood_fn, grid, prior_specs, **kwargs)
    return normalize(log_u, grid)


def grid_binom_posterior(Np, k, n, prior_func=None, norm_post=True):
    """Posterior probability assuming a binomial distribution likelihood and
    arbitrary prior.

    Parameters
    ----------
    Np : int
        Number of parameter values to use.
    k : int
        Number of event occurrences observed.
    n : int
        Number of trials performed.
    prior_func : :obj:`Density` or callable, optional, default U(0, 1)
        Prior distribution of the success probability.
        If prior_func is None, it defaults to a uniform prior.
    norm_post : bool, optional, default True
        If True, normalize posterior to sum to 1. Otherwise, scale it to a
        maximum value of 1.

    Returns
    -------
    p_grid : (Np,) ndarray
        Vector of parameter values.
    posterior : (Np,) ndarray
        Vector of posterior probability values.
    prior : (Np,) ndarray
        Vector of prior density values.
    """
    p_grid = Grid.linspace(0, 1, Np, name='p')
    log_u = log_unnormalized((k, n), binomial_likelihood, p_grid, [prior_func])
    if norm_post:
        posterior = normalize(log_u, p_grid).probs
    else:
        posterior = np.exp(log_u - log_u.max())
    prior = np.exp(log_prior(prior_func, p_grid.values))
    return p_grid.values, posterior, prior

# =============================================================================
# =============================================================================
