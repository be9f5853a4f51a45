#!/usr/bin/env python3
# =============================================================================
#     File: distributions.py
#  Created: 2026-10-19 09:20
#   Author: Bernie Roesler
#
r"""
Description: Prior densities and likelihood kernels for grid approximation.

Each prior family is a small immutable wrapper around a frozen
`scipy.stats` distribution that validates its parameters up front, so that
bad parameters raise `InvalidParameter` instead of silently producing NaNs on
the grid.

Likelihood kernels take the observed data and a grid point
:math:`(p_1, \dots, p_N)`, and return :math:`P(data | p)`. The components of
the point may be scalars or broadcastable arrays.
"""
# =============================================================================

import numpy as np

from abc import ABC, abstractmethod
from numbers import Integral
from scipy import stats

from .errors import InvalidParameter


def _check_finite(**kwargs):
    for name, value in kwargs.items():
        if not np.isfinite(value):
            raise InvalidParameter(f"`{name}` must be finite, got {value}.")


def _check_positive(**kwargs):
    _check_finite(**kwargs)
    for name, value in kwargs.items():
        if value <= 0:
            raise InvalidParameter(f"`{name}` must be positive, got {value}.")


def _check_count(**kwargs):
    for name, value in kwargs.items():
        if not isinstance(value, Integral) or value < 0:
            raise InvalidParameter(
                f"`{name}` must be a non-negative integer, got {value!r}."
            )


def _check_probability(p):
    p = np.asarray(p, dtype=float)
    if not np.all((p >= 0) & (p <= 1)):
        raise InvalidParameter('Success probability must lie in [0, 1].')
    return p


# -----------------------------------------------------------------------------
#         Prior families
# -----------------------------------------------------------------------------
class Density(ABC):
    """A frozen, parameterized probability density (or mass) function.

    Subclasses set `_params` and `_dist` in `__init__` and are never modified
    afterwards.
    """
    name = None

    def __init__(self):
        self._params = dict()
        self._dist = None

    def __setattr__(self, attr, value):
        if getattr(self, '_dist', None) is not None:
            raise AttributeError(f"{type(self).__name__} is immutable.")
        super().__setattr__(attr, value)

    @property
    def params(self):
        """The distribution parameters as a dict."""
        return dict(self._params)

    def pdf(self, x):
        """Evaluate the density at `x`."""
        return self._dist.pdf(x)

    def logpdf(self, x):
        """Evaluate the log density at `x`."""
        return self._dist.logpdf(x)

    def density(self, x):
        return self.pdf(x)

    def rvs(self, size=None, rng=None):
        """Draw random variates using an explicit generator."""
        return self._dist.rvs(size=size,
                              random_state=np.random.default_rng(rng))

    def __eq__(self, other):
        return type(self) is type(other) and self._params == other._params

    def __hash__(self):
        return hash((type(self).__name__, tuple(self._params.items())))

    def __repr__(self):
        args = ', '.join(f"{k}={v}" for k, v in self._params.items())
        return f"{type(self).__name__}({args})"


class Beta(Density):
    r"""Beta distribution :math:`\mathrm{B}(a, b)` on :math:`[0, 1]`."""
    name = 'beta'

    def __init__(self, a, b):
        super().__init__()
        _check_positive(a=a, b=b)
        self._params = dict(a=a, b=b)
        self._dist = stats.beta(a, b)


class Uniform(Density):
    r"""Continuous uniform distribution :math:`\mathcal{U}(a, b)`."""
    name = 'uniform'

    def __init__(self, a=0, b=1):
        super().__init__()
        _check_finite(a=a, b=b)
        if a >= b:
            raise InvalidParameter(f"Uniform requires a < b, got {a} >= {b}.")
        self._params = dict(a=a, b=b)
        self._dist = stats.uniform(loc=a, scale=b - a)


class Normal(Density):
    r"""Normal distribution :math:`\mathcal{N}(\mu, \sigma)`."""
    name = 'normal'

    def __init__(self, mu=0, sigma=1):
        super().__init__()
        _check_finite(mu=mu)
        _check_positive(sigma=sigma)
        self._params = dict(mu=mu, sigma=sigma)
        self._dist = stats.norm(mu, sigma)


class Cauchy(Density):
    """Cauchy distribution with location `loc` and scale `scale`."""
    name = 'cauchy'

    def __init__(self, loc=0, scale=1):
        super().__init__()
        _check_finite(loc=loc)
        _check_positive(scale=scale)
        self._params = dict(loc=loc, scale=scale)
        self._dist = stats.cauchy(loc, scale)


class Binomial(Density):
    """Binomial distribution of the number of successes in `n` trials."""
    name = 'binomial'

    def __init__(self, n, p):
        super().__init__()
        _check_count(n=n)
        _check_finite(p=p)
        _check_probability(p)
        self._params = dict(n=n, p=p)
        self._dist = stats.binom(n, p)

    def pmf(self, k):
        return self._dist.pmf(k)

    def logpmf(self, k):
        return self._dist.logpmf(k)

    # A discrete "density" is its mass function
    pdf = mass = pmf
    logpdf = logpmf


FAMILIES = {cls.name: cls for cls in (Beta, Uniform, Normal, Cauchy, Binomial)}


def make_density(name, **params):
    """Build a density from a configuration entry.

    Parameters
    ----------
    name : str in {'beta', 'uniform', 'normal', 'cauchy', 'binomial'}
        The distribution family.
    **params
        Keyword arguments of the family constructor.

    Returns
    -------
    result : :obj:`Density`

    Examples
    --------
    >>> make_density('beta', a=2, b=11)
    === Beta(a=2, b=11)
    """
    try:
        cls = FAMILIES[name.lower()]
    except KeyError:
        raise InvalidParameter(
            f"Unknown distribution '{name}'. Choose from {list(FAMILIES)}."
        ) from None
    try:
        return cls(**params)
    except TypeError as e:
        raise InvalidParameter(f"Bad parameters for '{name}': {e}") from e


def binom_mass(k, n, p):
    """Binomial probability of `k` successes in `n` trials.

    Parameters
    ----------
    k, n : int
        Number of successes and trials, ``0 <= k <= n``.
    p : float or array_like of float in [0, 1]
        Success probability, e.g. a grid of candidate values.

    Returns
    -------
    result : float or ndarray
        Same shape as `p`.
    """
    _check_count(k=k, n=n)
    if k > n:
        raise InvalidParameter(f"k must not exceed n, got k={k}, n={n}.")
    return stats.binom.pmf(k, n, _check_probability(p))


# -----------------------------------------------------------------------------
#         Likelihood kernels
# -----------------------------------------------------------------------------
class Likelihood(ABC):
    """Probability of the observed data given a grid point.

    Subclasses compute the log likelihood, which is what the posterior
    evaluator needs to stay stable on wide grids.
    """

    @abstractmethod
    def logpdf(self, data, point):
        """Return :math:`\\log P(data | point)`."""

    def __call__(self, data, point):
        return np.exp(self.logpdf(data, point))


class BinomialLikelihood(Likelihood):
    """Likelihood of ``data = (k, n)`` given ``point = (p,)``.

    Points with `p` outside of [0, 1] have zero likelihood.
    """

    def logpdf(self, data, point):
        k, n = data
        _check_count(k=k, n=n)
        if k > n:
            raise InvalidParameter(f"k must not exceed n, got k={k}, n={n}.")
        p = np.asarray(point[0], dtype=float)
        valid = (p >= 0) & (p <= 1)
        ll = stats.binom.logpmf(k, n, np.where(valid, p, 0.5))
        return np.where(valid, ll, -np.inf)


class NormalLikelihood(Likelihood):
    r"""Joint likelihood of i.i.d. observations given ``point = (mu, sigma)``.

    .. math::
        \log P(x | \mu, \sigma) = \sum_i \log \mathcal{N}(x_i | \mu, \sigma)

    Points with :math:`\sigma \le 0` have zero likelihood.
    """

    def logpdf(self, data, point):
        mu, sigma = np.broadcast_arrays(*(np.asarray(v, dtype=float)
                                          for v in point))
        x = np.asarray(data, dtype=float).reshape((-1,) + (1,) * mu.ndim)
        valid = sigma > 0
        with np.errstate(invalid='ignore', divide='ignore'):
            ll = stats.norm.logpdf(x, mu, np.where(valid, sigma, 1.0))
        return np.where(valid, ll.sum(axis=0), -np.inf)


binomial_likelihood = BinomialLikelihood()
normal_likelihood = NormalLikelihood()

# =============================================================================
# =============================================================================
