#!/usr/bin/env python3
# =============================================================================
#     File: summary.py
#  Created: 2026-10-19 11:30
#   Author: Bernie Roesler
#
"""
Description: Interval and point summaries of a posterior.

Every summary accepts either posterior samples, or the posterior probability
grid itself: a one-parameter :obj:`GridPosterior`, or grid values with
`weights` (e.g. the index and values of a marginal Series). Summaries of the
grid are exact up to the grid resolution and need no sampling.
"""
# =============================================================================

import arviz as az
import numpy as np
import pandas as pd
import warnings

DEFAULT_Q = 0.89


def _grid_pmf(data, weights=None):
    """Return ``(values, probs)`` if `data` describes a grid distribution.

    Returns None for plain samples.
    """
    if hasattr(data, 'grid') and hasattr(data, 'probs'):
        if data.ndim != 1:
            raise ValueError(
                f"Got a {data.ndim}-dimensional posterior. Summarize one "
                'parameter at a time with `marginal`.'
            )
        return data.grid.grids[0].values, data.probs
    if weights is None:
        return None
    values = np.asarray(data, dtype=float).ravel()
    probs = np.asarray(weights, dtype=float).ravel()
    if values.size != probs.size:
        raise ValueError(f"Got {values.size} values but {probs.size} weights.")
    if np.any(probs < 0) or probs.sum() <= 0:
        raise ValueError('Weights must be non-negative with a positive sum.')
    order = np.argsort(values, kind='stable')
    return values[order], probs[order] / probs.sum()


def _grid_quantile(values, probs, qs):
    """Smallest grid value whose cumulative probability reaches each q."""
    cdf = np.cumsum(probs)
    idx = np.searchsorted(cdf, np.asarray(qs) * cdf[-1], side='left')
    return values[np.minimum(idx, values.size - 1)]


def _grid_hpdi(values, probs, q):
    """Smallest set of grid points holding mass `q`, as ``[low, high]``."""
    order = np.argsort(-probs, kind='stable')
    mass = np.cumsum(probs[order])
    n = min(int(np.searchsorted(mass, q * mass[-1], side='left')) + 1,
            values.size)
    kept = values[order[:n]]
    return np.array([kept.min(), kept.max()])


def _print_intervals(names, values, width, precision, bars=''):
    fstr = f"{width}.{precision}f"
    name_str = ' '.join([f"{n:>{width}s}" for n in names])
    value_str = ' '.join([f"{v:{fstr}}" for v in np.ravel(values)])
    print(f"{bars}{name_str}{bars}\n{value_str}")


def quantile(data, qs=DEFAULT_Q, weights=None, width=6, precision=4,
             verbose=False):
    """Compute quantiles of posterior samples or of a posterior grid.

    Parameters
    ----------
    data : array_like or :obj:`GridPosterior`
        Posterior samples, grid values (with `weights`), or a one-parameter
        grid posterior.
    qs : float or array_like of float in [0, 1]
        Quantile or sequence of quantiles to compute.
    weights : array_like, optional
        Probability of each value in `data`. Need not be normalized.
    width, precision : int
        Printing field width and decimal places.
    verbose : bool, optional, default=False
        Print the quantile names and values.

    Returns
    -------
    result : scalar or ndarray
        Same shape as `qs`. Grid quantiles are always grid values.

    Examples
    --------
    >>> m = post.marginal('mu')
    >>> quantile(m.index, 0.5, weights=m)  # posterior median of mu
    """
    qs = np.asarray(qs, dtype=float)
    pmf = _grid_pmf(data, weights)
    if pmf is None:
        result = np.quantile(np.asarray(data, dtype=float), qs)
    else:
        result = _grid_quantile(*pmf, qs)

    if verbose:
        _print_intervals([f"{100*q:g}%" for q in np.atleast_1d(qs)],
                         result, width, precision)
    return result


def percentiles(data, q=DEFAULT_Q, **kwargs):
    r"""Return the central interval containing `q` of the posterior.

    .. math:: a = \frac{1 - q}{2}

    and the interval is ``quantile(data, (a, 1 - a))``.

    See Also
    --------
    quantile
    """
    a = (1 - q) / 2
    return quantile(data, (a, 1-a), **kwargs)


def hpdi(data, q=DEFAULT_Q, weights=None, width=6, precision=4,
         verbose=False):
    """Compute the highest posterior density interval.

    For samples, this is `arviz.hdi`. For a grid, the interval spans the
    fewest, most probable grid points that together hold mass `q`.

    Parameters
    ----------
    data : array_like or :obj:`GridPosterior`
        See `quantile`.
    q : float or array_like of float
        Probability mass of each interval.
    weights : array_like, optional
        Probability of each value in `data`.
    width, precision : int
        Printing field width and decimal places.
    verbose : bool, optional, default=False
        Print the interval bounds.

    Returns
    -------
    result : (2,) or (Q, 2) ndarray
        Lower and upper bounds of each interval.
    """
    qs = np.asarray(q, dtype=float)

    if verbose and qs.size > 1:
        verbose = False
        warnings.warn("verbose flag only valid for singleton q.")

    pmf = _grid_pmf(data, weights)
    if pmf is None:
        samples = np.asarray(data, dtype=float).ravel()
        interval = lambda p: az.hdi(samples, hdi_prob=p)
    else:
        interval = lambda p: _grid_hpdi(*pmf, p)

    if qs.ndim == 0:
        H = interval(float(qs))
    else:
        H = np.stack([interval(float(p)) for p in qs])

    if verbose:
        pct = f"{100*float(qs):g}%"
        _print_intervals([f"|{pct}", f"{pct}|"], H, width, precision)
    return H


def _grid_moments(values, probs, q):
    """Mean, std, and central interval of a grid distribution."""
    mean = np.sum(values * probs)
    std = np.sqrt(np.sum((values - mean)**2 * probs))
    a = (1 - q) / 2
    return [mean, std, *_grid_quantile(values, probs, (a, 1-a))]


def precis(obj, q=DEFAULT_Q, digits=4, verbose=True):
    """Return a `DataFrame` of the mean, standard deviation, and percentile
    interval of each parameter.

    Parameters
    ----------
    obj : :obj:`GridPosterior`, DataFrame, Series, or array_like
        A posterior grid of any dimension, whose marginals are summarized
        exactly, or posterior samples with one column per parameter.
    q : float in [0, 1]
        The probability mass of the percentile interval.
    digits : int
        Number of digits in the printed output if `verbose=True`.
    verbose : bool
        If True, print the output.

    Returns
    -------
    result : DataFrame
        A DataFrame with a row for each parameter, and columns for mean,
        standard deviation, and low/high percentiles of the parameter.
    """
    a = (1 - q) / 2
    pp = 100 * np.array([a, 1-a])  # percentiles for printing
    columns = ['mean', 'std', f"{pp[0]:g}%", f"{pp[1]:g}%"]

    if hasattr(obj, 'grid') and hasattr(obj, 'probs'):
        title = f"'GridPosterior': {obj.grid!r}"
        rows = {name: _grid_moments(m.index.to_numpy(), m.to_numpy(), q)
                for name, m in obj.marginals().items()}
        df = pd.DataFrame.from_dict(rows, orient='index', columns=columns)
    else:
        if isinstance(obj, pd.Series):
            obj = obj.to_frame()
        elif not isinstance(obj, pd.DataFrame):
            obj = pd.DataFrame(np.asarray(obj, dtype=float).reshape(
                len(obj), -1))
        obj = obj.select_dtypes(include=np.number)
        title = f"'DataFrame': {obj.shape[0]:d} obs. of {obj.shape[1]} variables:"
        df = pd.concat([obj.mean(), obj.std(), obj.quantile(a),
                        obj.quantile(1-a)], axis=1)
        df.columns = columns

    if verbose:
        print(title)
        with pd.option_context('display.float_format',
                               f"{{:.{digits}f}}".format):
            print(df)

    return df

# =============================================================================
# =============================================================================
