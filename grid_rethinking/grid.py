#!/usr/bin/env python3
# =============================================================================
#     File: grid.py
#  Created: 2026-10-19 09:41
#   Author: Bernie Roesler
#
"""
Description: Discretized parameter domains for grid approximation.
"""
# =============================================================================

import itertools
import numpy as np
import pandas as pd

from .errors import InvalidGrid

# Fraction of a step by which `stop` may be overshot due to rounding, so that
# ``from_range(0, 1, 0.01)`` includes 1.0.
RANGE_TOL = 1e-9


class Grid:
    """A strictly increasing, finite sequence of candidate parameter values.

    Parameters
    ----------
    values : 1-D array_like of float
        The grid points, in strictly increasing order.
    name : str, optional
        Name of the parameter the grid discretizes.

    Examples
    --------
    >>> p_grid = Grid.from_range(0, 1, 0.25, name='p')
    >>> p_grid.values
    === array([0.  , 0.25, 0.5 , 0.75, 1.  ])
    """

    def __init__(self, values, name=None):
        values = np.array(values, dtype=float)
        if values.ndim != 1:
            raise InvalidGrid(f"Grid must be 1-D, got shape {values.shape}.")
        if values.size == 0:
            raise InvalidGrid('Grid must contain at least one point.')
        if not np.all(np.isfinite(values)):
            raise InvalidGrid('Grid values must be finite.')
        if np.any(np.diff(values) <= 0):
            raise InvalidGrid('Grid values must be strictly increasing.')
        values.setflags(write=False)
        self._values = values
        self.name = name

    @classmethod
    def from_range(cls, start, stop, step, name=None):
        """Grid of ``start, start + step, ...`` up to and including `stop`."""
        if not all(np.isfinite([start, stop, step])):
            raise InvalidGrid('Grid range must be finite.')
        if step <= 0:
            raise InvalidGrid(f"Grid step must be positive, got {step}.")
        if start > stop:
            raise InvalidGrid(f"Grid start {start} exceeds stop {stop}.")
        Np = int(np.floor((stop - start) / step + RANGE_TOL)) + 1
        values = start + step * np.arange(Np)
        # Don't let rounding push the last point past `stop`
        values[-1] = min(values[-1], stop)
        return cls(values, name=name)

    @classmethod
    def linspace(cls, start, stop, num, name=None):
        """Grid of `num` evenly spaced points over ``[start, stop]``."""
        if num < 1:
            raise InvalidGrid(f"Grid needs at least one point, got {num}.")
        if num > 1 and start >= stop:
            raise InvalidGrid(f"Grid start {start} must be less than {stop}.")
        return cls(np.linspace(start, stop, num), name=name)

    @property
    def values(self):
        """The (read-only) grid points."""
        return self._values

    def __len__(self):
        return self._values.size

    def __getitem__(self, idx):
        return self._values[idx]

    def __iter__(self):
        return iter(self._values)

    def __array__(self, dtype=None, copy=None):
        return np.asarray(self._values, dtype=dtype)

    def __eq__(self, other):
        return (isinstance(other, Grid)
                and self.name == other.name
                and np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self):
        lo, hi = self._values[0], self._values[-1]
        return f"Grid(name={self.name!r}, [{lo:g}, {hi:g}], size={len(self)})"


class JointGrid:
    """Cartesian product of one-dimensional grids.

    Axis ``i`` of the joint index space corresponds to ``grids[i]``, in the
    same order as ``numpy.meshgrid(..., indexing='ij')``, so summing over an
    axis marginalizes out exactly that parameter.

    Parameters
    ----------
    *grids : :obj:`Grid` or 1-D array_like
        One grid per parameter.
    names : sequence of str, optional
        Parameter names. Defaults to each grid's `name`, or ``'x{i}'``.
    """

    def __init__(self, *grids, names=None):
        if not grids:
            raise InvalidGrid('JointGrid requires at least one grid.')
        grids = tuple(g if isinstance(g, Grid) else Grid(g) for g in grids)
        if names is None:
            names = [g.name if g.name is not None else f"x{i}"
                     for i, g in enumerate(grids)]
        names = tuple(names)
        if len(names) != len(grids):
            raise ValueError(f"Got {len(names)} names for {len(grids)} grids.")
        if len(set(names)) != len(names):
            raise InvalidGrid(f"Parameter names must be unique: {names}.")
        self.grids = grids
        self.names = names

    @classmethod
    def coerce(cls, grid):
        """Return `grid` as a :obj:`JointGrid`.

        Accepts a :obj:`JointGrid`, a single :obj:`Grid`, or a sequence of
        :obj:`Grid`.
        """
        if isinstance(grid, JointGrid):
            return grid
        if isinstance(grid, Grid):
            return cls(grid)
        return cls(*grid)

    @property
    def ndim(self):
        return len(self.grids)

    @property
    def shape(self):
        return tuple(len(g) for g in self.grids)

    @property
    def size(self):
        return int(np.prod(self.shape))

    def axis_num(self, name):
        """Return the axis index of the parameter `name`."""
        return self.names.index(name)

    def mesh(self):
        """Return one array of the joint shape per parameter."""
        return tuple(np.meshgrid(*(g.values for g in self.grids),
                                 indexing='ij'))

    def point(self, idx):
        """Return the parameter tuple at the joint index `idx`."""
        return tuple(g[i] for g, i in zip(self.grids, idx))

    def to_frame(self):
        """Return a DataFrame with one row per joint point, in C order."""
        return expand_grid(**dict(zip(self.names,
                                      (g.values for g in self.grids))))

    def __iter__(self):
        return (self.point(idx) for idx in np.ndindex(*self.shape))

    def __repr__(self):
        dims = ', '.join(f"{n}: {len(g)}" for n, g in zip(self.names,
                                                          self.grids))
        return f"JointGrid({dims})"


def expand_grid(**kwargs):
    """Return a DataFrame of points, where the columns are kwargs.

    Notes
    -----
    Compare to `numpy.meshgrid`:
        xx, yy = np.meshgrid(mu_list, sigma_list)  # == (..., index='xy')
    `expand_grid` returns the *transpose* of meshgrid's default xy orientation.
    `expand_grid` matches:
        xx, yy = np.meshgrid(mu_list, sigma_list, index='ij')

    Examples
    --------
    >>> expand_grid(mu=[150, 160], sigma=[5, 7, 9]).shape
    === (6, 2)

    See Also
    --------
    numpy.meshgrid
    """
    return pd.DataFrame(itertools.product(*kwargs.values()),
                        columns=list(kwargs.keys()))

# =============================================================================
# =============================================================================
