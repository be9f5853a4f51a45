#!/usr/bin/env python3
# =============================================================================
#     File: test_distributions.py
#  Created: 2026-10-19 13:18
#   Author: Bernie Roesler
#
"""
Description: Tests for prior densities and likelihood kernels.
"""
# =============================================================================

import numpy as np
import pytest

from math import comb, pi, sqrt
from scipy import stats

from grid_rethinking import (
    Beta,
    Binomial,
    Cauchy,
    GridApproxError,
    InvalidParameter,
    Normal,
    Uniform,
    binom_mass,
    binomial_likelihood,
    make_density,
    normal_likelihood,
)


def test_known_values():
    assert Beta(2, 2).pdf(0.5) == pytest.approx(1.5)
    assert Uniform(0, 2).pdf(1.0) == pytest.approx(0.5)
    assert Uniform(0, 2).pdf(3.0) == 0
    assert Normal(0, 1).pdf(0) == pytest.approx(1 / sqrt(2 * pi))
    assert Cauchy(0, 1).pdf(0) == pytest.approx(1 / pi)
    assert Binomial(10, 0.5).mass(5) == pytest.approx(comb(10, 5) / 2**10)


def test_logpdf_matches_pdf():
    x = np.linspace(0.05, 0.95, 7)
    for d in (Beta(2, 11), Uniform(0, 1), Normal(0.5, 0.2), Cauchy(0.5, 1)):
        np.testing.assert_allclose(np.exp(d.logpdf(x)), d.pdf(x))


def test_non_negative_on_grid(p_grid):
    for d in (Beta(2, 2), Beta(0.5, 0.5), Uniform(0.2, 0.4),
              Normal(0, 0.01), Cauchy(3, 0.1)):
        assert np.all(d.pdf(p_grid.values) >= 0)


@pytest.mark.parametrize('cls, args', [
    (Beta, (0, 2)),
    (Beta, (2, -1)),
    (Beta, (np.nan, 2)),
    (Uniform, (1, 1)),
    (Uniform, (2, 1)),
    (Uniform, (0, np.inf)),
    (Normal, (0, 0)),
    (Normal, (0, -1)),
    (Cauchy, (0, 0)),
    (Binomial, (10, 1.5)),
    (Binomial, (2.5, 0.5)),
    (Binomial, (-1, 0.5)),
])
def test_invalid_parameters(cls, args):
    with pytest.raises(InvalidParameter):
        cls(*args)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        Beta(0, 1)
    assert issubclass(InvalidParameter, GridApproxError)


def test_immutable():
    d = Beta(2, 2)
    with pytest.raises(AttributeError):
        d._params = dict(a=1, b=1)
    params = d.params
    params['a'] = 100
    assert d.params == dict(a=2, b=2)


def test_equality_and_repr():
    assert Beta(2, 11) == Beta(2, 11)
    assert Beta(2, 11) != Beta(11, 2)
    assert Normal(0, 1) != Cauchy(0, 1)
    assert len({Beta(2, 2), Beta(2, 2)}) == 1
    assert repr(Beta(2, 11)) == 'Beta(a=2, b=11)'


def test_rvs_reproducible():
    np.testing.assert_array_equal(Normal(0, 1).rvs(5, rng=1),
                                  Normal(0, 1).rvs(5, rng=1))


def test_make_density():
    assert make_density('beta', a=2, b=11) == Beta(2, 11)
    assert make_density('Normal', mu=178, sigma=20) == Normal(178, 20)
    with pytest.raises(InvalidParameter):
        make_density('gamma', a=1)
    with pytest.raises(InvalidParameter):
        make_density('beta', mu=1)
    with pytest.raises(InvalidParameter):
        make_density('beta', a=0, b=1)


def test_binom_mass(p_grid):
    mass = binom_mass(5, 10, p_grid.values)
    assert mass.shape == (len(p_grid),)
    np.testing.assert_allclose(mass, stats.binom.pmf(5, 10, p_grid.values))
    assert mass[0] == 0 and mass[-1] == 0
    with pytest.raises(InvalidParameter):
        binom_mass(11, 10, 0.5)
    with pytest.raises(InvalidParameter):
        binom_mass(5, 10, [0.5, 1.2])


def test_binomial_likelihood(p_grid):
    ll = binomial_likelihood.logpdf((6, 9), (p_grid.values,))
    np.testing.assert_allclose(np.exp(ll), binom_mass(6, 9, p_grid.values))
    assert binomial_likelihood((6, 9), (0.5,)) == pytest.approx(
        comb(9, 6) / 2**9)


def test_binomial_likelihood_off_support():
    ll = binomial_likelihood.logpdf((5, 10), (np.array([-0.1, 0.5, 1.1]),))
    assert np.isneginf(ll[0]) and np.isneginf(ll[2])
    assert ll[1] == pytest.approx(stats.binom.logpmf(5, 10, 0.5))
    assert binomial_likelihood((5, 10), (1.2,)) == 0


def test_normal_likelihood_vectorized(heights):
    mu = np.array([150.0, 155.0])
    sigma = np.array([[5.0], [8.0]])
    ll = normal_likelihood.logpdf(heights, (mu, sigma))
    assert ll.shape == (2, 2)
    expected = stats.norm(155.0, 8.0).logpdf(heights).sum()
    assert ll[1, 1] == pytest.approx(expected)
    assert normal_likelihood.logpdf(heights, (155.0, 8.0)) == pytest.approx(
        expected)


def test_normal_likelihood_nonpositive_sigma(heights):
    ll = normal_likelihood.logpdf(heights, (np.r_[150., 150.], np.r_[0., -1.]))
    assert np.all(np.isneginf(ll))
    assert normal_likelihood(heights, (150.0, 0.0)) == 0

# =============================================================================
# =============================================================================
