#!/usr/bin/env python3
# =============================================================================
#     File: test_marginal.py
#  Created: 2026-10-19 14:40
#   Author: Bernie Roesler
#
"""
Description: Tests for marginal distributions of joint posterior grids.
"""
# =============================================================================

import numpy as np
import pandas as pd
import pytest

from grid_rethinking import (
    Grid,
    InvalidAxis,
    Normal,
    Uniform,
    evaluate,
    marginal,
    normal_likelihood,
)


@pytest.fixture
def joint(heights, mu_grid, sigma_grid, height_priors):
    return evaluate(heights, normal_likelihood, (mu_grid, sigma_grid),
                    height_priors)


def test_marginals_sum_to_one(joint):
    for name, m in joint.marginals().items():
        assert isinstance(m, pd.Series)
        assert m.name == name
        assert m.sum() == pytest.approx(1, rel=1e-9)
        assert np.all(m >= 0)


def test_marginal_index(joint, mu_grid, sigma_grid):
    m_mu = joint.marginal('mu')
    m_sigma = marginal(joint, 1)
    assert len(m_mu) == len(mu_grid)
    assert len(m_sigma) == len(sigma_grid)
    np.testing.assert_array_equal(m_mu.index, mu_grid.values)
    np.testing.assert_array_equal(m_sigma.index, sigma_grid.values)
    np.testing.assert_allclose(m_mu.values, joint.probs.sum(axis=1))
    np.testing.assert_allclose(marginal(joint, 'sigma'), m_sigma)


def test_marginal_of_independent_priors(mu_grid, sigma_grid):
    prior_mu = Normal(155, 2)
    post = evaluate(None, lambda d, p: 1.0, (mu_grid, sigma_grid),
                    [prior_mu, Uniform(0, 50)])
    expected = prior_mu.pdf(mu_grid.values)
    np.testing.assert_allclose(post.marginal('mu'), expected / expected.sum())
    np.testing.assert_allclose(post.marginal('sigma'),
                               np.full(len(sigma_grid), 1 / len(sigma_grid)))


@pytest.mark.parametrize('shape', [(7,), (3, 4), (2, 3, 4), (2, 2, 3, 2)])
def test_any_dimension(shape):
    rng = np.random.default_rng(42)
    probs = rng.dirichlet(np.ones(np.prod(shape))).reshape(shape)
    for axis in range(len(shape)):
        m = marginal(probs, axis)
        assert isinstance(m, np.ndarray)
        assert m.shape == (shape[axis],)
        assert m.sum() == pytest.approx(1, rel=1e-9)
        expected = np.moveaxis(probs, axis, 0).reshape(shape[axis], -1)
        np.testing.assert_allclose(m, expected.sum(axis=1))


def test_one_dimensional_is_identity():
    probs = np.array([0.2, 0.5, 0.3])
    np.testing.assert_array_equal(marginal(probs, 0), probs)


@pytest.mark.parametrize('axis', [2, -1, 1.0, True, 'tau', None])
def test_invalid_axis(joint, axis):
    with pytest.raises(InvalidAxis):
        marginal(joint, axis)


def test_names_require_a_grid():
    with pytest.raises(InvalidAxis):
        marginal(np.ones((2, 2)) / 4, 'mu')


def test_single_point_axis():
    grids = [Grid([0.0, 1.0, 2.0, 3.0], name='a'), Grid([3.0], name='b')]
    post = evaluate(None, lambda d, p: 1.0 + p[0], grids)
    assert post.marginal('b').tolist() == [pytest.approx(1)]
    np.testing.assert_allclose(post.marginal('a'), [0.1, 0.2, 0.3, 0.4])

# =============================================================================
# =============================================================================
