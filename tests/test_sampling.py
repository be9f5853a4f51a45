#!/usr/bin/env python3
# =============================================================================
#     File: test_sampling.py
#  Created: 2026-10-19 15:05
#   Author: Bernie Roesler
#
"""
Description: Tests for weighted sampling from a grid.
"""
# =============================================================================

import numpy as np
import pandas as pd
import pytest

from scipy import stats

from grid_rethinking import (
    Beta,
    DegenerateDistribution,
    binomial_likelihood,
    evaluate,
    grid_binom_posterior,
    normal_likelihood,
    sample,
)


def test_zero_count():
    s = sample([0, 1, 2], [0.2, 0.3, 0.5], 0, rng=1)
    assert s.shape == (0,)


def test_count_and_membership(p_grid):
    post = evaluate((6, 9), binomial_likelihood, p_grid, Beta(2, 2))
    s = sample(p_grid.values, post.probs, 1_000, rng=1)
    assert s.shape == (1_000,)
    assert np.all(np.isin(s, p_grid.values))


def test_all_zero_weights():
    with pytest.raises(DegenerateDistribution):
        sample([0, 1, 2], [0, 0, 0], 10)


@pytest.mark.parametrize('values, probs, count', [
    ([0, 1, 2], [0.5, 0.5], 1),
    ([0, 1], [0.5, 0.5], -1),
    ([0, 1], [-0.5, 1.5], 1),
    ([0, 1], [np.nan, 1.0], 1),
    ([0, 1], [np.inf, 1.0], 1),
    (5, [1.0], 1),
    ([0, 1], [1, 1], 2.7),
    ([0, 1], [1, 1], 2.0),
    ([0, 1], [1, 1], True),
])
def test_invalid_arguments(values, probs, count):
    with pytest.raises(ValueError):
        sample(values, probs, count)


def test_unnormalized_weights():
    s = sample(['a', 'b', 'c'], [0, 3, 0], 50, rng=2)
    assert set(s) == {'b'}


def test_reproducible():
    values, probs = np.arange(10), np.arange(10, dtype=float)
    a = sample(values, probs, 100, rng=1234)
    b = sample(values, probs, 100, rng=1234)
    np.testing.assert_array_equal(a, b)
    rng = np.random.default_rng(1234)
    np.testing.assert_array_equal(sample(values, probs, 100, rng=rng), a)
    # the caller's generator advances
    assert not np.array_equal(sample(values, probs, 100, rng=rng), a)


@pytest.mark.parametrize('seed', [0, 1, 2])
def test_frequencies_converge(seed):
    values = np.arange(5)
    probs = np.array([0.1, 0.2, 0.3, 0.25, 0.15])
    N = 100_000
    s = sample(values, probs, N, rng=seed)
    counts = np.bincount(s, minlength=len(values))
    _, p_value = stats.chisquare(counts, N * probs)
    assert p_value > 1e-4


def test_without_replacement():
    s = sample(np.arange(5), [1, 1, 0, 1, 1], 4, with_replacement=False,
               rng=3)
    assert sorted(s) == [0, 1, 3, 4]
    with pytest.raises(ValueError):
        sample(np.arange(5), [1, 1, 0, 1, 1], 5, with_replacement=False)


def test_rows():
    values = np.array([[0, 10], [1, 11], [2, 12]])
    s = sample(values, [1, 0, 1], 20, rng=4)
    assert s.shape == (20, 2)
    assert np.all(s[:, 1] - s[:, 0] == 10)
    assert not np.any(s[:, 0] == 1)


def test_posterior_samples(heights, mu_grid, sigma_grid, height_priors):
    post = evaluate(heights, normal_likelihood, (mu_grid, sigma_grid),
                    height_priors)
    samples = post.sample(5_000, rng=56)
    assert isinstance(samples, pd.DataFrame)
    assert list(samples.columns) == ['mu', 'sigma']
    assert len(samples) == 5_000
    assert samples['mu'].isin(mu_grid.values).all()
    assert samples['sigma'].isin(sigma_grid.values).all()
    assert samples['mu'].mean() == pytest.approx(heights.mean(), abs=0.5)
    pd.testing.assert_frame_equal(samples, post.sample(5_000, rng=56))


def test_grid_samples_match_exact_posterior():
    p_grid, posterior, _ = grid_binom_posterior(1000, k=6, n=9)
    samples = sample(p_grid, posterior, 10_000, rng=56)
    exact = stats.beta(7, 4)
    assert np.mean(samples < 0.5) == pytest.approx(exact.cdf(0.5), abs=0.02)
    assert np.mean(samples) == pytest.approx(exact.mean(), abs=0.01)

# =============================================================================
# =============================================================================
