#!/usr/bin/env python3
# =============================================================================
#     File: conftest.py
#  Created: 2026-10-19 13:10
#   Author: Bernie Roesler
#
"""
Description: Shared fixtures for the grid approximation tests.
"""
# =============================================================================

import numpy as np
import pytest

from grid_rethinking import Grid, Normal, Uniform


@pytest.fixture
def p_grid():
    """Probability grid {0.00, 0.01, ..., 1.00}."""
    return Grid.from_range(0, 1, 0.01, name='p')


@pytest.fixture
def heights():
    """Simulated adult heights [cm], like the Howell data."""
    rng = np.random.default_rng(56)
    return rng.normal(154.6, 7.7, size=100)


@pytest.fixture
def mu_grid():
    return Grid.linspace(150, 160, 51, name='mu')


@pytest.fixture
def sigma_grid():
    return Grid.linspace(5, 10, 26, name='sigma')


@pytest.fixture
def height_priors():
    return [Normal(178, 20), Uniform(0, 50)]

# =============================================================================
# =============================================================================
