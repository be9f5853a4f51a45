#!/usr/bin/env python3
# =============================================================================
#     File: grid_approx.py
#  Created: 2019-06-17 11:17
#   Author: Bernie Roesler
#
"""
  Description: Grid approximation of a binomial proportion under a sweep of
  priors.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np
import warnings

from scipy import stats

import grid_rethinking as grt

plt.style.use('seaborn-v0_8-darkgrid')

# Possible prior distributions
PRIOR_D = {
    'uniform': dict(prior=dict(name='uniform', a=0, b=1),
                    title=r'$\mathcal{U}(0, 1)$'),
    'beta_weak': dict(prior=dict(name='beta', a=2, b=2),
                      title=r'$\mathrm{B}(2, 2)$'),
    'beta_strong': dict(prior=dict(name='beta', a=2, b=11),
                        title=r'$\mathrm{B}(2, 11)$'),
    'normal': dict(prior=dict(name='normal', mu=0.5, sigma=0.1),
                   title=r'$\mathcal{N}(0.5, 0.1)$'),
    'cauchy': dict(prior=dict(name='cauchy', loc=0.3, scale=0.05),
                   title=r'Cauchy$(0.3, 0.05)$'),
    'broken': dict(prior=dict(name='beta', a=0, b=2),
                   title=r'$\mathrm{B}(0, 2)$'),
}

# The priors of Figure 2.6 are not members of a named family
FUNC_PRIOR_D = {
    'step': dict(prior=lambda p: np.where(p < 0.5, 0, 1),
                 title='0 where $p < 0.5$, 1 otherwise'),
    'exp': dict(prior=lambda p: np.exp(-5 * np.abs(p - 0.5)),
                title='$e^{-5|p - 0.5|}$'),
}

# -----------------------------------------------------------------------------
#        Define Parameters
# -----------------------------------------------------------------------------
# Data
k = 5   # number of event occurrences, i.e. "heads"
n = 10  # number of trials, i.e. "tosses"

p_grid = grt.Grid.from_range(0, 1, 0.01, name='p')

# Evaluate each configuration, skipping any that cannot be evaluated
results = dict()
for key, cfg in PRIOR_D.items():
    try:
        prior = grt.make_density(**cfg['prior'])
        results[key] = (prior, grt.evaluate((k, n), grt.binomial_likelihood,
                                            p_grid, prior))
    except grt.GridApproxError as e:
        warnings.warn(f"Skipping prior '{key}': {e}")

for key, cfg in FUNC_PRIOR_D.items():
    results[key] = (cfg['prior'],
                    grt.evaluate((k, n), grt.binomial_likelihood, p_grid,
                                 cfg['prior']))

titles = {**{k_: v['title'] for k_, v in PRIOR_D.items()},
          **{k_: v['title'] for k_, v in FUNC_PRIOR_D.items()}}

print('MAP estimates')
print('-------------')
for key, (_, post) in results.items():
    print(f"{key:12s} p = {post.mode()['p']:4.2f}")

# -----------------------------------------------------------------------------
#        Plot Results
# -----------------------------------------------------------------------------
fig = plt.figure(1, figsize=(12, 6), clear=True, constrained_layout=True)
fig.suptitle(rf"$k = {k}$, $n = {n}$")
gs = fig.add_gridspec(nrows=2, ncols=(len(results) + 1) // 2)

for i, (key, (prior, post)) in enumerate(results.items()):
    ax = fig.add_subplot(gs[i % 2, i // 2])
    prior_vals = np.exp(grt.log_prior(prior, p_grid.values))
    ax.plot(p_grid.values, prior_vals / prior_vals.sum(),
            c='0.4', label='prior')
    ax.plot(p_grid.values, post.probs, 'C0', label='posterior')
    ax.axvline(post.mode()['p'], c='C0', ls='--', lw=1)
    ax.set(title=titles[key],
           xlabel='probability of water, $p$',
           ylabel='posterior probability')
    ax.legend(loc='upper left', fontsize=8)

# Grid resolution (Figure 2.7)
fig = plt.figure(2, clear=True, constrained_layout=True)
ax = fig.add_subplot()
for Np in [5, 20, 100]:
    p_vals, posterior, _ = grt.grid_binom_posterior(Np, k=6, n=9,
                                                    norm_post=False)
    ax.plot(p_vals, posterior, marker='o', markerfacecolor='none',
            label=rf"$N_p$ = {Np}")

# Analytical Posterior
p_fine = np.linspace(0, 1, 1000)
Beta = stats.beta(6+1, 9-6+1)  # Beta(\alpha = 1, \beta = 1) == U(0, 1)
ax.plot(p_fine, Beta.pdf(p_fine) / Beta.pdf(p_fine).max(), 'k-',
        label=rf"True Posterior: $\mathrm{{B}}({6+1}, {9-6+1})$")
ax.set(xlabel='probability of water, $p$',
       ylabel='non-normalized posterior probability of $p$')
ax.legend(loc='upper left')

plt.ion()
plt.show()

# =============================================================================
# =============================================================================
