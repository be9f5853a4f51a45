#!/usr/bin/env python3
# =============================================================================
#     File: posterior_samples.py
#  Created: 2026-10-19 16:40
#   Author: Bernie Roesler
#
"""
Description: Compare summaries computed on the posterior grid with the same
summaries computed from weighted samples of it.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

import grid_rethinking as grt

plt.style.use('seaborn-v0_8-darkgrid')
rng = np.random.default_rng(56)

Ns = 10_000  # number of posterior samples
q = 0.5      # interval mass

p_grid = grt.Grid.from_range(0, 1, 0.001, name='p')

# (successes, trials) of each experiment
EXPERIMENTS = {
    'water': (6, 9),
    'all wins': (3, 3),
}

# -----------------------------------------------------------------------------
#         Grid vs. sample summaries
# -----------------------------------------------------------------------------
posts, draws, rows = dict(), dict(), dict()
for label, data in EXPERIMENTS.items():
    post = grt.evaluate(data, grt.binomial_likelihood, p_grid, grt.Uniform())
    samples = post.sample(Ns, rng=rng)['p']
    posts[label], draws[label] = post, samples

    # Each summary from the grid directly, then from the samples
    rows[(label, 'grid')] = np.r_[grt.percentiles(post, q=q),
                                  grt.hpdi(post, q=q),
                                  post.mode()['p']]
    rows[(label, 'samples')] = np.r_[grt.percentiles(samples, q=q),
                                     grt.hpdi(samples, q=q),
                                     samples.mode().iloc[0]]

table = pd.DataFrame.from_dict(
    rows, orient='index',
    columns=['PI low', 'PI high', 'HPDI low', 'HPDI high', 'MAP'],
)
table.index = pd.MultiIndex.from_tuples(table.index,
                                        names=['experiment', 'source'])
print(f"---------- {100*q:g}% intervals ----------")
with pd.option_context('display.float_format', '{:.4f}'.format):
    print(table)

# Probability of a region of parameter space
m = posts['water'].marginal('p')
print(f"P(p < 0.5) = {m[m.index < 0.5].sum():.4f} (grid), "
      f"{(draws['water'] < 0.5).mean():.4f} (samples)")

# -----------------------------------------------------------------------------
#         Plot the intervals
# -----------------------------------------------------------------------------
fig = plt.figure(1, figsize=(10, 4), clear=True, constrained_layout=True)
gs = fig.add_gridspec(nrows=1, ncols=len(EXPERIMENTS))

for i, (label, post) in enumerate(posts.items()):
    ax = fig.add_subplot(gs[i])
    m = post.marginal('p')
    ax.plot(m.index, m, c='k', lw=1)
    for (lo, hi), c, name in [(grt.percentiles(post, q=q), 'C0', 'PI'),
                              (grt.hpdi(post, q=q), 'C1', 'HPDI')]:
        idx = (m.index >= lo) & (m.index <= hi)
        ax.fill_between(m.index[idx], m[idx], alpha=0.4, color=c,
                        label=f"{100*q:g}% {name}")
    k, n = EXPERIMENTS[label]
    ax.set(title=f"{label}: $k={k}$, $n={n}$",
           xlabel='$p$',
           ylabel='posterior probability')
    ax.legend(loc='upper left')

# -----------------------------------------------------------------------------
#         Posterior predictive check
# -----------------------------------------------------------------------------
# Simulate new experiments with p drawn from the posterior
k, n = EXPERIMENTS['water']
w = np.array([grt.Binomial(n, p).rvs(rng=rng) for p in draws['water']])

fig = plt.figure(2, figsize=(10, 4), clear=True, constrained_layout=True)
gs = fig.add_gridspec(nrows=1, ncols=2)

ax = fig.add_subplot(gs[0])
sns.histplot(draws['water'], stat='probability', bins=50, ax=ax)
ax.set(xlabel='$p$', title='Posterior samples')

ax = fig.add_subplot(gs[1])
ax.stem(np.bincount(w, minlength=n+1) / Ns, basefmt='none')
ax.axvline(k, c='C1', ls='--', label='observed')
ax.set(xticks=range(n+1),
       xlabel='successes',
       ylabel='frequency',
       title='Posterior predictive')
ax.legend()

plt.ion()
plt.show()

# =============================================================================
# =============================================================================
