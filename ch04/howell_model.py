#!/usr/bin/env python3
# =============================================================================
#     File: howell_model.py
#  Created: 2019-07-16 21:56
#   Author: Bernie Roesler
#
r"""
Description: Section 4.3.

Build a model of the distribution of human heights:

    ..math::
        h_i \sim \mathcal{N}(\mu, \sigma)  \text{likelihood}
        \mu \sim \mathcal{N}(178, 20)      \text{mean prior}
        \sigma \sim \mathcal{U}(0, 50)     \text{std prior}

Heights are in [cm].
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

import grid_rethinking as grt

# Set to True for "Overthinking" (R code 4.23 - 4.25)
SAMPLE_SIZE_FLAG = False  # if True, take only 20 data points

plt.style.use('seaborn-v0_8-darkgrid')
rng = np.random.default_rng(56)

# -----------------------------------------------------------------------------
#        Simulate the Dataset
# -----------------------------------------------------------------------------
# Adult heights [cm], matching the moments of the !Kung San data
N = 20 if SAMPLE_SIZE_FLAG else 352
heights = rng.normal(154.6, 7.7, size=N)

# -----------------------------------------------------------------------------
#        4.3.3 Grid approximation of the posterior distribution (R code 4.16)
# -----------------------------------------------------------------------------
# P(mu, sigma | h) ∝ P(h | mu, sigma) * P(mu) * P(sigma)
mu_c = 178  # [cm] mean for the height-mean prior
mus_c = 20  # [cm] std  for the height-mean prior
sig_c = 50  # [cm] maximum value for height-stdev prior
priors = [grt.Normal(mu_c, mus_c), grt.Uniform(0, sig_c)]

Np = 100  # number of parameters values to test

if SAMPLE_SIZE_FLAG:
    mu_start, mu_stop = 140, 170
    sigma_start, sigma_stop = 4, 20
else:
    mu_start, mu_stop = 150, 160
    sigma_start, sigma_stop = 6, 10

mu_grid = grt.Grid.linspace(mu_start, mu_stop, Np, name='mu')
sigma_grid = grt.Grid.linspace(sigma_start, sigma_stop, Np, name='sigma')

post = grt.evaluate(heights, grt.normal_likelihood, (mu_grid, sigma_grid),
                    priors)

# Contour plot of the results (R code 4.17)
xx, yy = post.grid.mesh()

fig = plt.figure(1, figsize=(8, 6), clear=True, constrained_layout=True)
ax = fig.add_subplot()
cs = ax.contour(xx, yy, post.probs, cmap='viridis')
ax.clabel(cs, inline=1, fontsize=10)
ax.set_title('Contours of Posterior Probability')
ax.set(xlabel=r'$\mu$',
       ylabel=r'$\sigma$')

# -----------------------------------------------------------------------------
#         Sample from the posterior (R code 4.19 - 22)
# -----------------------------------------------------------------------------
Ns = 10_000
samples = post.sample(Ns, rng=rng)

fig = plt.figure(2, clear=True, constrained_layout=True)
ax = fig.add_subplot()
ax.scatter(samples['mu'], samples['sigma'], alpha=0.1)
ax.set(title='Posterior Samples',
       xlabel=r'$\mu$',
       ylabel=r'$\sigma$')

# Plot the marginal posterior distributions of mu and sigma
fig = plt.figure(3, clear=True, constrained_layout=True)
fig.set_size_inches((12, 5), forward=True)
fig.suptitle('Marginal Posterior Distribution')
gs = fig.add_gridspec(nrows=1, ncols=2)

for i, (name, marginal) in enumerate(post.marginals().items()):
    ax = fig.add_subplot(gs[i])
    ax.plot(marginal.index, marginal, label='grid marginal')
    counts = samples[name].value_counts(normalize=True).sort_index()
    ax.plot(counts.index, counts, 'k.', label='sample frequency')
    lo, hi = grt.hpdi(marginal.index, weights=marginal)
    ax.axvspan(lo, hi, color='C0', alpha=0.2, label='89% HPDI')
    ax.set(xlabel=rf"$\{name}$",
           ylabel='probability')
    ax.legend()

print('---------- Posterior Summary (grid) ----------')
grt.precis(post)
print('---------- Posterior Summary (samples) ----------')
grt.precis(samples)

print('---------- HPDI of Posterior Samples ----------')
grt.hpdi(samples['mu'], verbose=True)
grt.hpdi(samples['sigma'], verbose=True)

plt.ion()
plt.show()

# =============================================================================
# =============================================================================
