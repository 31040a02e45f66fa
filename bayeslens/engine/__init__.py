"""
BayesLens Engine — numerical core.

Components:
- quadrature: trapezoidal integration, sum/integral normalization, grids
- special: Lanczos log-gamma, Beta/Gaussian/uniform/bimodal densities
- interpolation: Fritsch–Carlson monotone cubic interpolation
- discrete: Bayesian update over discrete states (sums)
- continuous: Bayesian update over a density grid (trapezoidal rule)
- samplers: randomized prior/likelihood generators with explicit RNG
- formatting: display tokens for numbers and sentinels
"""
