"""
Continuous Bayesian Update Engine.

Same quantities as the discrete engine, over densities sampled on a
uniform grid with spacing dz. Sums become trapezoidal integrals:
- evidence = ∫ prior · likelihood
- posterior = prior · likelihood / evidence
- KL, R integrate their pointwise integrands

Zero/infinity rules are identical to the discrete engine.
"""

import math
from typing import Optional, Sequence

import structlog

from bayeslens.engine.discrete import LOG_BASE_BITS, BeliefUpdate, check_same_length
from bayeslens.engine.interpolation import interpolate_monotone
from bayeslens.engine.quadrature import grid_points, grid_spacing, normalize_density, trapz

logger = structlog.get_logger(__name__)


def compute_marginal_likelihood(
    prior: Sequence[float],
    likelihood: Sequence[float],
    dz: float,
) -> float:
    """Evidence ∫ prior(z) · likelihood(z) dz."""
    check_same_length(prior, likelihood)
    return trapz([p * l for p, l in zip(prior, likelihood)], dz)


def compute_posterior(
    prior: Sequence[float],
    likelihood: Sequence[float],
    dz: float,
) -> Optional[list[float]]:
    """Posterior density; None if the evidence integrates to 0."""
    check_same_length(prior, likelihood)
    posterior = normalize_density([p * l for p, l in zip(prior, likelihood)], dz)
    if posterior is None:
        logger.debug("posterior_density_undefined", n_points=len(prior), dz=dz)
    return posterior


def compute_surprisal(
    prior: Sequence[float],
    likelihood: Sequence[float],
    dz: float,
    log_base: float = LOG_BASE_BITS,
) -> float:
    marginal = compute_marginal_likelihood(prior, likelihood, dz)
    if marginal == 0:
        return math.inf
    return -math.log(marginal) / math.log(log_base)


def compute_kl(
    p: Optional[Sequence[float]],
    q: Sequence[float],
    dz: float,
    log_base: float = LOG_BASE_BITS,
) -> float:
    """D_KL(p ‖ q) = ∫ p log(p / q); NaN if p is undefined, +inf on support mismatch."""
    if p is None:
        return math.nan
    check_same_length(p, q)
    if any(pi > 0 and qi == 0 for pi, qi in zip(p, q)):
        return math.inf

    integrand = [pi * math.log(pi / qi) if pi > 0 else 0.0 for pi, qi in zip(p, q)]
    return trapz(integrand, dz) / math.log(log_base)


def compute_r(
    posterior: Optional[Sequence[float]],
    likelihood: Sequence[float],
    dz: float,
    log_base: float = LOG_BASE_BITS,
) -> float:
    """R = ∫ posterior · (−log likelihood)."""
    if posterior is None:
        return math.nan
    check_same_length(posterior, likelihood)
    if any(p > 0 and l == 0 for p, l in zip(posterior, likelihood)):
        return math.inf

    integrand = [p * -math.log(l) if p > 0 else 0.0 for p, l in zip(posterior, likelihood)]
    return trapz(integrand, dz) / math.log(log_base)


def compute_all(
    prior: Sequence[float],
    likelihood: Sequence[float],
    dz: float,
    log_base: float = LOG_BASE_BITS,
) -> BeliefUpdate:
    """All derived quantities; KL is D_KL(posterior ‖ prior), as in the discrete engine."""
    posterior = compute_posterior(prior, likelihood, dz)
    return BeliefUpdate(
        posterior=posterior,
        marginal_likelihood=compute_marginal_likelihood(prior, likelihood, dz),
        surprisal=compute_surprisal(prior, likelihood, dz, log_base),
        kl=compute_kl(posterior, prior, dz, log_base),
        r=compute_r(posterior, likelihood, dz, log_base),
        log_base=log_base,
    )


# ── Control point resampling ─────────────────────────────────────────────


def likelihood_from_control_points(
    control_ys: Sequence[float],
    domain: tuple[float, float],
    n_eval: int,
) -> tuple[list[float], list[float]]:
    """
    Resample evenly spaced control values onto an n_eval grid.

    Returns (xs, values); values are clamped to be non-negative.
    """
    control_xs = grid_points(len(control_ys), domain)
    xs = grid_points(n_eval, domain)
    values = [max(0.0, v) for v in interpolate_monotone(control_xs, control_ys, xs)]
    return xs, values


def density_from_control_points(
    control_ys: Sequence[float],
    domain: tuple[float, float],
    n_eval: int,
) -> tuple[list[float], Optional[list[float]], float]:
    """
    Smooth control values into a normalized density on an n_eval grid.

    Returns (xs, density, dz); density is None if the curve has no mass.
    """
    dz = grid_spacing(n_eval, domain)
    xs, values = likelihood_from_control_points(control_ys, domain, n_eval)
    return xs, normalize_density(values, dz), dz
