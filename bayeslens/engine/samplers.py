"""
Randomized Prior / Likelihood Samplers.

Prior-side samplers return distributions normalized to sum to 1.
Likelihood-side samplers return raw values in [0, 1].

Every sampler draws from an explicitly passed random.Random, so a seeded
handle makes the output reproducible. There is no shared module-level RNG.
"""

import math
import random
from typing import Optional

import structlog

from bayeslens.config import settings
from bayeslens.engine.quadrature import normalize

logger = structlog.get_logger(__name__)

# ── Configuration ─────────────────────────────────────────────────────────

DEFAULT_LOG_UNIFORM_EPSILON: float = 0.01
DEFAULT_BERNOULLI_P: float = 0.5
DEFAULT_PEAK_WEIGHT: float = 0.8
DEFAULT_HIGH_VALUE: float = 0.9
DEFAULT_LOW_VALUE: float = 0.1


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Independent RNG handle; falls back to the configured sampler seed."""
    return random.Random(seed if seed is not None else settings.sampler_seed)


def _log_uniform_draws(n: int, rng: random.Random, epsilon: float) -> list[float]:
    # Uniform in log space between log(epsilon) and log(1) = 0
    log_eps = math.log(epsilon)
    return [math.exp(log_eps + rng.random() * -log_eps) for _ in range(n)]


def _bernoulli_draws(n: int, rng: random.Random, p: float) -> list[float]:
    return [1.0 if rng.random() < p else 0.0 for _ in range(n)]


# ── Prior side (normalized) ───────────────────────────────────────────────


def uniform_prior(n: int) -> list[float]:
    return [1 / n] * n


def iid_uniform(n: int, rng: random.Random) -> list[float]:
    """U(0, 1] draws, normalized. Draws are never 0, so the sum is positive."""
    return normalize([1.0 - rng.random() for _ in range(n)])


def iid_log_uniform(
    n: int,
    rng: random.Random,
    epsilon: float = DEFAULT_LOG_UNIFORM_EPSILON,
) -> list[float]:
    """
    Log-uniform draws on [epsilon, 1], normalized.

    Puts more weight on small values than U[0, 1], useful for exploring
    low-probability states.
    """
    return normalize(_log_uniform_draws(n, rng, epsilon))


def iid_bernoulli(
    n: int,
    rng: random.Random,
    p: float = DEFAULT_BERNOULLI_P,
) -> list[float]:
    """
    Sparse prior: Bernoulli(p) draws, normalized.

    If every draw is 0 a random state is forced to 1, so the result is
    always a valid distribution.
    """
    values = _bernoulli_draws(n, rng, p)
    if not any(values):
        forced = rng.randrange(n)
        values[forced] = 1.0
        logger.warning("bernoulli_prior_all_zero", n_states=n, forced_index=forced, p=p)
    return normalize(values)


def peaked(
    n: int,
    rng: random.Random,
    peak_index: Optional[int] = None,
    peak_weight: float = DEFAULT_PEAK_WEIGHT,
) -> list[float]:
    """One state holds peak_weight, the rest share the remainder evenly."""
    if n == 1:
        return [1.0]
    if peak_index is None:
        peak_index = rng.randrange(n)
    values = [(1 - peak_weight) / (n - 1)] * n
    values[peak_index] = peak_weight
    return values


# ── Likelihood side (raw, in [0, 1]) ──────────────────────────────────────


def uniform_likelihood(n: int) -> list[float]:
    """Every state equally likely to produce the observation."""
    return [1.0] * n


def iid_uniform_likelihood(n: int, rng: random.Random) -> list[float]:
    return [rng.random() for _ in range(n)]


def iid_log_uniform_likelihood(
    n: int,
    rng: random.Random,
    epsilon: float = DEFAULT_LOG_UNIFORM_EPSILON,
) -> list[float]:
    return _log_uniform_draws(n, rng, epsilon)


def iid_bernoulli_likelihood(
    n: int,
    rng: random.Random,
    p: float = DEFAULT_BERNOULLI_P,
) -> list[float]:
    return _bernoulli_draws(n, rng, p)


def discriminating_likelihood(
    n: int,
    rng: random.Random,
    high_index: Optional[int] = None,
    high_value: float = DEFAULT_HIGH_VALUE,
    low_value: float = DEFAULT_LOW_VALUE,
) -> list[float]:
    """High likelihood for one state, low for all others."""
    if high_index is None:
        high_index = rng.randrange(n)
    values = [low_value] * n
    values[high_index] = high_value
    return values
