"""
Discrete Bayesian Update Engine.

All computations work with lists representing discrete distributions:
- posterior ∝ prior × likelihood
- marginal likelihood (evidence) = E_prior[likelihood]
- surprisal = −log(evidence)
- KL divergence D_KL(P ‖ Q) = E_P[log(P / Q)]
- R = E_posterior[−log likelihood]

Zero and infinity are handled in the log domain:
- zero total mass → posterior None, KL and R NaN, surprisal +inf
- positive mass where the reference is 0 → +inf
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import structlog

from bayeslens.engine.quadrature import normalize
from bayeslens.exceptions import LengthMismatchError

logger = structlog.get_logger(__name__)

# ── Configuration ─────────────────────────────────────────────────────────

LOG_BASE_BITS: float = 2.0
LOG_BASE_NATS: float = math.e


@dataclass(frozen=True)
class BeliefUpdate:
    """
    Every quantity derived from one (prior, likelihood, log base) triple.

    Has no lifecycle of its own; recomputed on every input change.
    """
    posterior: Optional[list[float]]   # None when prior × likelihood has no mass
    marginal_likelihood: float
    surprisal: float                   # +inf when the evidence is 0
    kl: float                          # D_KL(posterior ‖ prior); NaN or +inf possible
    r: float                           # E_posterior[−log likelihood]; NaN or +inf possible
    log_base: float = LOG_BASE_BITS

    @property
    def is_defined(self) -> bool:
        """Whether the observation is possible under the prior."""
        return self.posterior is not None

    @property
    def unit(self) -> str:
        if self.log_base == LOG_BASE_BITS:
            return "bits"
        if self.log_base == LOG_BASE_NATS:
            return "nats"
        return f"log{self.log_base:g}"


def check_same_length(prior: Sequence[float], likelihood: Sequence[float]) -> None:
    """Raise LengthMismatchError unless both arrays index the same states."""
    if len(prior) != len(likelihood):
        raise LengthMismatchError(len(prior), len(likelihood))


def compute_posterior(
    prior: Sequence[float],
    likelihood: Sequence[float],
) -> Optional[list[float]]:
    """
    Posterior via Bayes' theorem, normalized to sum to 1.

    Returns None if prior × likelihood sums to 0.
    """
    check_same_length(prior, likelihood)
    posterior = normalize([p * l for p, l in zip(prior, likelihood)])
    if posterior is None:
        logger.debug("posterior_undefined", n_states=len(prior))
    return posterior


def compute_marginal_likelihood(
    prior: Sequence[float],
    likelihood: Sequence[float],
) -> float:
    """Evidence E_prior[likelihood] = Σ prior_i · likelihood_i."""
    check_same_length(prior, likelihood)
    return sum(p * l for p, l in zip(prior, likelihood))


def compute_surprisal(
    prior: Sequence[float],
    likelihood: Sequence[float],
    log_base: float = LOG_BASE_BITS,
) -> float:
    """Surprisal of the observation, −log E_prior[likelihood]."""
    marginal = compute_marginal_likelihood(prior, likelihood)
    if marginal == 0:
        return math.inf
    return -math.log(marginal) / math.log(log_base)


def compute_kl(
    p: Optional[Sequence[float]],
    q: Sequence[float],
    log_base: float = LOG_BASE_BITS,
) -> float:
    """
    KL divergence D_KL(P ‖ Q) over a shared support.

    NaN if P is undefined; +inf if P puts mass where Q is 0.
    """
    if p is None:
        return math.nan
    check_same_length(p, q)
    if any(pi > 0 and qi == 0 for pi, qi in zip(p, q)):
        return math.inf

    kl = sum(pi * math.log(pi / qi) for pi, qi in zip(p, q) if pi > 0)
    return kl / math.log(log_base)


def compute_r(
    posterior: Optional[Sequence[float]],
    likelihood: Sequence[float],
    log_base: float = LOG_BASE_BITS,
) -> float:
    """
    R = E_posterior[−log likelihood], the expected surprisal of the
    likelihood under the updated belief.
    """
    if posterior is None:
        return math.nan
    check_same_length(posterior, likelihood)
    if any(p > 0 and l == 0 for p, l in zip(posterior, likelihood)):
        return math.inf

    r = sum(p * -math.log(l) for p, l in zip(posterior, likelihood) if p > 0)
    return r / math.log(log_base)


def compute_all(
    prior: Sequence[float],
    likelihood: Sequence[float],
    log_base: float = LOG_BASE_BITS,
) -> BeliefUpdate:
    """All derived quantities at once. KL is D_KL(posterior ‖ prior)."""
    posterior = compute_posterior(prior, likelihood)
    return BeliefUpdate(
        posterior=posterior,
        marginal_likelihood=compute_marginal_likelihood(prior, likelihood),
        surprisal=compute_surprisal(prior, likelihood, log_base),
        kl=compute_kl(posterior, prior, log_base),
        r=compute_r(posterior, likelihood, log_base),
        log_base=log_base,
    )
