"""
Continuous Preset Catalogs.

Parametric PDF generators for priors and likelihood shapes for
observations. Each generator samples its shape at n evenly spaced points
x_i = a + i / (n − 1) · (b − a); negative evaluations clamp to 0.

Priors are densities; likelihoods are values in [0, 1].
"""

from typing import Callable

from bayeslens.engine.quadrature import grid_points
from bayeslens.engine.special import (
    beta_pdf,
    bimodal_pdf,
    gaussian_bump,
    gaussian_pdf,
    uniform_pdf,
)
from bayeslens.presets.schema import (
    Domain,
    ParamDef,
    Preset,
    PresetFamily,
    PresetKind,
    StateSpace,
)

# ── Configuration ─────────────────────────────────────────────────────────

# Peaked prior falls back to a narrow Gaussian when a Beta shape would be < 0.5
PEAKED_MIN_SHAPE: float = 0.5
PEAKED_FALLBACK_SIGMA: float = 0.05


def sample_pdf(n: int, domain: Domain, pdf: Callable[[float], float]) -> list[float]:
    """Evaluate pdf on the n-point grid over domain, clamping negatives to 0."""
    return [max(0.0, pdf(x)) for x in grid_points(n, domain)]


# ── Prior generators ──────────────────────────────────────────────────────


def _uniform_prior(n, params, domain, rng=None):
    a, b = domain
    return sample_pdf(n, domain, lambda x: uniform_pdf(x, a, b))


def _truncnorm_prior(n, params, domain, rng=None):
    return sample_pdf(n, domain, lambda x: gaussian_pdf(x, params["mu"], params["sigma"]))


def _beta_prior(n, params, domain, rng=None):
    return sample_pdf(n, domain, lambda x: beta_pdf(x, params["alpha"], params["beta"]))


def _bimodal_prior(n, params, domain, rng=None):
    return sample_pdf(
        n,
        domain,
        lambda x: bimodal_pdf(x, params["mu1"], params["mu2"], params["sigma"], params["weight"]),
    )


def _peaked_prior(n, params, domain, rng=None):
    """Beta(center · sharpness, (1 − center) · sharpness)."""
    center = params["center"]
    alpha = center * params["sharpness"]
    beta = (1 - center) * params["sharpness"]
    if alpha < PEAKED_MIN_SHAPE or beta < PEAKED_MIN_SHAPE:
        return sample_pdf(n, domain, lambda x: gaussian_pdf(x, center, PEAKED_FALLBACK_SIGMA))
    return sample_pdf(n, domain, lambda x: beta_pdf(x, alpha, beta))


def _linear_prior(n, params, domain, rng=None):
    """Straight line between the endpoint heights, scaled to unit area."""
    a, b = domain
    left, right = params["left"], params["right"]
    area = (left + right) / 2 * (b - a)
    if area == 0:
        return [0.0] * n
    return sample_pdf(n, domain, lambda x: (left + (x - a) / (b - a) * (right - left)) / area)


# ── Likelihood generators ─────────────────────────────────────────────────


def _flat_likelihood(n, params, domain, rng=None):
    return [params["level"]] * n


def _onepeak_likelihood(n, params, domain, rng=None):
    return sample_pdf(n, domain, lambda x: gaussian_bump(x, params["center"], params["width"]))


def _gaussian_likelihood(n, params, domain, rng=None):
    return sample_pdf(
        n,
        domain,
        lambda x: params["amplitude"] * gaussian_bump(x, params["center"], params["width"]),
    )


def _window_likelihood(n, params, domain, rng=None):
    lo = min(params["a"], params["b"])
    hi = max(params["a"], params["b"])
    return [params["high"] if lo <= x <= hi else params["low"] for x in grid_points(n, domain)]


def _step_likelihood(n, params, domain, rng=None):
    cutoff = params["cutoff"]
    return [params["left"] if x < cutoff else params["right"] for x in grid_points(n, domain)]


def _ramp_likelihood(n, params, domain, rng=None):
    # Interpolates by grid index, independent of the domain
    left, right = params["left"], params["right"]
    if n == 1:
        return [left]
    return [left + (i / (n - 1)) * (right - left) for i in range(n)]


def _twopeaks_likelihood(n, params, domain, rng=None):
    """Mixture of two bumps, rescaled so the highest point is 1."""
    w = params["weight"]
    raw = sample_pdf(
        n,
        domain,
        lambda x: w * gaussian_bump(x, params["c1"], params["width"])
        + (1 - w) * gaussian_bump(x, params["c2"], params["width"]),
    )
    max_val = max(raw, default=0.0)
    return [v / max_val for v in raw] if max_val > 0 else raw


# ── Catalogs ──────────────────────────────────────────────────────────────


def _prior(name, family, param_defs, generator) -> Preset:
    return Preset(
        name=name,
        family=family,
        kind=PresetKind.PRIOR,
        space=StateSpace.CONTINUOUS,
        param_defs=tuple(param_defs),
        generator=generator,
    )


def _likelihood(name, family, param_defs, generator) -> Preset:
    return Preset(
        name=name,
        family=family,
        kind=PresetKind.LIKELIHOOD,
        space=StateSpace.CONTINUOUS,
        param_defs=tuple(param_defs),
        generator=generator,
    )


CONTINUOUS_PRIOR_PRESETS: tuple[Preset, ...] = (
    _prior("Uniform", PresetFamily.UNIFORM, [], _uniform_prior),
    _prior(
        "Truncated Normal",
        PresetFamily.TRUNCNORM,
        [
            ParamDef(name="mu", label_tex="\\mu", min=0, max=1, step=0.01, default=0.5),
            ParamDef(name="sigma", label_tex="\\sigma", min=0.02, max=0.4, step=0.01, default=0.15),
        ],
        _truncnorm_prior,
    ),
    _prior(
        "Beta",
        PresetFamily.BETA,
        [
            ParamDef(name="alpha", label_tex="\\alpha", min=0.5, max=20, step=0.1, default=2),
            ParamDef(name="beta", label_tex="\\beta", min=0.5, max=20, step=0.1, default=5),
        ],
        _beta_prior,
    ),
    _prior(
        "Bimodal",
        PresetFamily.BIMODAL,
        [
            ParamDef(name="mu1", label_tex="\\mu_1", min=0, max=1, step=0.01, default=0.3),
            ParamDef(name="mu2", label_tex="\\mu_2", min=0, max=1, step=0.01, default=0.7),
            ParamDef(name="sigma", label_tex="\\sigma", min=0.02, max=0.2, step=0.01, default=0.08),
            ParamDef(name="weight", label_tex="w", min=0, max=1, step=0.01, default=0.5),
        ],
        _bimodal_prior,
    ),
    _prior(
        "Peaked",
        PresetFamily.PEAKED,
        [
            ParamDef(name="center", label_tex="c", min=0, max=1, step=0.01, default=0.5),
            ParamDef(name="sharpness", label_tex="s", min=1, max=100, step=1, default=20),
        ],
        _peaked_prior,
    ),
    _prior(
        "Linear",
        PresetFamily.LINEAR,
        [
            ParamDef(name="left", label_tex="a", min=0, max=2, step=0.01, default=0.5),
            ParamDef(name="right", label_tex="b", min=0, max=2, step=0.01, default=1.5),
        ],
        _linear_prior,
    ),
)


CONTINUOUS_LIKELIHOOD_PRESETS: tuple[Preset, ...] = (
    _likelihood(
        "Flat",
        PresetFamily.UNIFORM,
        [ParamDef(name="level", label_tex="c", min=0.01, max=1, step=0.01, default=0.5)],
        _flat_likelihood,
    ),
    _likelihood(
        "One peak",
        PresetFamily.ONEPEAK,
        [
            ParamDef(name="center", label_tex="c", min=0, max=1, step=0.01, default=0.5),
            ParamDef(name="width", label_tex="w", min=0.02, max=0.4, step=0.01, default=0.1),
        ],
        _onepeak_likelihood,
    ),
    _likelihood(
        "Gaussian",
        PresetFamily.GAUSSIAN,
        [
            ParamDef(name="center", label_tex="\\mu", min=0, max=1, step=0.01, default=0.5),
            ParamDef(name="width", label_tex="\\sigma", min=0.02, max=0.4, step=0.01, default=0.1),
            ParamDef(name="amplitude", label_tex="h", min=0.01, max=1, step=0.01, default=1),
        ],
        _gaussian_likelihood,
    ),
    _likelihood(
        "Window",
        PresetFamily.WINDOW,
        [
            ParamDef(name="a", label_tex="a", min=0, max=1, step=0.01, default=0.3),
            ParamDef(name="b", label_tex="b", min=0, max=1, step=0.01, default=0.7),
            ParamDef(name="high", label_tex="h", min=0.01, max=1, step=0.01, default=0.9),
            ParamDef(name="low", label_tex="\\ell", min=0.01, max=1, step=0.01, default=0.1),
        ],
        _window_likelihood,
    ),
    _likelihood(
        "Step",
        PresetFamily.STEP,
        [
            ParamDef(name="cutoff", label_tex="t", min=0, max=1, step=0.01, default=0.5),
            ParamDef(name="left", label_tex="\\ell", min=0.01, max=1, step=0.01, default=0.1),
            ParamDef(name="right", label_tex="h", min=0.01, max=1, step=0.01, default=0.9),
        ],
        _step_likelihood,
    ),
    _likelihood(
        "Ramp",
        PresetFamily.RAMP,
        [
            ParamDef(name="left", label_tex="a", min=0.01, max=1, step=0.01, default=0.1),
            ParamDef(name="right", label_tex="b", min=0.01, max=1, step=0.01, default=0.9),
        ],
        _ramp_likelihood,
    ),
    _likelihood(
        "Two peaks",
        PresetFamily.TWOPEAKS,
        [
            ParamDef(name="c1", label_tex="c_1", min=0, max=1, step=0.01, default=0.3),
            ParamDef(name="c2", label_tex="c_2", min=0, max=1, step=0.01, default=0.7),
            ParamDef(name="width", label_tex="w", min=0.02, max=0.2, step=0.01, default=0.08),
            ParamDef(name="weight", label_tex="p", min=0, max=1, step=0.01, default=0.5),
        ],
        _twopeaks_likelihood,
    ),
)
