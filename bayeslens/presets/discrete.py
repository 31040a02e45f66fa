"""
Discrete Preset Catalogs.

Wraps the randomized samplers as presets over n discrete states.
Priors come back normalized; likelihoods are raw values in [0, 1].
The domain argument is ignored: discrete states have no support.
"""

from bayeslens.engine import samplers
from bayeslens.presets.schema import (
    ParamDef,
    Preset,
    PresetFamily,
    PresetKind,
    StateSpace,
)

_EPSILON = ParamDef(
    name="epsilon",
    label="Minimum value",
    label_tex="\\varepsilon",
    min=0.0001,
    max=0.5,
    step=0.0001,
    default=samplers.DEFAULT_LOG_UNIFORM_EPSILON,
)
_BERNOULLI_P = ParamDef(
    name="p",
    label="P(1)",
    label_tex="p",
    min=0,
    max=1,
    step=0.01,
    default=samplers.DEFAULT_BERNOULLI_P,
)


def _preset(name, family, kind, param_defs, generator, stochastic=True) -> Preset:
    return Preset(
        name=name,
        family=family,
        kind=kind,
        space=StateSpace.DISCRETE,
        param_defs=tuple(param_defs),
        generator=generator,
        stochastic=stochastic,
    )


DISCRETE_PRIOR_PRESETS: tuple[Preset, ...] = (
    _preset(
        "Uniform",
        PresetFamily.UNIFORM,
        PresetKind.PRIOR,
        [],
        lambda n, params, domain, rng: samplers.uniform_prior(n),
        stochastic=False,
    ),
    _preset(
        "Random (Uniform)",
        PresetFamily.IID_UNIFORM,
        PresetKind.PRIOR,
        [],
        lambda n, params, domain, rng: samplers.iid_uniform(n, rng),
    ),
    _preset(
        "Random (Log-Uniform)",
        PresetFamily.IID_LOG_UNIFORM,
        PresetKind.PRIOR,
        [_EPSILON],
        lambda n, params, domain, rng: samplers.iid_log_uniform(n, rng, params["epsilon"]),
    ),
    _preset(
        "Random (Sparse)",
        PresetFamily.IID_BERNOULLI,
        PresetKind.PRIOR,
        [_BERNOULLI_P],
        lambda n, params, domain, rng: samplers.iid_bernoulli(n, rng, params["p"]),
    ),
    _preset(
        "Peaked",
        PresetFamily.PEAKED,
        PresetKind.PRIOR,
        [
            ParamDef(
                name="peak_weight",
                label="Peak weight",
                label_tex="w",
                min=0,
                max=1,
                step=0.01,
                default=samplers.DEFAULT_PEAK_WEIGHT,
            ),
        ],
        lambda n, params, domain, rng: samplers.peaked(n, rng, peak_weight=params["peak_weight"]),
    ),
)


DISCRETE_LIKELIHOOD_PRESETS: tuple[Preset, ...] = (
    _preset(
        "Uniform (all 1)",
        PresetFamily.UNIFORM,
        PresetKind.LIKELIHOOD,
        [],
        lambda n, params, domain, rng: samplers.uniform_likelihood(n),
        stochastic=False,
    ),
    _preset(
        "Random (Uniform)",
        PresetFamily.IID_UNIFORM,
        PresetKind.LIKELIHOOD,
        [],
        lambda n, params, domain, rng: samplers.iid_uniform_likelihood(n, rng),
    ),
    _preset(
        "Random (Log-Uniform)",
        PresetFamily.IID_LOG_UNIFORM,
        PresetKind.LIKELIHOOD,
        [_EPSILON],
        lambda n, params, domain, rng: samplers.iid_log_uniform_likelihood(
            n, rng, params["epsilon"]
        ),
    ),
    _preset(
        "Random (Sparse)",
        PresetFamily.IID_BERNOULLI,
        PresetKind.LIKELIHOOD,
        [_BERNOULLI_P],
        lambda n, params, domain, rng: samplers.iid_bernoulli_likelihood(n, rng, params["p"]),
    ),
    _preset(
        "Discriminating",
        PresetFamily.DISCRIMINATING,
        PresetKind.LIKELIHOOD,
        [
            ParamDef(
                name="high_value",
                label="High likelihood",
                label_tex="h",
                min=0,
                max=1,
                step=0.01,
                default=samplers.DEFAULT_HIGH_VALUE,
            ),
            ParamDef(
                name="low_value",
                label="Low likelihood",
                label_tex="\\ell",
                min=0,
                max=1,
                step=0.01,
                default=samplers.DEFAULT_LOW_VALUE,
            ),
        ],
        lambda n, params, domain, rng: samplers.discriminating_likelihood(
            n, rng, high_value=params["high_value"], low_value=params["low_value"]
        ),
    ),
)
