"""
Preset Schema.

A preset is a named, family-tagged generator plus the declarative
parameter schema the presentation layer uses to build its controls.

Generators share one signature:
    generator(point_count, params, domain, rng) -> list[float]
Deterministic generators ignore rng.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict, model_validator

from bayeslens.config import settings
from bayeslens.engine.samplers import make_rng
from bayeslens.exceptions import InvalidParameterError

logger = structlog.get_logger(__name__)

Domain = tuple[float, float]
Generator = Callable[[int, Mapping[str, float], Domain, Optional[random.Random]], list[float]]


class StateSpace(str, Enum):
    """Discrete states or a continuous density grid."""
    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class PresetKind(str, Enum):
    PRIOR = "prior"
    LIKELIHOOD = "likelihood"


class PresetFamily(str, Enum):
    """Shape tags. One registry entry per (space, kind, family)."""
    # Shared
    UNIFORM = "uniform"
    PEAKED = "peaked"
    # Continuous priors
    TRUNCNORM = "truncnorm"
    BETA = "beta"
    BIMODAL = "bimodal"
    LINEAR = "linear"
    # Continuous likelihoods
    ONEPEAK = "onepeak"
    GAUSSIAN = "gaussian"
    WINDOW = "window"
    STEP = "step"
    RAMP = "ramp"
    TWOPEAKS = "twopeaks"
    # Discrete samplers
    IID_UNIFORM = "iid_uniform"
    IID_LOG_UNIFORM = "iid_log_uniform"
    IID_BERNOULLI = "iid_bernoulli"
    DISCRIMINATING = "discriminating"


class ParamDef(BaseModel):
    """One tunable scalar of a generator."""

    model_config = ConfigDict(frozen=True)

    name: str
    label_tex: str
    min: float
    max: float
    step: float
    default: float
    label: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self) -> "ParamDef":
        if not self.min <= self.default <= self.max:
            raise ValueError(
                f"default {self.default} outside [{self.min}, {self.max}] for {self.name}"
            )
        if self.step <= 0:
            raise ValueError(f"step must be positive for {self.name}")
        return self

    @property
    def display_label(self) -> str:
        return self.label or self.name


@dataclass(frozen=True)
class Preset:
    """
    Named generator with its parameter schema.

    Catalogs of presets are fixed tuples built at import time.
    """
    name: str
    family: PresetFamily
    kind: PresetKind
    space: StateSpace
    param_defs: tuple[ParamDef, ...]
    generator: Generator
    stochastic: bool = False

    @property
    def default_params(self) -> dict[str, float]:
        return {d.name: d.default for d in self.param_defs}

    @property
    def param_names(self) -> set[str]:
        return {d.name for d in self.param_defs}

    def resolve_params(self, params: Optional[Mapping[str, float]] = None) -> dict[str, float]:
        """Caller values merged over defaults. Unknown names are rejected."""
        params = dict(params or {})
        unknown = set(params) - self.param_names
        if unknown:
            name = sorted(unknown)[0]
            logger.warning(
                "preset_unknown_parameter",
                preset=self.family.value,
                parameter=name,
            )
            raise InvalidParameterError(
                f"Unknown parameter for {self.name}: {name}",
                parameter=name,
                details={"allowed": sorted(self.param_names)},
            )
        return {**self.default_params, **params}

    def validate_params(self, params: Mapping[str, float]) -> dict[str, float]:
        """resolve_params plus a [min, max] check on every value."""
        resolved = self.resolve_params(params)
        for d in self.param_defs:
            value = resolved[d.name]
            if not d.min <= value <= d.max:
                raise InvalidParameterError(
                    f"{d.name}={value} outside [{d.min}, {d.max}]",
                    parameter=d.name,
                    details={"value": value, "min": d.min, "max": d.max},
                )
        return resolved

    def generate(
        self,
        point_count: int,
        params: Optional[Mapping[str, float]] = None,
        domain: Optional[Domain] = None,
        rng: Optional[random.Random] = None,
    ) -> list[float]:
        """
        Run the generator.

        Args:
            point_count: Number of states / grid points
            params: Overrides for default parameter values
            domain: Continuous support (a, b); defaults to the configured domain
            rng: Random handle for stochastic presets; a fresh one if omitted
        """
        resolved = self.resolve_params(params)
        if domain is None:
            domain = settings.default_domain
        if rng is None and self.stochastic:
            rng = make_rng()
        return self.generator(point_count, resolved, domain, rng)
