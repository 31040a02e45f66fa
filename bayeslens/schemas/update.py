"""Pydantic schemas for belief-update requests and responses."""

import math
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator

from bayeslens.config import settings
from bayeslens.engine.discrete import BeliefUpdate
from bayeslens.engine.formatting import format_number

Finite = Annotated[float, Field(allow_inf_nan=False)]
NonNegative = Annotated[float, Field(ge=0, allow_inf_nan=False)]


def _check_log_base(v: float) -> float:
    if not math.isfinite(v) or v <= 0 or v == 1:
        raise ValueError("log_base must be finite, positive and not equal to 1")
    return v


def _check_domain(v: tuple[float, float]) -> tuple[float, float]:
    if not v[0] < v[1]:
        raise ValueError("domain lower bound must be below upper bound")
    return v


class DiscreteUpdateRequest(BaseModel):
    prior: list[NonNegative] = Field(min_length=1)
    likelihood: list[NonNegative] = Field(min_length=1)
    log_base: float = Field(default_factory=lambda: settings.default_log_base)

    check_log_base = field_validator("log_base")(_check_log_base)


class ContinuousUpdateRequest(BaseModel):
    prior: list[NonNegative] = Field(min_length=2)
    likelihood: list[NonNegative] = Field(min_length=2)
    domain: tuple[Finite, Finite] = Field(default_factory=lambda: settings.default_domain)
    log_base: float = Field(default_factory=lambda: settings.default_log_base)

    check_log_base = field_validator("log_base")(_check_log_base)
    check_domain = field_validator("domain")(_check_domain)


class QuantityOut(BaseModel):
    """
    A scalar that may be non-finite.

    value is null for NaN / ±inf; display always carries the distinct
    token ("undefined", "∞", "-∞") or the formatted number.
    """
    value: Optional[float]
    display: str

    @classmethod
    def from_float(cls, value: float) -> "QuantityOut":
        return cls(
            value=value if math.isfinite(value) else None,
            display=format_number(value),
        )


class BeliefUpdateResponse(BaseModel):
    posterior: Optional[list[float]]
    posterior_defined: bool
    marginal_likelihood: QuantityOut
    surprisal: QuantityOut
    kl: QuantityOut
    r: QuantityOut
    log_base: float
    unit: str
    dz: Optional[float] = None

    @classmethod
    def from_update(cls, update: BeliefUpdate, dz: Optional[float] = None) -> "BeliefUpdateResponse":
        return cls(
            posterior=update.posterior,
            posterior_defined=update.is_defined,
            marginal_likelihood=QuantityOut.from_float(update.marginal_likelihood),
            surprisal=QuantityOut.from_float(update.surprisal),
            kl=QuantityOut.from_float(update.kl),
            r=QuantityOut.from_float(update.r),
            log_base=update.log_base,
            unit=update.unit,
            dz=dz,
        )


class ResampleRequest(BaseModel):
    control_points: list[Finite]
    domain: tuple[Finite, Finite] = Field(default_factory=lambda: settings.default_domain)
    point_count: int = Field(default_factory=lambda: settings.eval_point_count, ge=2)
    normalize: bool = True

    check_domain = field_validator("domain")(_check_domain)

    @field_validator("point_count")
    @classmethod
    def check_point_count(cls, v: int) -> int:
        if v > settings.max_point_count:
            raise ValueError(f"point_count must be <= {settings.max_point_count}")
        return v


class ResampleResponse(BaseModel):
    xs: list[float]
    values: Optional[list[float]]
    dz: float
