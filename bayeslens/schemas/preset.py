"""Pydantic schemas for preset catalogs and generation."""

from typing import Optional

from pydantic import BaseModel, Field

from bayeslens.config import settings
from bayeslens.presets import ParamDef, Preset
from bayeslens.schemas.update import Finite


class PresetResponse(BaseModel):
    name: str
    family: str
    kind: str
    space: str
    stochastic: bool
    default_params: dict[str, float]
    param_defs: list[ParamDef]

    @classmethod
    def from_preset(cls, preset: Preset) -> "PresetResponse":
        return cls(
            name=preset.name,
            family=preset.family.value,
            kind=preset.kind.value,
            space=preset.space.value,
            stochastic=preset.stochastic,
            default_params=preset.default_params,
            param_defs=list(preset.param_defs),
        )


class PresetListResponse(BaseModel):
    presets: list[PresetResponse]
    total: int


class GenerateRequest(BaseModel):
    point_count: int = Field(default_factory=lambda: settings.default_point_count, ge=1)
    params: dict[str, Finite] = Field(default_factory=dict)
    domain: Optional[tuple[Finite, Finite]] = None
    seed: Optional[int] = Field(default=None, description="Seed for stochastic presets")


class GenerateResponse(BaseModel):
    family: str
    params: dict[str, float]
    domain: tuple[float, float]
    values: list[float]
