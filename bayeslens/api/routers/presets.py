"""
Preset Catalog Endpoints.

GET  /api/v1/presets/{space}/{kind}            — catalog with parameter schemas
POST /api/v1/presets/{space}/{kind}/{family}   — run a generator
"""

from fastapi import APIRouter

from bayeslens.config import settings
from bayeslens.engine.quadrature import grid_spacing
from bayeslens.engine.samplers import make_rng
from bayeslens.exceptions import InvalidGridError
from bayeslens.presets import PresetKind, StateSpace, get_preset, list_presets
from bayeslens.schemas.preset import (
    GenerateRequest,
    GenerateResponse,
    PresetListResponse,
    PresetResponse,
)

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("/{space}/{kind}", response_model=PresetListResponse)
async def get_catalog(space: StateSpace, kind: PresetKind):
    """Fixed, ordered preset catalog for one state space and kind."""
    presets = [PresetResponse.from_preset(p) for p in list_presets(space, kind)]
    return PresetListResponse(presets=presets, total=len(presets))


@router.post("/{space}/{kind}/{family}", response_model=GenerateResponse)
async def generate(space: StateSpace, kind: PresetKind, family: str, body: GenerateRequest):
    """
    Generate a prior or likelihood array.

    Parameters are checked against the preset schema; stochastic presets
    are reproducible when a seed is given.
    """
    preset = get_preset(space, kind, family)
    params = preset.validate_params(body.params)
    domain = body.domain or settings.default_domain

    if body.point_count > settings.max_point_count:
        raise InvalidGridError(
            f"point_count must be <= {settings.max_point_count}",
            details={"point_count": body.point_count},
        )
    if space == StateSpace.CONTINUOUS:
        grid_spacing(body.point_count, domain)

    values = preset.generate(body.point_count, params, domain, rng=make_rng(body.seed))
    return GenerateResponse(
        family=preset.family.value,
        params=params,
        domain=domain,
        values=values,
    )
