"""
Continuous Belief Update Endpoints.

POST /api/v1/continuous/update     — update over a uniform density grid
POST /api/v1/continuous/resample   — smooth control points onto a grid
"""

from fastapi import APIRouter

from bayeslens.engine import continuous
from bayeslens.engine.quadrature import grid_spacing
from bayeslens.schemas.update import (
    BeliefUpdateResponse,
    ContinuousUpdateRequest,
    ResampleRequest,
    ResampleResponse,
)

router = APIRouter(prefix="/continuous", tags=["continuous"])


@router.post("/update", response_model=BeliefUpdateResponse)
async def continuous_update(body: ContinuousUpdateRequest):
    """Bayesian update over densities; dz is derived from grid length and domain."""
    dz = grid_spacing(len(body.prior), body.domain)
    update = continuous.compute_all(body.prior, body.likelihood, dz, body.log_base)
    return BeliefUpdateResponse.from_update(update, dz=dz)


@router.post("/resample", response_model=ResampleResponse)
async def resample(body: ResampleRequest):
    """
    Monotone-interpolate evenly spaced control points onto point_count grid points.

    With normalize=true the result integrates to 1 (null if it has no mass).
    """
    if body.normalize:
        xs, values, dz = continuous.density_from_control_points(
            body.control_points, body.domain, body.point_count
        )
    else:
        dz = grid_spacing(body.point_count, body.domain)
        xs, values = continuous.likelihood_from_control_points(
            body.control_points, body.domain, body.point_count
        )
    return ResampleResponse(xs=xs, values=values, dz=dz)
