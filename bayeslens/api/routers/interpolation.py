"""
Interpolation Endpoint.

POST /api/v1/interpolate   — Fritsch–Carlson monotone cubic interpolation
"""

from fastapi import APIRouter

from bayeslens.engine.interpolation import interpolate_monotone
from bayeslens.schemas.interpolation import InterpolateRequest, InterpolateResponse

router = APIRouter(tags=["interpolation"])


@router.post("/interpolate", response_model=InterpolateResponse)
async def interpolate(body: InterpolateRequest):
    return InterpolateResponse(values=interpolate_monotone(body.xs, body.ys, body.eval_xs))
