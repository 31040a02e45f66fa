"""
Discrete Belief Update Endpoints.

POST /api/v1/discrete/update   — posterior, evidence, surprisal, KL, R
"""

from fastapi import APIRouter

from bayeslens.engine import discrete
from bayeslens.schemas.update import BeliefUpdateResponse, DiscreteUpdateRequest

router = APIRouter(prefix="/discrete", tags=["discrete"])


@router.post("/update", response_model=BeliefUpdateResponse)
async def discrete_update(body: DiscreteUpdateRequest):
    """Bayesian update over discrete states. Prior and likelihood must index the same states."""
    update = discrete.compute_all(body.prior, body.likelihood, body.log_base)
    return BeliefUpdateResponse.from_update(update)
