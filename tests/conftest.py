"""
Test fixtures for BayesLens.

Provides:
- Seeded RNG handles for reproducible sampler tests
- Async HTTP client bound to the FastAPI app
- Small reference distributions
"""

import os
import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before importing the app so Settings picks them up
os.environ["BAYESLENS_ENVIRONMENT"] = "testing"
os.environ["BAYESLENS_LOG_LEVEL"] = "WARNING"

from bayeslens.main import app  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def coin_prior() -> list[float]:
    return [0.5, 0.5]


@pytest.fixture
def heads_likelihood() -> list[float]:
    return [1.0, 0.0]
