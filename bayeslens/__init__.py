"""
BayesLens — Bayesian belief-update engine.

Architecture:
    bayeslens/
    ├── engine/          # Pure numerics (quadrature, special functions,
    │                    #   interpolation, discrete/continuous updates, samplers)
    ├── presets/         # Prior/likelihood preset catalogs with parameter schemas
    ├── schemas/         # Pydantic request/response models
    ├── api/             # FastAPI routers (HTTP layer)
    └── middleware/      # Error handling, request context

Data Flow:
    Preset / sampler → (monotone interpolation) → Bayesian update
    → BeliefUpdate bundle → display formatting → JSON response

Every call recomputes from scratch. Nothing is persisted.

Version: 1.0.0
"""

__version__ = "1.0.0"
