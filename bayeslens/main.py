"""
BayesLens — FastAPI Application.

Entry point for the engine API consumed by the presentation layer.
Run: uvicorn bayeslens.api.app:app --host 0.0.0.0 --port 8010 --reload
     or: python -m bayeslens.main

Routes:
  - POST /api/v1/discrete/update
  - POST /api/v1/continuous/update
  - POST /api/v1/continuous/resample
  - POST /api/v1/interpolate
  - GET  /api/v1/presets/{space}/{kind}
  - POST /api/v1/presets/{space}/{kind}/{family}
  - GET  /health
"""

import logging
import sys
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bayeslens.api.routers.continuous import router as continuous_router
from bayeslens.api.routers.discrete import router as discrete_router
from bayeslens.api.routers.interpolation import router as interpolation_router
from bayeslens.api.routers.presets import router as presets_router
from bayeslens.config import settings
from bayeslens.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from bayeslens.middleware.request_context import RequestContextMiddleware


def configure_logging() -> None:
    """Configure structlog on top of stdlib logging."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown."""
    logger.info(
        "bayeslens_starting",
        version=settings.app_version,
        environment=settings.environment,
        log_base=settings.default_log_base,
        sampler_seed=settings.sampler_seed,
    )
    yield
    logger.info("bayeslens_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "# BayesLens\n\n"
            "Bayesian belief-update engine: posterior, evidence, surprisal, "
            "KL divergence and R over discrete states and density grids.\n\n"
            "Non-finite scalars are returned as `{value: null, display: token}` "
            "with tokens `undefined`, `∞`, `-∞`."
        ),
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_tags=[
            {"name": "health", "description": "Liveness probe"},
            {"name": "discrete", "description": "Discrete Bayesian update"},
            {"name": "continuous", "description": "Continuous Bayesian update and resampling"},
            {"name": "interpolation", "description": "Monotone cubic interpolation"},
            {"name": "presets", "description": "Prior / likelihood preset catalogs"},
        ],
    )

    # ── Middleware (last added = outermost) ───────────────────────────
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────
    app.include_router(discrete_router, prefix=settings.api_prefix)
    app.include_router(continuous_router, prefix=settings.api_prefix)
    app.include_router(interpolation_router, prefix=settings.api_prefix)
    app.include_router(presets_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health():
        """Liveness probe. The engine has no dependencies to check."""
        return {
            "status": "ok",
            "version": settings.app_version,
            "service": "bayeslens",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bayeslens.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
