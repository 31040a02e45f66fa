"""
Request Context Middleware.

Every response carries:
- X-Request-ID   (taken from the upstream proxy when present, else a UUID4)
- X-Response-Time
- X-BayesLens-Version

The request_id is bound into structlog contextvars so engine-level logs
emitted while serving the request can be correlated. Liveness probes are
logged at debug level.
"""

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from bayeslens.config import settings

logger = structlog.get_logger(__name__)

QUIET_PATHS: frozenset[str] = frozenset({"/health"})


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id for log correlation and times each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers.update({
            "X-Request-ID": request_id,
            "X-Response-Time": f"{elapsed_ms}ms",
            "X-BayesLens-Version": settings.app_version,
        })

        log = logger.debug if request.url.path in QUIET_PATHS else logger.info
        log("request_completed", status=response.status_code, elapsed_ms=elapsed_ms)
        return response
