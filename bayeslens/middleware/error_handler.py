"""
Error Handling.

- BayesLensError → structured JSON with its error code and status
  (422 for precondition violations, 404 for unknown presets)
- RequestValidationError → same envelope, code E1001, status 422
- Anything else → ErrorHandlerMiddleware, code E1000, status 500, with an
  error_id for log correlation

Degenerate numeric results are not errors and never reach this module.
"""

import traceback
import uuid
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from bayeslens.config import settings
from bayeslens.exceptions import BayesLensError, ErrorCode, ErrorDetail, ErrorResponse

logger = structlog.get_logger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Outermost middleware — catches everything not handled below it.

    Unexpected failures are returned in the standard error envelope with
    code E1000; details carry an error_id that matches the server log line.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)

        except Exception as exc:
            error_id = str(uuid.uuid4())

            logger.error(
                "unhandled_exception",
                error_id=error_id,
                path=request.url.path,
                method=request.method,
                error=str(exc),
                traceback=traceback.format_exc(),
            )

            details = {"error_id": error_id}
            if settings.debug:
                details["exception_type"] = type(exc).__name__
            error = BayesLensError("An internal error occurred.", details=details)

            request_id = getattr(request.state, "request_id", None)
            return JSONResponse(
                status_code=error.status_code,
                content=error.to_response(request_id).model_dump(),
            )


async def bayeslens_exception_handler(request: Request, exc: BayesLensError) -> JSONResponse:
    """Handle BayesLensError exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.warning(
        "bayeslens_error",
        error_code=exc.code.value,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(request_id).model_dump(),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body / path validation failures, in the same envelope as BayesLensError."""
    errors = [
        {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]
    logger.info("request_validation_failed", path=request.url.path, n_errors=len(errors))

    response = ErrorResponse(
        error=ErrorDetail(
            code=ErrorCode.VALIDATION_ERROR.value,
            message="Request validation failed",
            details={"errors": errors},
        ),
        request_id=getattr(request.state, "request_id", None),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return JSONResponse(status_code=422, content=response.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BayesLensError, bayeslens_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
