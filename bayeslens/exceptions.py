"""
BayesLens Exceptions.

Centralized exception definitions with:
- Error codes for client handling
- HTTP status code mapping (used by the API layer only)
- Structured error responses

Degenerate results are NOT errors: zero total mass yields a None posterior,
support mismatches yield +inf. Only caller precondition violations raise.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


# ============================================================================
# ERROR CODES
# ============================================================================


class ErrorCode(str, Enum):
    """Application error codes."""

    # General errors (1xxx)
    INTERNAL_ERROR = "E1000"
    VALIDATION_ERROR = "E1001"

    # Numeric precondition errors (2xxx)
    LENGTH_MISMATCH = "E2000"
    INVALID_GRID = "E2001"

    # Preset errors (3xxx)
    UNKNOWN_PRESET = "E3000"
    INVALID_PARAMETER = "E3001"


# ============================================================================
# ERROR RESPONSE MODEL
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail
    request_id: Optional[str] = None
    timestamp: Optional[str] = None


# ============================================================================
# BASE EXCEPTION
# ============================================================================


class BayesLensError(Exception):
    """Base exception for BayesLens."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            error=ErrorDetail(
                code=self.code.value,
                message=self.message,
                details=self.details,
            ),
            request_id=request_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )


# ============================================================================
# SPECIFIC EXCEPTIONS
# ============================================================================


class LengthMismatchError(BayesLensError, ValueError):
    """Prior and likelihood arrays have different lengths."""

    def __init__(self, prior_length: int, likelihood_length: int):
        super().__init__(
            message="Prior and likelihood must have same length",
            code=ErrorCode.LENGTH_MISMATCH,
            status_code=422,
            details={
                "prior_length": prior_length,
                "likelihood_length": likelihood_length,
            },
        )


class InvalidGridError(BayesLensError, ValueError):
    """Grid size or domain cannot define a uniform spacing."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_GRID,
            status_code=422,
            details=details,
        )


class UnknownPresetError(BayesLensError, LookupError):
    """No preset registered under the requested family."""

    def __init__(self, space: str, kind: str, family: str):
        super().__init__(
            message=f"Preset not found: {space}/{kind}/{family}",
            code=ErrorCode.UNKNOWN_PRESET,
            status_code=404,
            details={"space": space, "kind": kind, "family": family},
        )


class InvalidParameterError(BayesLensError, ValueError):
    """Preset parameter is unknown or outside its declared range."""

    def __init__(
        self,
        message: str,
        parameter: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_PARAMETER,
            status_code=422,
            details={"parameter": parameter, **(details or {})},
        )
