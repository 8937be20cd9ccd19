"""
Custom exceptions for the interview generation and session service.

This module defines a small hierarchy of exceptions plus the FastAPI
handlers that turn anything escaping a route into the
``{"success": false, "error": ...}`` envelope used across the API.
"""
import logging
from typing import Optional
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from app.core.logger import get_correlation_id

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exception Classes
# ============================================================================

class AppError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(AppError):
    """Exception raised when configuration is invalid or missing."""
    pass


class MissingFieldsError(AppError):
    """Exception raised when a request lacks required fields."""
    pass


class GenerationError(AppError):
    """Exception raised when the generation service output is empty or unusable."""
    pass


class IdentityProviderError(AppError):
    """
    Exception raised by the identity provider adapter.

    ``code`` carries the provider error code without its ``auth/`` prefix,
    e.g. ``email-already-exists``.
    """
    def __init__(self, message: str, code: str = "unknown", details: Optional[dict] = None):
        self.code = code
        super().__init__(message, details)


EMAIL_ALREADY_EXISTS = "email-already-exists"


# ============================================================================
# FastAPI Exception Handlers
# ============================================================================

def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception on {request.url.path} (correlation_id={get_correlation_id()}): {exc}", exc_info=True)
    return error_response(500, str(exc) or "Internal Server Error")


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(f"HTTP exception: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))
