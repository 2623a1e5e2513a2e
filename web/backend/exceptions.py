#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import EngineError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ConsultantNotFoundException(ServiceException):
    """Raised when a consultant is not in the registry."""
    pass


class ProjectNotFoundException(ServiceException):
    """Raised when a project or one of its documents is not stored."""
    pass


class InvalidProgramException(ServiceException):
    """Raised when posted selections or settings cannot be calculated."""
    pass


def _error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, (ConsultantNotFoundException, ProjectNotFoundException)):
        status_code = 404
    elif isinstance(exc, InvalidProgramException):
        status_code = 400

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"Service error in {request.url.path}: {exc}")

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def engine_exception_handler(
    request: Request,
    exc: EngineError
) -> JSONResponse:
    """
    Handle scoring/allocation engine errors raised on bad client input
    (malformed candidate, unknown space code, unknown tier).
    """
    logger.warning(f"Rejected input in {request.url.path}: {exc}")
    return _error_response(400, str(exc), exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")
    return _error_response(500, "Internal server error", "InternalError")
