#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class NotificationNotFoundException(ServiceException):
    """Raised when a notification does not exist."""
    pass


class NotificationForbiddenException(ServiceException):
    """Raised when a notification belongs to another user."""
    pass


class TranscriptNotFoundException(ServiceException):
    """Raised when a student has no stored transcript."""
    pass


class SchedulerNotFoundException(ServiceException):
    """Raised when a scheduler name is unknown."""
    pass


class InvalidRequestException(ServiceException):
    """Raised when a request is well-formed JSON but unusable."""
    pass


_STATUS_CODES = (
    ((NotificationNotFoundException, TranscriptNotFoundException, SchedulerNotFoundException), 404),
    ((NotificationForbiddenException,), 403),
    ((InvalidRequestException,), 400),
)


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    for exc_types, code in _STATUS_CODES:
        if isinstance(exc, exc_types):
            status_code = code
            break

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
