#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class NotFoundException(ServiceException):
    """Raised when a user, profile, job or application is not found."""
    status_code = 404


class ConflictException(ServiceException):
    """Raised when a record already exists (duplicate email, profile, application)."""
    status_code = 409


class ValidationException(ServiceException):
    """Raised when a request is well-formed but not acceptable."""
    status_code = 400


class StoreUnavailableException(ServiceException):
    """Raised when the backing store cannot be reached."""
    status_code = 500


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
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def store_exception_handler(
    request: Request,
    exc: OperationalError
) -> JSONResponse:
    """Translate connection-level database failures into a stable error body."""
    return await service_exception_handler(
        request,
        StoreUnavailableException(
            "Database connection failed. Please check the DATABASE_URL setting."
        )
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
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
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(OperationalError, store_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
