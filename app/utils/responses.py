"""
Standardized response utilities
"""

import logging
from typing import Any, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common import StandardResponse, ErrorResponse
from app.utils.errors import GuestServiceError

logger = logging.getLogger(__name__)

def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=data
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def error_response(
    error: str,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(error=error)
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

async def guest_service_error_handler(request: Request, exc: GuestServiceError) -> JSONResponse:
    return error_response(exc.message, status_code=exc.status_code)

async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors, not 422s"""
    errors = exc.errors()
    logger.info(f"Rejected request to {request.url.path}: {errors}")

    if any(tuple(error.get("loc", ()))[-1:] == ("name",) for error in errors):
        message = "Name is required"
    else:
        message = "Invalid request body"
    return error_response(message, status_code=status.HTTP_400_BAD_REQUEST)

async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback once the exception is re-raised
    logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return error_response("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

def register_exception_handlers(app: FastAPI) -> None:
    """Convert every failure into a JSON error body"""
    app.add_exception_handler(GuestServiceError, guest_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
