"""
Error handling decorators and utilities for API endpoints.

Client validation failures on the Friends resource are returned as values
by the resource; what reaches these handlers is infrastructure failure
(mapped to 5xx) and malformed requests (mapped to 400).
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from constants import HTTPStatus
from exceptions import ApplicationError, DatabaseError

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, exc: Exception) -> HTTPException:
    if isinstance(exc, DatabaseError):
        logger.error(f"{operation_name} - Database error: {exc.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {exc.message}"
        )
    if isinstance(exc, ApplicationError):
        logger.error(f"{operation_name} - Application error: {exc.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {exc.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {exc}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle server-side errors consistently across endpoints.

    Application and unexpected exceptions are logged and converted to a 500
    HTTPException. HTTPException raised by the endpoint passes through.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create friend")

    Example:
        @handle_api_errors("Get friend")
        def get_friends(friend_id: int, ...):
            return render(resource.get_friends(friend_id))
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render unparseable path ids and invalid bodies as 400 Bad Request.
    """
    field_errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(f"Invalid request {request.method} {request.url.path}: {field_errors}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={
            "type": "about:blank",
            "title": "Method argument not valid",
            "status": HTTPStatus.BAD_REQUEST,
            "message": "error.validation",
            "fieldErrors": field_errors,
        },
    )
