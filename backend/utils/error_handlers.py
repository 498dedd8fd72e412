"""
Error handling decorators and utilities for API endpoints.

This module centralizes the conversion of unexpected failures into
generic 500 responses so no error detail reaches the caller.
"""

from functools import wraps
from typing import Callable
import inspect
from fastapi import HTTPException
import logging

from constants import HTTPStatus

logger = logging.getLogger(__name__)


def _internal_error(operation_name: str) -> HTTPException:
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle unexpected errors consistently across endpoints.

    HTTPExceptions raised by the endpoint pass through unchanged. Anything
    else is logged with its traceback and reported as a 500 carrying a
    generic message.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get users")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/users")
        @handle_api_errors("Get users")
        def get_users(...):
            return service.get_users()
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise _internal_error(operation_name)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise _internal_error(operation_name)

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
