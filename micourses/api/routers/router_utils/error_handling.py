"""
API error handling utilities.

Provides a decorator for consistent error handling across endpoints:
domain errors become HTTPExceptions carrying the mapped status code.

Dependencies: fastapi, micourses.core.exceptions
System role: Domain error to HTTP translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from micourses.core.exceptions import MarketplaceError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_api_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping MarketplaceError subclasses to their HTTP status codes
    - Hiding unexpected failures behind a generic 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except MarketplaceError as e:
            logger.warning(
                "Request rejected",
                extra={
                    "endpoint": func.__name__,
                    "error_type": type(e).__name__,
                    "status_code": e.status_code,
                    "error": e.message,
                },
            )
            raise HTTPException(status_code=e.status_code, detail=e.message)

        except Exception as e:
            logger.exception(
                "Unexpected failure in request handler",
                extra={"endpoint": func.__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
