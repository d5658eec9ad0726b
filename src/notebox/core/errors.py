"""Turning unexpected failures into generic 500 responses."""

import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

from fastapi import HTTPException, status

from .logging import get_logger

logger = get_logger("errors")

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_unexpected_errors(detail: str, log_message: Optional[str] = None) -> Callable[[F], F]:
    """Wrap an async service method so that anything other than an
    ``HTTPException`` is logged with its traceback and surfaces to the client
    as a 500 carrying only ``detail``.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                logger.error(log_message or detail, exc_info=e, extra={"operation": func.__qualname__})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator
