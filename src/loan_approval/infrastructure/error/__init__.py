"""Error handling infrastructure package."""

from .exception_handler import (
    ErrorCode,
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "ExceptionHandler",
    "get_exception_handler",
]
