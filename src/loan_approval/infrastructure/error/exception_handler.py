"""Exception to error response mapping shared by the API and the CLI."""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from loan_approval.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from loan_approval.domain.loan.exceptions import RepositoryOperationNotSupportedError
from loan_approval.infrastructure.logging.logger import get_logger
from loan_approval.infrastructure.persistence.exceptions import PersistenceError


class ErrorCode(str, Enum):
    """Error codes reported to callers."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    NOT_SUPPORTED = "NOT_SUPPORTED"
    DOMAIN_ERROR = "DOMAIN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorResponse:
    """Standardized error response."""

    error_code: ErrorCode
    message: str
    http_status: int
    details: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the error envelope used in HTTP responses."""
        return {
            "success": False,
            "error": {
                "code": self.error_code.value,
                "message": self.message,
                "details": self.details,
            },
            "timestamp": self.timestamp,
        }


class ExceptionHandler:
    """Maps exceptions to ErrorResponse objects and logs them."""

    def __init__(self):
        self._logger = get_logger(__name__)

    def handle_error_for_http(self, exc: Exception) -> ErrorResponse:
        """
        Build an error response for an exception.

        Args:
            exc: The exception raised while serving a request

        Returns:
            Error response with HTTP status
        """
        if isinstance(exc, EntityNotFoundError):
            response = ErrorResponse(ErrorCode.NOT_FOUND, exc.message, 404, exc.details)
        elif isinstance(exc, ValidationError):
            response = ErrorResponse(ErrorCode.VALIDATION_ERROR, exc.message, 422, exc.details)
        elif isinstance(exc, PydanticValidationError):
            response = ErrorResponse(
                ErrorCode.VALIDATION_ERROR,
                "Invalid input",
                422,
                {"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
            )
        elif isinstance(exc, ConfigurationError):
            response = ErrorResponse(ErrorCode.CONFIGURATION_ERROR, exc.message, 500, exc.details)
        elif isinstance(exc, RepositoryOperationNotSupportedError):
            response = ErrorResponse(ErrorCode.NOT_SUPPORTED, exc.message, 501, exc.details)
        elif isinstance(exc, PersistenceError):
            response = ErrorResponse(ErrorCode.STORAGE_ERROR, exc.message, 500, exc.details)
        elif isinstance(exc, DomainException):
            response = ErrorResponse(ErrorCode.DOMAIN_ERROR, exc.message, 400, exc.details)
        else:
            response = ErrorResponse(
                ErrorCode.INTERNAL_ERROR, "An internal error occurred", 500
            )

        if response.http_status >= 500:
            self._logger.error(
                "Unhandled error",
                error_code=response.error_code.value,
                error_type=type(exc).__name__,
                error=str(exc),
            )
        else:
            self._logger.info(
                "Request failed",
                error_code=response.error_code.value,
                error=str(exc),
            )
        return response


_exception_handler: Optional[ExceptionHandler] = None
_exception_handler_lock = threading.Lock()


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    global _exception_handler
    with _exception_handler_lock:
        if _exception_handler is None:
            _exception_handler = ExceptionHandler()
        return _exception_handler
