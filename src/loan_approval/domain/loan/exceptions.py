"""Loan application domain exceptions."""

from loan_approval.domain.base.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)


class ApplicationNotFoundError(EntityNotFoundError):
    """Raised when a stored application is not found."""

    def __init__(self, application_id: str):
        """Initialize the instance."""
        super().__init__("Application", application_id)


class DocumentKindError(ValidationError):
    """Raised when a document kind name is not part of the closed set."""

    def __init__(self, kind: str):
        super().__init__(
            f"Unknown document kind: {kind}",
            "UNKNOWN_DOCUMENT_KIND",
            {"kind": kind},
        )
        self.kind = kind

class RepositoryOperationNotSupportedError(DomainException):
    """Raised when a repository cannot perform a lookup it was asked for."""

    def __init__(self, repository: str, operation: str):
        super().__init__(
            f"{repository} does not support {operation}",
            "OPERATION_NOT_SUPPORTED",
            {"repository": repository, "operation": operation},
        )
