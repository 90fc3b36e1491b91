# loan_approval/infrastructure/persistence/exceptions.py
from loan_approval.domain.base.exceptions import DomainException


class PersistenceError(DomainException):
    """Base exception for persistence-related errors."""


class StorageError(PersistenceError):
    """Raised when there's an error with storage operations."""

    def __init__(self, message: str):
        super().__init__(message, "STORAGE_ERROR")
