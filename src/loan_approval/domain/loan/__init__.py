"""Loan application bounded context."""

from .aggregate import LoanApplication
from .exceptions import (
    ApplicationNotFoundError,
    DocumentKindError,
    RepositoryOperationNotSupportedError,
)
from .outcomes import (
    AwaitingMoreInfo,
    CreditScoreResult,
    DocumentValidationResult,
    Pass,
    ProcessingResult,
    Reject,
    ValidationOutcome,
)
from .repository import ApplicationRepository
from .value_objects import (
    Document,
    DocumentKind,
    PipelineStage,
    ProcessingStatus,
    parse_document_kinds,
    tokenise,
)

__all__ = [
    "LoanApplication",
    "Document",
    "DocumentKind",
    "PipelineStage",
    "ProcessingStatus",
    "parse_document_kinds",
    "tokenise",
    "Pass",
    "Reject",
    "AwaitingMoreInfo",
    "ValidationOutcome",
    "DocumentValidationResult",
    "CreditScoreResult",
    "ProcessingResult",
    "ApplicationRepository",
    "ApplicationNotFoundError",
    "DocumentKindError",
    "RepositoryOperationNotSupportedError",
]
