"""Application approval use case."""

from .batch import BatchReport, process_batch
from .document_validation import RequiredDocumentsValidationService
from .field_validation import RequiredFieldValidator
from .pipeline import (
    DEFAULT_MIN_CREDIT_SCORE,
    ApplicationApprovalPipeline,
    PipelineCollaborators,
)

__all__ = [
    "ApplicationApprovalPipeline",
    "PipelineCollaborators",
    "DEFAULT_MIN_CREDIT_SCORE",
    "RequiredFieldValidator",
    "RequiredDocumentsValidationService",
    "BatchReport",
    "process_batch",
]
