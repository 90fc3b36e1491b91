"""Approval pipeline configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from loan_approval.domain.loan.value_objects import DocumentKind, parse_document_kinds


class PipelineConfig(BaseModel):
    """Approval pipeline configuration."""

    min_credit_score: int = Field(650, description="Lowest credit score that is accepted")
    document_validation_enabled: bool = Field(
        True, description="Run the document validation stage"
    )
    credit_check_enabled: bool = Field(True, description="Run the credit check stage")
    required_documents: List[DocumentKind] = Field(
        default_factory=lambda: [DocumentKind.IDENTITY_PROOF, DocumentKind.INCOME_PROOF],
        description="Document kinds every application must carry",
    )

    @field_validator("min_credit_score")
    @classmethod
    def validate_min_credit_score(cls, v: int) -> int:
        """Validate minimum credit score."""
        if v < 0:
            raise ValueError("Minimum credit score cannot be negative")
        return v

    @field_validator("required_documents", mode="before")
    @classmethod
    def parse_required_documents(cls, v):
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return list(parse_document_kinds(v))
        return v
