"""Request models for application submission."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.value_objects import Document, DocumentKind


class SubmissionModel(BaseModel):
    """Request bodies take camelCase aliases or snake_case names, nothing else."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class DocumentPayload(SubmissionModel):
    """Supporting document in a submission."""

    kind: DocumentKind
    content_reference: str = Field("", alias="contentReference")


class ApplicationSubmission(SubmissionModel):
    """Loan application as submitted over HTTP."""

    application_id: Optional[str] = Field(None, alias="applicationId")
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    amount: Optional[float] = Field(None, allow_inf_nan=False)
    purpose: Optional[str] = None
    documents: List[DocumentPayload] = Field(default_factory=list)

    def to_domain(self) -> LoanApplication:
        """Convert to the domain aggregate."""
        data = self.model_dump(exclude={"application_id", "documents"})
        if self.application_id:
            data["application_id"] = self.application_id
        data["documents"] = tuple(
            Document(kind=document.kind, content_reference=document.content_reference)
            for document in self.documents
        )
        return LoanApplication(**data)
