"""Loan application aggregate."""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from loan_approval.domain.loan.value_objects import Document, DocumentKind


class LoanApplication(BaseModel):
    """
    Loan application submitted for approval.

    Applications are immutable once constructed. Required fields are
    optional here on purpose: a missing or blank field is reported by the
    field validation stage as a rejection reason, not raised on construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    application_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    amount: Optional[float] = Field(None, allow_inf_nan=False)
    purpose: Optional[str] = None
    documents: Tuple[Document, ...] = ()
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_documents(self) -> bool:
        """Whether the application carries any supporting documents."""
        return len(self.documents) > 0

    @property
    def document_kinds(self) -> FrozenSet[DocumentKind]:
        """Kinds of the documents attached to this application."""
        return frozenset(document.kind for document in self.documents)

    def get_id(self) -> str:
        """Get the aggregate identifier."""
        return self.application_id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoanApplication":
        """Create an application from a dictionary."""
        return cls.model_validate(data)
