"""Stage outcomes and pipeline results.

All of these are tagged values created fresh for every pipeline run. Each
union member carries a literal tag so callers can match on the variant
instead of checking for None.
"""

from typing import FrozenSet, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.value_objects import (
    DocumentKind,
    PipelineStage,
    ProcessingStatus,
)


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)


class Pass(_Outcome):
    """The stage found nothing wrong."""

    outcome: Literal["pass"] = "pass"


class Reject(_Outcome):
    """The stage rejected the application."""

    outcome: Literal["reject"] = "reject"
    reasons: Tuple[str, ...] = Field(min_length=1)


class AwaitingMoreInfo(_Outcome):
    """The stage needs more documents before it can decide."""

    outcome: Literal["awaiting_more_info"] = "awaiting_more_info"
    missing: FrozenSet[DocumentKind] = Field(min_length=1)


ValidationOutcome = Union[Pass, Reject, AwaitingMoreInfo]


class DocumentValidationResult(_Outcome):
    """Answer of a document validation service."""

    status: Literal["valid", "invalid", "missing"]
    reasons: Tuple[str, ...] = ()
    missing_kinds: FrozenSet[DocumentKind] = frozenset()

    @model_validator(mode="after")
    def check_missing_kinds(self) -> "DocumentValidationResult":
        if self.status == "missing" and not self.missing_kinds:
            raise ValueError("A missing-documents result must name the missing kinds")
        if self.status != "missing" and self.missing_kinds:
            raise ValueError(f"A {self.status} result cannot name missing kinds")
        return self

    @classmethod
    def valid(cls) -> "DocumentValidationResult":
        return cls(status="valid")

    @classmethod
    def invalid(cls, reasons) -> "DocumentValidationResult":
        return cls(status="invalid", reasons=tuple(reasons))

    @classmethod
    def missing(cls, kinds) -> "DocumentValidationResult":
        return cls(status="missing", missing_kinds=frozenset(kinds))


class CreditScoreResult(_Outcome):
    """
    Result of a credit bureau lookup.

    A score is present exactly when the lookup succeeded. A failed lookup
    always carries a message; a successful one may carry an informational
    message.
    """

    success: bool
    score: Optional[int] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def check_presence(self) -> "CreditScoreResult":
        if self.success and self.score is None:
            raise ValueError("A successful credit lookup must carry a score")
        if not self.success and self.score is not None:
            raise ValueError("A failed credit lookup cannot carry a score")
        if not self.success and not self.message:
            raise ValueError("A failed credit lookup must carry a message")
        return self

    @classmethod
    def succeeded(cls, score: int, message: Optional[str] = None) -> "CreditScoreResult":
        return cls(success=True, score=score, message=message)

    @classmethod
    def failed(cls, message: str) -> "CreditScoreResult":
        return cls(success=False, message=message)


class ProcessingResult(_Outcome):
    """Terminal output of one pipeline run."""

    status: ProcessingStatus
    application_id: str
    stage: PipelineStage
    reasons: Tuple[str, ...] = ()
    missing_documents: Tuple[DocumentKind, ...] = ()
    application: Optional[LoanApplication] = None

    @model_validator(mode="after")
    def check_invariants(self) -> "ProcessingResult":
        accepted = self.status == ProcessingStatus.ACCEPTED
        if accepted and self.reasons:
            raise ValueError("An accepted result cannot carry reasons")
        if not accepted and not self.reasons:
            raise ValueError(f"A {self.status.value} result must carry reasons")
        if accepted != (self.application is not None):
            raise ValueError("Only an accepted result references the stored application")
        awaiting = self.status == ProcessingStatus.AWAITING_DOCUMENTS
        if awaiting != bool(self.missing_documents):
            raise ValueError("Only an awaiting-documents result names missing documents")
        return self

    @property
    def is_accepted(self) -> bool:
        return self.status == ProcessingStatus.ACCEPTED

    @classmethod
    def accepted(cls, application: LoanApplication) -> "ProcessingResult":
        return cls(
            status=ProcessingStatus.ACCEPTED,
            application_id=application.application_id,
            stage=PipelineStage.PERSISTENCE,
            application=application,
        )

    @classmethod
    def rejected(
        cls, application: LoanApplication, stage: PipelineStage, reasons
    ) -> "ProcessingResult":
        return cls(
            status=ProcessingStatus.REJECTED,
            application_id=application.application_id,
            stage=stage,
            reasons=tuple(reasons),
        )

    @classmethod
    def awaiting_documents(
        cls, application: LoanApplication, missing
    ) -> "ProcessingResult":
        kinds = DocumentKind.ordered(missing)
        return cls(
            status=ProcessingStatus.AWAITING_DOCUMENTS,
            application_id=application.application_id,
            stage=PipelineStage.DOCUMENTS,
            reasons=tuple(f"Missing required document: {kind.value}" for kind in kinds),
            missing_documents=kinds,
        )

    def to_dict(self):
        """Serialize to a JSON compatible dictionary."""
        return self.model_dump(mode="json")
