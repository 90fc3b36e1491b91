"""Loan application value objects.

Value objects are immutable and compared by value:
- DocumentKind: closed set of supporting document kinds
- Document: a (kind, content reference) pair
- ProcessingStatus: terminal status of a pipeline run
- PipelineStage: the stage that produced a terminal outcome
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from loan_approval.domain.loan.exceptions import DocumentKindError


class DocumentKind(str, Enum):
    """Kinds of supporting documents an application can carry."""

    IDENTITY_PROOF = "IdentityProof"
    INCOME_PROOF = "IncomeProof"
    ADDRESS_PROOF = "AddressProof"
    EMPLOYMENT_PROOF = "EmploymentProof"
    BANK_STATEMENT = "BankStatement"

    @classmethod
    def from_name(cls, name: str) -> "DocumentKind":
        """Resolve a kind by its value, ignoring case and surrounding blanks."""
        wanted = name.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        raise DocumentKindError(name)

    @classmethod
    def ordered(cls, kinds) -> Tuple["DocumentKind", ...]:
        """Return the given kinds sorted in declaration order."""
        members = list(cls)
        return tuple(sorted(set(kinds), key=members.index))


class ProcessingStatus(str, Enum):
    """Terminal status of one pipeline run."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    AWAITING_DOCUMENTS = "awaiting_documents"


class PipelineStage(str, Enum):
    """Pipeline stages in execution order."""

    FIELDS = "fields"
    DOCUMENTS = "documents"
    CREDIT = "credit"
    PERSISTENCE = "persistence"


class Document(BaseModel):
    """Supporting document attached to an application."""

    model_config = ConfigDict(frozen=True)

    kind: DocumentKind
    content_reference: str = ""


def tokenise(text: str, separator: str = ",") -> Tuple[str, ...]:
    """Split text on a separator, trimming tokens and dropping empty ones."""
    if not text:
        return ()
    tokens = (token.strip() for token in text.split(separator))
    return tuple(token for token in tokens if token)


def parse_document_kinds(text: str) -> Tuple[DocumentKind, ...]:
    """
    Parse a comma separated list of document kinds.

    Args:
        text: Input such as "IdentityProof, IncomeProof"

    Returns:
        Kinds in input order, duplicates removed

    Raises:
        DocumentKindError: If a token does not name a known kind
    """
    kinds = []
    for token in tokenise(text):
        kind = DocumentKind.from_name(token)
        if kind not in kinds:
            kinds.append(kind)
    return tuple(kinds)
