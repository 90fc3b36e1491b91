"""Document validation against a set of required document kinds."""

from typing import Iterable, Sequence

from loan_approval.domain.base.ports import DocumentValidationPort
from loan_approval.domain.loan.outcomes import DocumentValidationResult
from loan_approval.domain.loan.value_objects import Document, DocumentKind


class RequiredDocumentsValidationService(DocumentValidationPort):
    """
    Validates that the required document kinds are present and usable.

    Missing kinds take precedence over invalid content: an application that
    lacks a required document is asked for it before its other documents are
    judged.
    """

    def __init__(self, required_kinds: Iterable[DocumentKind]):
        self._required_kinds = frozenset(required_kinds)

    @property
    def required_kinds(self) -> frozenset:
        return self._required_kinds

    def validate(self, documents: Sequence[Document]) -> DocumentValidationResult:
        present = {document.kind for document in documents}
        missing = self._required_kinds - present
        if missing:
            return DocumentValidationResult.missing(missing)

        reasons = [
            f"{document.kind.value} document has no content"
            for document in documents
            if not document.content_reference.strip()
        ]
        if reasons:
            return DocumentValidationResult.invalid(reasons)

        return DocumentValidationResult.valid()
