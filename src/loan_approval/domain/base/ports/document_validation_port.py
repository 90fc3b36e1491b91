"""Document validation port."""

from abc import ABC, abstractmethod
from typing import Sequence

from loan_approval.domain.loan.outcomes import DocumentValidationResult
from loan_approval.domain.loan.value_objects import Document


class DocumentValidationPort(ABC):
    """Port for the external document validation service."""

    @abstractmethod
    def validate(self, documents: Sequence[Document]) -> DocumentValidationResult:
        """Validate the documents attached to an application."""
