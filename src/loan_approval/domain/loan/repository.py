"""Application repository interface - contract for application storage."""

from abc import ABC, abstractmethod
from typing import List, Optional

from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.exceptions import RepositoryOperationNotSupportedError


class ApplicationRepository(ABC):
    """Repository interface for accepted loan applications."""

    @abstractmethod
    def save(self, application: LoanApplication) -> None:
        """Store an accepted application."""

    def find_by_id(self, application_id: str) -> Optional[LoanApplication]:
        """Find a stored application by ID."""
        raise RepositoryOperationNotSupportedError(self.__class__.__name__, "lookups")

    def find_all(self) -> List[LoanApplication]:
        """List all stored applications."""
        raise RepositoryOperationNotSupportedError(self.__class__.__name__, "listing")
