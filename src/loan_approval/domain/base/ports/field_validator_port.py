"""Field validator port."""

from abc import ABC, abstractmethod
from typing import List

from loan_approval.domain.loan.aggregate import LoanApplication


class FieldValidatorPort(ABC):
    """Port for in-process validation of required application fields."""

    @abstractmethod
    def validate(self, application: LoanApplication) -> List[str]:
        """Return validation error messages; an empty list means valid."""
