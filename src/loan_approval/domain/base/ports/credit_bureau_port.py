"""Credit bureau port."""

from abc import ABC, abstractmethod

from loan_approval.domain.loan.outcomes import CreditScoreResult


class CreditBureauPort(ABC):
    """
    Port for the external credit bureau.

    Implementations report unavailability, timeouts and errors as a failed
    CreditScoreResult rather than raising.
    """

    @abstractmethod
    def get_credit_score(self, phone_number: str) -> CreditScoreResult:
        """Look up the credit score registered against a phone number."""
