"""Required field validation for loan applications."""

from typing import List, Optional

from loan_approval.domain.base.ports import FieldValidatorPort
from loan_approval.domain.loan.aggregate import LoanApplication


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class RequiredFieldValidator(FieldValidatorPort):
    """Checks that every required field is present and not blank."""

    def validate(self, application: LoanApplication) -> List[str]:
        errors = []
        if _is_blank(application.name):
            errors.append("Name is required")
        if _is_blank(application.email):
            errors.append("Email is required")
        if _is_blank(application.phone_number):
            errors.append("Phone number is required")
        # NaN compares false both ways
        if application.amount is None or not application.amount > 0:
            errors.append("Amount must be greater than zero")
        if _is_blank(application.purpose):
            errors.append("Purpose is required")
        return errors
