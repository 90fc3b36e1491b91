"""Domain ports for the collaborators the approval pipeline depends on."""

from .credit_bureau_port import CreditBureauPort
from .document_validation_port import DocumentValidationPort
from .field_validator_port import FieldValidatorPort

__all__ = [
    "FieldValidatorPort",
    "DocumentValidationPort",
    "CreditBureauPort",
]
