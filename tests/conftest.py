import os
import pytest
from unittest.mock import Mock

from loan_approval.application.approval.pipeline import (
    ApplicationApprovalPipeline,
    PipelineCollaborators,
)
from loan_approval.config import manager as config_manager_module
from loan_approval.domain.base.ports import CreditBureauPort, DocumentValidationPort
from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.outcomes import CreditScoreResult, DocumentValidationResult
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.domain.loan.value_objects import Document, DocumentKind


@pytest.fixture(autouse=True)
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
    os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
    os.environ['AWS_SECURITY_TOKEN'] = 'testing'
    os.environ['AWS_SESSION_TOKEN'] = 'testing'
    os.environ['AWS_DEFAULT_REGION'] = 'us-east-1'


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop LOAN_APPROVAL_* variables and the shared configuration manager."""
    for name in list(os.environ):
        if name.startswith("LOAN_APPROVAL_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(config_manager_module, "_config_manager", None)


@pytest.fixture
def mock_repository():
    return Mock(spec=ApplicationRepository)


@pytest.fixture
def mock_document_validator():
    validator = Mock(spec=DocumentValidationPort)
    validator.validate.return_value = DocumentValidationResult.valid()
    return validator


@pytest.fixture
def mock_credit_bureau():
    bureau = Mock(spec=CreditBureauPort)
    bureau.get_credit_score.return_value = CreditScoreResult.succeeded(720)
    return bureau


@pytest.fixture
def pipeline(mock_repository, mock_document_validator, mock_credit_bureau):
    return ApplicationApprovalPipeline(
        PipelineCollaborators(
            repository=mock_repository,
            document_validator=mock_document_validator,
            credit_bureau=mock_credit_bureau,
        )
    )


@pytest.fixture
def sample_application():
    return LoanApplication(
        application_id="app-001",
        name="Jordan Smith",
        email="jordan@example.com",
        phone_number="555-0100",
        amount=25000.0,
        purpose="Home improvement",
        documents=(
            Document(kind=DocumentKind.IDENTITY_PROOF, content_reference="s3://docs/id.pdf"),
            Document(kind=DocumentKind.INCOME_PROOF, content_reference="s3://docs/payslip.pdf"),
        ),
    )


@pytest.fixture
def sample_submission():
    """Application record as it arrives over HTTP or from a file."""
    return {
        "applicationId": "app-001",
        "name": "Jordan Smith",
        "email": "jordan@example.com",
        "phoneNumber": "555-0100",
        "amount": 25000,
        "purpose": "Home improvement",
        "documents": [
            {"kind": "IdentityProof", "contentReference": "s3://docs/id.pdf"},
            {"kind": "IncomeProof", "contentReference": "s3://docs/payslip.pdf"},
        ],
    }
