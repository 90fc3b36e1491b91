import pytest
from fastapi.testclient import TestClient

from loan_approval.api import create_fastapi_app
from loan_approval.application.approval.document_validation import (
    RequiredDocumentsValidationService,
)
from loan_approval.application.approval.pipeline import (
    ApplicationApprovalPipeline,
    PipelineCollaborators,
)
from loan_approval.domain.loan.outcomes import CreditScoreResult
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.domain.loan.value_objects import DocumentKind
from loan_approval.infrastructure.persistence.exceptions import StorageError
from loan_approval.infrastructure.persistence.memory_repository import (
    InMemoryApplicationRepository,
)


@pytest.fixture
def repository():
    return InMemoryApplicationRepository()


@pytest.fixture
def client(repository, mock_credit_bureau):
    pipeline = ApplicationApprovalPipeline(
        PipelineCollaborators(
            repository=repository,
            document_validator=RequiredDocumentsValidationService(
                [DocumentKind.IDENTITY_PROOF, DocumentKind.INCOME_PROOF]
            ),
            credit_bureau=mock_credit_bureau,
        )
    )
    return TestClient(create_fastapi_app(pipeline))


def test_submit_accepted_application(client, repository, sample_submission):
    # Act
    response = client.post("/applications", json=sample_submission)

    # Assert
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "accepted"
    assert data["reasons"] == []
    assert data["application"]["name"] == "Jordan Smith"
    assert repository.find_by_id("app-001") is not None
    assert "X-Request-ID" in response.headers


def test_rejected_application_is_still_ok(client, repository, mock_credit_bureau,
                                          sample_submission):
    # Arrange
    mock_credit_bureau.get_credit_score.return_value = CreditScoreResult.succeeded(600)

    # Act
    response = client.post("/applications", json=sample_submission)

    # Assert
    assert response.status_code == 200
    assert response.json()["status"] == "rejected"
    assert response.json()["reasons"] == [
        "Credit score 600 is below minimum required score of 650"
    ]
    assert len(repository) == 0


def test_missing_document_awaits(client, sample_submission):
    # Arrange
    sample_submission["documents"] = sample_submission["documents"][:1]

    # Act
    response = client.post("/applications", json=sample_submission)

    # Assert
    assert response.json()["status"] == "awaiting_documents"
    assert response.json()["missing_documents"] == ["IncomeProof"]


def test_malformed_submission_is_unprocessable(client, sample_submission):
    # Arrange
    sample_submission["amount"] = "a lot"

    # Act
    response = client.post("/applications", json=sample_submission)

    # Assert
    assert response.status_code == 422


def test_unknown_document_kind_is_unprocessable(client, sample_submission):
    sample_submission["documents"][0]["kind"] = "Passport"
    assert client.post("/applications", json=sample_submission).status_code == 422


def test_get_stored_application(client, sample_submission):
    # Arrange
    client.post("/applications", json=sample_submission)

    # Act
    response = client.get("/applications/app-001")

    # Assert
    assert response.status_code == 200
    assert response.json()["application_id"] == "app-001"


def test_get_unknown_application(client):
    # Act
    response = client.get("/applications/missing")

    # Assert
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert "request_id" in body


def test_storage_failure_returns_error_envelope(mock_repository, sample_submission):
    # Arrange
    mock_repository.save.side_effect = StorageError("disk full")
    pipeline = ApplicationApprovalPipeline(PipelineCollaborators(repository=mock_repository))
    client = TestClient(create_fastapi_app(pipeline))

    # Act
    response = client.post("/applications", json=sample_submission)

    # Assert
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "STORAGE_ERROR"
    assert response.json()["error"]["message"] == "disk full"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class SaveOnlyRepository(ApplicationRepository):
    """Repository that stores applications but cannot look them up."""

    def save(self, application):
        pass


def test_lookup_on_save_only_repository_returns_error_envelope():
    # Arrange
    pipeline = ApplicationApprovalPipeline(PipelineCollaborators(repository=SaveOnlyRepository()))
    client = TestClient(create_fastapi_app(pipeline))

    # Act
    response = client.get("/applications/app-001")

    # Assert
    assert response.status_code == 501
    assert response.json()["success"] is False
    assert response.json()["error"]["code"] == "NOT_SUPPORTED"
