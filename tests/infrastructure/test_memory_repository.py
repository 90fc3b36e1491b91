from loan_approval.infrastructure.persistence.memory_repository import (
    InMemoryApplicationRepository,
)


def test_save_and_find(sample_application):
    # Arrange
    repository = InMemoryApplicationRepository()

    # Act
    repository.save(sample_application)

    # Assert
    assert repository.find_by_id("app-001") == sample_application
    assert repository.find_all() == [sample_application]
    assert len(repository) == 1


def test_save_replaces_existing(sample_application):
    # Arrange
    repository = InMemoryApplicationRepository()
    repository.save(sample_application)

    # Act
    repository.save(sample_application.model_copy(update={"amount": 100.0}))

    # Assert
    assert len(repository) == 1
    assert repository.find_by_id("app-001").amount == 100.0


def test_find_unknown_returns_none():
    assert InMemoryApplicationRepository().find_by_id("missing") is None
