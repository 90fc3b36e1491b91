from loan_approval.application.approval.batch import BatchReport, process_batch
from loan_approval.domain.loan.value_objects import ProcessingStatus


def test_batch_processes_each_application_in_order(pipeline, mock_repository, sample_application):
    # Arrange
    incomplete = sample_application.model_copy(update={"application_id": "app-002", "email": ""})

    # Act
    report = process_batch(pipeline, [sample_application, incomplete])

    # Assert
    assert [result.application_id for result in report.results] == ["app-001", "app-002"]
    assert report.counts == {
        ProcessingStatus.ACCEPTED: 1,
        ProcessingStatus.REJECTED: 1,
        ProcessingStatus.AWAITING_DOCUMENTS: 0,
    }
    assert not report.all_accepted
    mock_repository.save.assert_called_once_with(sample_application)


def test_batch_report_to_dict(pipeline, sample_application):
    # Act
    data = process_batch(pipeline, [sample_application]).to_dict()

    # Assert
    assert data["counts"] == {"accepted": 1, "rejected": 0, "awaiting_documents": 0}
    assert data["results"][0]["status"] == "accepted"


def test_empty_batch():
    report = BatchReport(results=[])
    assert report.all_accepted
    assert set(report.counts.values()) == {0}
