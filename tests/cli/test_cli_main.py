import json

import pytest

from loan_approval.cli.main import (
    EXIT_AWAITING_DOCUMENTS,
    EXIT_ERROR,
    EXIT_OK,
    EXIT_REJECTED,
    load_application,
    main,
)


@pytest.fixture
def records(sample_submission):
    """In-memory application records served by an injected loader."""
    incomplete = dict(sample_submission, applicationId="app-002", email="")
    awaiting = dict(sample_submission, applicationId="app-003", documents=[])
    return {
        "complete.json": json.dumps(sample_submission),
        "incomplete.json": json.dumps(incomplete),
        "awaiting.json": json.dumps(awaiting),
        "complete.yaml": (
            "applicationId: app-004\n"
            "name: Jordan Smith\n"
            "email: jordan@example.com\n"
            "phoneNumber: 555-0100\n"
            "amount: 1500\n"
            "purpose: Laptop\n"
            "documents:\n"
            "  - kind: IdentityProof\n"
            "    contentReference: id.pdf\n"
            "  - kind: IncomeProof\n"
            "    contentReference: payslip.pdf\n"
        ),
        "list.json": "[1, 2]",
        "broken.json": "{",
    }


@pytest.fixture
def loader(records):
    return records.__getitem__


def test_load_application_from_yaml(loader):
    application = load_application("complete.yaml", loader)
    assert application.application_id == "app-004"
    assert len(application.documents) == 2


def test_load_application_rejects_non_mapping(loader):
    with pytest.raises(ValueError):
        load_application("list.json", loader)


def test_process_accepted(loader, capsys):
    # Act
    exit_code = main(["process", "--file", "complete.json"], loader=loader)

    # Assert
    assert exit_code == EXIT_OK
    assert json.loads(capsys.readouterr().out)["status"] == "accepted"


def test_process_rejected(loader, capsys):
    # Act
    exit_code = main(["process", "--file", "incomplete.json"], loader=loader)

    # Assert
    assert exit_code == EXIT_REJECTED
    assert json.loads(capsys.readouterr().out)["reasons"] == ["Email is required"]


def test_document_stage_skipped_without_documents(loader, capsys):
    # Act
    exit_code = main(
        ["--required-documents", "IdentityProof", "process", "--file", "awaiting.json"],
        loader=loader,
    )

    # Assert
    assert exit_code == EXIT_OK
    assert json.loads(capsys.readouterr().out)["status"] == "accepted"


def test_required_documents_override(loader, capsys):
    # Act
    exit_code = main(
        ["--required-documents", "IdentityProof, BankStatement",
         "process", "--file", "complete.json", "--format", "yaml"],
        loader=loader,
    )

    # Assert
    assert exit_code == EXIT_AWAITING_DOCUMENTS
    output = capsys.readouterr().out
    assert "status: awaiting_documents" in output
    assert "- BankStatement" in output


def test_unknown_required_document_kind(loader, capsys):
    # Act
    exit_code = main(
        ["--required-documents", "Passport", "process", "--file", "complete.json"],
        loader=loader,
    )

    # Assert
    assert exit_code == EXIT_ERROR
    assert "Unknown document kind: Passport" in capsys.readouterr().err


def test_unreadable_record(loader, capsys):
    assert main(["process", "--file", "broken.json"], loader=loader) == EXIT_ERROR


def test_missing_record_file(tmp_path, capsys):
    exit_code = main(["process", "--file", str(tmp_path / "missing.json")])
    assert exit_code == EXIT_ERROR


def test_malformed_fields(records, loader, capsys):
    # Arrange
    records["bad.json"] = json.dumps({"amount": "lots"})

    # Act
    exit_code = main(["process", "--file", "bad.json"], loader=loader)

    # Assert
    assert exit_code == EXIT_ERROR
    err = capsys.readouterr().err
    assert "Invalid input" in err
    assert "amount" in err


def test_missing_config_file(loader, tmp_path, capsys):
    exit_code = main(
        ["--config", str(tmp_path / "missing.yaml"), "process", "--file", "complete.json"],
        loader=loader,
    )
    assert exit_code == EXIT_ERROR
    assert "Configuration file not found" in capsys.readouterr().err


def test_batch(loader, capsys):
    # Act
    exit_code = main(
        ["batch", "complete.json", "incomplete.json", "complete.yaml"], loader=loader
    )

    # Assert
    assert exit_code == EXIT_OK
    report = json.loads(capsys.readouterr().out)
    assert report["counts"] == {"accepted": 2, "rejected": 1, "awaiting_documents": 0}
    assert [result["application_id"] for result in report["results"]] == [
        "app-001", "app-002", "app-004"
    ]


def test_batch_table_output(loader, capsys):
    # Act
    main(["batch", "complete.json", "incomplete.json", "--format", "table"], loader=loader)

    # Assert
    output = capsys.readouterr().out
    assert "app-002" in output
    assert "Email is required" in output
    assert "accepted: 1, rejected: 1, awaiting_documents: 0" in output


def test_json_storage_from_config(loader, tmp_path, capsys):
    # Arrange
    storage_file = tmp_path / "applications.json"
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"storage:\n  type: json\n  json:\n    file_path: {storage_file}\n")

    # Act
    exit_code = main(["--config", str(config_file), "process", "--file", "complete.json"],
                     loader=loader)

    # Assert
    assert exit_code == EXIT_OK
    assert "app-001" in json.loads(storage_file.read_text())["applications"]


def test_no_command(capsys):
    assert main([]) == EXIT_ERROR


def test_nan_amount_is_an_input_error(records, loader, capsys):
    # Arrange
    records["nan.json"] = json.dumps({"name": "Jordan", "amount": float("nan")})

    # Act
    exit_code = main(["process", "--file", "nan.json"], loader=loader)

    # Assert
    assert exit_code == EXIT_ERROR
    assert capsys.readouterr().out == ""
