"""Application approval pipeline."""

from dataclasses import dataclass, field
from typing import Optional

from loan_approval.application.approval.field_validation import RequiredFieldValidator
from loan_approval.domain.base.ports import (
    CreditBureauPort,
    DocumentValidationPort,
    FieldValidatorPort,
)
from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.outcomes import (
    AwaitingMoreInfo,
    DocumentValidationResult,
    Pass,
    ProcessingResult,
    Reject,
    ValidationOutcome,
)
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.domain.loan.value_objects import PipelineStage
from loan_approval.infrastructure.logging.logger import get_logger

DEFAULT_MIN_CREDIT_SCORE = 650
CREDIT_CHECK_FAILED_MESSAGE = "Credit check failed"


@dataclass(frozen=True)
class PipelineCollaborators:
    """
    Collaborators injected into the approval pipeline.

    A document validator or credit bureau left as None skips its stage.
    """

    repository: ApplicationRepository
    document_validator: Optional[DocumentValidationPort] = None
    credit_bureau: Optional[CreditBureauPort] = None
    field_validator: FieldValidatorPort = field(default_factory=RequiredFieldValidator)
    min_credit_score: int = DEFAULT_MIN_CREDIT_SCORE


class ApplicationApprovalPipeline:
    """
    Runs an application through fields, documents, credit and persistence.

    Stages run strictly in that order and the first stage that does not
    pass ends the run. The application is saved only when every stage
    passes. The pipeline holds no state between runs.
    """

    def __init__(self, collaborators: PipelineCollaborators):
        self._collaborators = collaborators
        self._logger = get_logger(__name__)

    @property
    def collaborators(self) -> PipelineCollaborators:
        return self._collaborators

    def process(self, application: LoanApplication) -> ProcessingResult:
        """
        Process one application.

        Args:
            application: Application to evaluate

        Returns:
            Accepted, rejected or awaiting-documents result

        Raises:
            Exception: Whatever the repository raises when saving fails
        """
        log = self._logger.bind(application_id=application.application_id)

        stages = (
            (PipelineStage.FIELDS, self._validate_fields),
            (PipelineStage.DOCUMENTS, self._validate_documents),
            (PipelineStage.CREDIT, self._check_credit),
        )
        for stage, run_stage in stages:
            outcome = run_stage(application)
            result = self._to_result(application, stage, outcome)
            if result is not None:
                log.info(
                    "Application not accepted",
                    stage=stage.value,
                    status=result.status.value,
                    reason_count=len(result.reasons),
                )
                return result
            log.debug("Stage passed", stage=stage.value)

        try:
            self._collaborators.repository.save(application)
        except Exception as e:
            log.error("Failed to save accepted application", error=str(e))
            raise

        log.info("Application accepted", stage=PipelineStage.PERSISTENCE.value)
        return ProcessingResult.accepted(application)

    @staticmethod
    def _to_result(
        application: LoanApplication,
        stage: PipelineStage,
        outcome: ValidationOutcome,
    ) -> Optional[ProcessingResult]:
        """Map a stage outcome to a terminal result, or None to continue."""
        if isinstance(outcome, Pass):
            return None
        if isinstance(outcome, Reject):
            return ProcessingResult.rejected(application, stage, outcome.reasons)
        if isinstance(outcome, AwaitingMoreInfo):
            return ProcessingResult.awaiting_documents(application, outcome.missing)
        raise TypeError(f"Unknown validation outcome: {outcome!r}")

    def _validate_fields(self, application: LoanApplication) -> ValidationOutcome:
        errors = self._collaborators.field_validator.validate(application)
        if errors:
            return Reject(reasons=tuple(errors))
        return Pass()

    def _validate_documents(self, application: LoanApplication) -> ValidationOutcome:
        validator = self._collaborators.document_validator
        if validator is None or not application.has_documents:
            return Pass()

        result: DocumentValidationResult = validator.validate(application.documents)
        if result.status == "missing":
            return AwaitingMoreInfo(missing=result.missing_kinds)
        if result.status == "invalid":
            return Reject(reasons=result.reasons or ("Documents are invalid",))
        return Pass()

    def _check_credit(self, application: LoanApplication) -> ValidationOutcome:
        bureau = self._collaborators.credit_bureau
        if bureau is None:
            return Pass()

        result = bureau.get_credit_score(application.phone_number.strip())
        if not result.success:
            return Reject(reasons=(result.message or CREDIT_CHECK_FAILED_MESSAGE,))

        threshold = self._collaborators.min_credit_score
        if result.score < threshold:
            return Reject(
                reasons=(
                    f"Credit score {result.score} is below minimum required score of {threshold}",
                )
            )
        return Pass()
