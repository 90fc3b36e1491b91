"""Application submission API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from loan_approval.api.dependencies import get_pipeline, get_repository
from loan_approval.api.models import ApplicationSubmission
from loan_approval.application.approval.pipeline import ApplicationApprovalPipeline
from loan_approval.domain.loan.exceptions import ApplicationNotFoundError
from loan_approval.domain.loan.repository import ApplicationRepository

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post(
    "",
    summary="Submit Application",
    description="Run an application through the approval pipeline",
)
def submit_application(
    submission: ApplicationSubmission,
    pipeline: ApplicationApprovalPipeline = Depends(get_pipeline),
) -> Dict[str, Any]:
    """
    Process a loan application.

    Every pipeline outcome, including rejection, is a successful response;
    the outcome is in the ``status`` field.
    """
    result = pipeline.process(submission.to_domain())
    return result.to_dict()


@router.get(
    "/{application_id}",
    summary="Get Application",
    description="Get an accepted application",
)
def get_application(
    application_id: str,
    repository: ApplicationRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """Return a stored application or 404."""
    application = repository.find_by_id(application_id)
    if application is None:
        raise ApplicationNotFoundError(application_id)
    return application.to_dict()
