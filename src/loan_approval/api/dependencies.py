"""FastAPI dependency providers."""

from fastapi import Request

from loan_approval.application.approval.pipeline import ApplicationApprovalPipeline
from loan_approval.domain.loan.repository import ApplicationRepository


def get_pipeline(request: Request) -> ApplicationApprovalPipeline:
    """Get the approval pipeline attached to the application."""
    return request.app.state.pipeline


def get_repository(request: Request) -> ApplicationRepository:
    """Get the repository the pipeline saves accepted applications to."""
    return request.app.state.pipeline.collaborators.repository
