"""Application bootstrap - wires configuration into a ready pipeline."""

from __future__ import annotations

from typing import Optional

from loan_approval.application.approval.document_validation import (
    RequiredDocumentsValidationService,
)
from loan_approval.application.approval.pipeline import (
    ApplicationApprovalPipeline,
    PipelineCollaborators,
)
from loan_approval.config import AppConfig, get_config_manager
from loan_approval.domain.base.ports import CreditBureauPort, DocumentValidationPort
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.infrastructure.logging.logger import get_logger, setup_logging
from loan_approval.infrastructure.persistence.repository_factory import RepositoryFactory


def create_pipeline(
    app_config: AppConfig,
    repository: Optional[ApplicationRepository] = None,
    credit_bureau: Optional[CreditBureauPort] = None,
) -> ApplicationApprovalPipeline:
    """
    Build an approval pipeline from configuration.

    Args:
        app_config: Application configuration
        repository: Repository to use instead of the configured one
        credit_bureau: Credit bureau to use instead of the configured one

    Returns:
        Pipeline with every enabled stage wired
    """
    pipeline_config = app_config.pipeline

    document_validator: Optional[DocumentValidationPort] = None
    if pipeline_config.document_validation_enabled:
        document_validator = RequiredDocumentsValidationService(
            pipeline_config.required_documents
        )

    if credit_bureau is None and pipeline_config.credit_check_enabled:
        bureau_config = app_config.credit_bureau
        if bureau_config.is_configured:
            from loan_approval.infrastructure.credit.http_credit_bureau import (
                HttpCreditBureauService,
            )
            credit_bureau = HttpCreditBureauService(
                base_url=bureau_config.base_url,
                timeout_seconds=bureau_config.timeout_seconds,
                headers=bureau_config.headers,
            )
        else:
            get_logger(__name__).warning(
                "Credit check enabled but no credit bureau URL configured; stage skipped"
            )
    elif not pipeline_config.credit_check_enabled:
        credit_bureau = None

    return ApplicationApprovalPipeline(
        PipelineCollaborators(
            repository=repository or RepositoryFactory.create_repository(app_config.storage),
            document_validator=document_validator,
            credit_bureau=credit_bureau,
            min_credit_score=pipeline_config.min_credit_score,
        )
    )


class LoanApprovalApplication:
    """Application context: loads configuration, sets up logging, builds the pipeline."""

    def __init__(self,
                 config_path: Optional[str] = None,
                 app_config: Optional[AppConfig] = None) -> None:
        self.config_path = config_path
        self._app_config: Optional[AppConfig] = app_config
        self._pipeline: Optional[ApplicationApprovalPipeline] = None
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._app_config is None:
            self._app_config = get_config_manager(self.config_path).get_typed(AppConfig)
        return self._app_config

    def initialize(self) -> ApplicationApprovalPipeline:
        """Set up logging and build the pipeline once."""
        if self._pipeline is None:
            setup_logging(self.config.logging)
            self._pipeline = create_pipeline(self.config)
            self.logger.info(
                "Application initialized",
                environment=self.config.environment,
                storage_type=self.config.storage.type,
            )
        return self._pipeline

    @property
    def pipeline(self) -> ApplicationApprovalPipeline:
        return self.initialize()
