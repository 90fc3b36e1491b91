# loan_approval/infrastructure/persistence/repository_factory.py
from loan_approval.config.schemas.storage_schema import StorageConfig
from loan_approval.domain.base.exceptions import ConfigurationError
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.infrastructure.logging.logger import get_logger


class RepositoryFactory:
    """Factory for creating the application repository selected by configuration."""

    @staticmethod
    def create_repository(config: StorageConfig) -> ApplicationRepository:
        """
        Create a repository instance based on configuration.

        Args:
            config: Storage section of the application configuration

        Returns:
            Configured repository instance

        Raises:
            ConfigurationError: If the storage type is not supported
            StorageError: If storage initialization fails
        """
        logger = get_logger(__name__)
        logger.debug("Creating application repository", storage_type=config.type)

        if config.type == "memory":
            from loan_approval.infrastructure.persistence.memory_repository import (
                InMemoryApplicationRepository,
            )
            return InMemoryApplicationRepository()
        if config.type == "json":
            from loan_approval.infrastructure.persistence.json_repository import (
                JSONApplicationRepository,
            )
            return JSONApplicationRepository(storage_path=config.json_storage.file_path)
        if config.type == "dynamodb":
            from loan_approval.infrastructure.persistence.dynamodb_repository import (
                DynamoDBApplicationRepository,
            )
            return DynamoDBApplicationRepository(
                table_name=config.dynamodb.table_name,
                region=config.dynamodb.region,
                endpoint_url=config.dynamodb.endpoint_url,
            )
        raise ConfigurationError(f"Unsupported repository type: {config.type}")
