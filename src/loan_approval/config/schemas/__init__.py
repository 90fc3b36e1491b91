"""Configuration schemas."""

from .app_schema import AppConfig
from .credit_bureau_schema import CreditBureauConfig
from .logging_schema import LoggingConfig
from .pipeline_schema import PipelineConfig
from .server_schema import ServerConfig
from .storage_schema import DynamoDBStorageConfig, JsonStorageConfig, StorageConfig

__all__ = [
    "AppConfig",
    "PipelineConfig",
    "StorageConfig",
    "JsonStorageConfig",
    "DynamoDBStorageConfig",
    "CreditBureauConfig",
    "LoggingConfig",
    "ServerConfig",
]
