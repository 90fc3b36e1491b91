"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import (
    AppConfig,
    CreditBureauConfig,
    DynamoDBStorageConfig,
    JsonStorageConfig,
    LoggingConfig,
    PipelineConfig,
    ServerConfig,
    StorageConfig,
)

__all__ = [
    'AppConfig',
    'PipelineConfig',
    'StorageConfig',
    'JsonStorageConfig',
    'DynamoDBStorageConfig',
    'CreditBureauConfig',
    'LoggingConfig',
    'ServerConfig',
    'ConfigurationManager',
    'get_config_manager',
]
