"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from loan_approval.config.env_expansion import expand_env_vars
from loan_approval.config.schemas import (
    AppConfig,
    CreditBureauConfig,
    LoggingConfig,
    PipelineConfig,
    ServerConfig,
    StorageConfig,
)
from loan_approval.domain.base.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)

ENV_PREFIX = "LOAN_APPROVAL_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"

# Environment variable -> (section, key) in the configuration document
ENV_OVERRIDES = {
    f"{ENV_PREFIX}ENVIRONMENT": (None, "environment"),
    f"{ENV_PREFIX}MIN_CREDIT_SCORE": ("pipeline", "min_credit_score"),
    f"{ENV_PREFIX}REQUIRED_DOCUMENTS": ("pipeline", "required_documents"),
    f"{ENV_PREFIX}STORAGE_TYPE": ("storage", "type"),
    f"{ENV_PREFIX}CREDIT_BUREAU_URL": ("credit_bureau", "base_url"),
    f"{ENV_PREFIX}CREDIT_BUREAU_TIMEOUT": ("credit_bureau", "timeout_seconds"),
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled from, in increasing precedence:
    - schema defaults
    - a JSON or YAML configuration file
    - LOAN_APPROVAL_* environment variables

    Loading is lazy and happens once; call reload() to pick up changes.
    """

    _TYPE_MAPPING = {
        PipelineConfig: 'pipeline',
        StorageConfig: 'storage',
        CreditBureauConfig: 'credit_bureau',
        LoggingConfig: 'logging',
        ServerConfig: 'server',
    }

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = expand_env_vars(config_data)
        config_data = self.apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Read a configuration document.

        Args:
            config_file: Path to a .json, .yaml or .yml file

        Returns:
            Parsed configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open(encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")

        logger.debug(f"Loaded configuration from {config_file}")
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply LOAN_APPROVAL_* environment variables on top of file values."""
        result = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in config_data.items()}

        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                result.setdefault(section, {})[key] = value
            logger.debug(f"Configuration override from {env_name}")

        return result

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a configuration section by its schema type."""
        if config_type is AppConfig:
            return self.app_config
        attr_name = self._TYPE_MAPPING.get(config_type)
        if attr_name is None:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the shared configuration manager, creating it on first use."""
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None or config_file is not None:
            _config_manager = ConfigurationManager(config_file)
        return _config_manager
