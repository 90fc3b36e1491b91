"""Environment variable expansion for configuration values."""

import os
from typing import Any


def expand_env_vars(value: Any) -> Any:
    """
    Expand $VAR and ${VAR} references in configuration values.

    Dictionaries and lists are expanded recursively. Unknown variables are
    left untouched and non-string values are returned unchanged.
    """
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value
