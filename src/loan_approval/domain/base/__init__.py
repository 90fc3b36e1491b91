"""Base domain layer - shared kernel for all bounded contexts."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConfigurationError",
]
