"""Application repositories."""

from .exceptions import PersistenceError, StorageError
from .json_repository import JSONApplicationRepository
from .memory_repository import InMemoryApplicationRepository
from .repository_factory import RepositoryFactory

__all__ = [
    "PersistenceError",
    "StorageError",
    "InMemoryApplicationRepository",
    "JSONApplicationRepository",
    "RepositoryFactory",
]
