# loan_approval/infrastructure/persistence/json_repository.py
import fcntl
import json
import os
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.infrastructure.logging.logger import get_logger
from loan_approval.infrastructure.persistence.exceptions import StorageError

COLLECTION_NAME = "applications"


class JSONApplicationRepository(ApplicationRepository):
    """
    JSON file implementation of the application repository.

    Every read and write holds an exclusive file lock, so several processes
    can share one database file.

    Storage structure:
    {
        "applications": {
            "app-123": { application_data },
            "app-456": { application_data }
        }
    }
    """

    def __init__(self, storage_path: str):
        """
        Args:
            storage_path: Database file; created with an empty collection if absent
        """
        self._storage_path = storage_path
        self._logger = get_logger(__name__)

        self._ensure_storage()

    @property
    def storage_path(self) -> str:
        return self._storage_path

    @contextmanager
    def _file_lock(self, mode: str = 'r+'):
        """Open the database file under an exclusive flock, creating it first if needed."""
        if not os.path.exists(self._storage_path):
            directory = os.path.dirname(self._storage_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._storage_path, 'w') as f:
                json.dump({COLLECTION_NAME: {}}, f, indent=2)

        with open(self._storage_path, mode) as f:
            try:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                yield f
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    @staticmethod
    def _read(f) -> Dict[str, Any]:
        """Read the document, treating an empty or corrupt file as empty."""
        f.seek(0)
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        data.setdefault(COLLECTION_NAME, {})
        return data

    @staticmethod
    def _write(f, data: Dict[str, Any]) -> None:
        f.seek(0)
        f.truncate()
        json.dump(data, f, indent=2)

    def _ensure_storage(self) -> None:
        """Normalise the database file so it always holds the applications collection."""
        try:
            with self._file_lock('r+') as f:
                self._write(f, self._read(f))
        except OSError as e:
            raise StorageError(f"Failed to initialize storage: {str(e)}") from e

    def save(self, application: LoanApplication) -> None:
        """
        Save an application, replacing any stored copy with the same ID.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            with self._file_lock('r+') as f:
                data = self._read(f)
                data[COLLECTION_NAME][application.application_id] = application.to_dict()
                self._write(f, data)
        except OSError as e:
            raise StorageError(f"Failed to save application: {str(e)}") from e

        self._logger.debug("Application stored", application_id=application.application_id)

    def find_by_id(self, application_id: str) -> Optional[LoanApplication]:
        """
        Find an application by ID.

        Raises:
            StorageError: If the file cannot be read
        """
        try:
            with self._file_lock('r') as f:
                entity_data = self._read(f)[COLLECTION_NAME].get(application_id)
        except OSError as e:
            raise StorageError(f"Failed to find application: {str(e)}") from e

        if entity_data is None:
            return None
        return LoanApplication.from_dict(entity_data)

    def find_all(self) -> List[LoanApplication]:
        """
        Find all applications.

        Raises:
            StorageError: If the file cannot be read
        """
        try:
            with self._file_lock('r') as f:
                entities_data = list(self._read(f)[COLLECTION_NAME].values())
        except OSError as e:
            raise StorageError(f"Failed to find applications: {str(e)}") from e

        return [LoanApplication.from_dict(entity_data) for entity_data in entities_data]
