"""In-memory application repository."""

import threading
from typing import Dict, List, Optional

from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.repository import ApplicationRepository


class InMemoryApplicationRepository(ApplicationRepository):
    """Keeps accepted applications in a dictionary keyed by application ID."""

    def __init__(self):
        self._applications: Dict[str, LoanApplication] = {}
        self._lock = threading.Lock()

    def save(self, application: LoanApplication) -> None:
        with self._lock:
            self._applications[application.application_id] = application

    def find_by_id(self, application_id: str) -> Optional[LoanApplication]:
        with self._lock:
            return self._applications.get(application_id)

    def find_all(self) -> List[LoanApplication]:
        with self._lock:
            return list(self._applications.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._applications)
