"""Batch processing of several applications through one pipeline."""

from collections import Counter
from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict

from loan_approval.application.approval.pipeline import ApplicationApprovalPipeline
from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.outcomes import ProcessingResult
from loan_approval.domain.loan.value_objects import ProcessingStatus


class BatchReport(BaseModel):
    """Results of a batch run, in submission order."""

    model_config = ConfigDict(frozen=True)

    results: List[ProcessingResult]

    @property
    def counts(self) -> Dict[ProcessingStatus, int]:
        """Number of results per status; every status is present."""
        tally = Counter(result.status for result in self.results)
        return {status: tally.get(status, 0) for status in ProcessingStatus}

    @property
    def all_accepted(self) -> bool:
        return all(result.is_accepted for result in self.results)

    def to_dict(self):
        return {
            "results": [result.to_dict() for result in self.results],
            "counts": {status.value: count for status, count in self.counts.items()},
        }


def process_batch(
    pipeline: ApplicationApprovalPipeline,
    applications: Iterable[LoanApplication],
) -> BatchReport:
    """Process each application independently and collect the results."""
    return BatchReport(results=[pipeline.process(application) for application in applications])
