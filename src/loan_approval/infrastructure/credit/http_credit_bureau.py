"""HTTP client for an external credit bureau."""

from typing import Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, StrictInt
from pydantic import ValidationError as PydanticValidationError

from loan_approval.domain.base.ports import CreditBureauPort
from loan_approval.domain.loan.outcomes import CreditScoreResult
from loan_approval.infrastructure.logging.logger import get_logger

TIMEOUT_MESSAGE = "Service timeout"
MALFORMED_RESPONSE_MESSAGE = "Malformed credit bureau response"


class ScoreResponse(BaseModel):
    """Body of a successful score lookup."""

    score: StrictInt
    message: Optional[str] = None


class HttpCreditBureauService(CreditBureauPort):
    """
    Credit bureau reached over HTTP.

    ``GET {base_url}/scores/{phone_number}`` is expected to answer with
    ``{"score": <int>}`` and optionally a ``message``. Every failure mode is
    reported as a failed CreditScoreResult; nothing is retried here.
    """

    def __init__(self,
                 base_url: str,
                 timeout_seconds: float = 5.0,
                 headers: Optional[Dict[str, str]] = None,
                 client: Optional[httpx.Client] = None):
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=headers or {},
        )
        self._logger = get_logger(__name__)

    def get_credit_score(self, phone_number: str) -> CreditScoreResult:
        path = f"/scores/{quote(phone_number, safe='')}"
        try:
            response = self._client.get(path)
        except httpx.TimeoutException:
            self._logger.warning("Credit bureau request timed out")
            return CreditScoreResult.failed(TIMEOUT_MESSAGE)
        except httpx.HTTPError as e:
            self._logger.warning("Credit bureau request failed", error=str(e))
            return CreditScoreResult.failed(f"Service unavailable: {e}")

        if response.status_code >= 400:
            self._logger.warning("Credit bureau returned an error", status_code=response.status_code)
            return CreditScoreResult.failed(f"Credit bureau returned HTTP {response.status_code}")

        try:
            body = ScoreResponse.model_validate_json(response.content)
        except (PydanticValidationError, ValueError):
            self._logger.warning("Credit bureau returned a malformed body")
            return CreditScoreResult.failed(MALFORMED_RESPONSE_MESSAGE)

        return CreditScoreResult.succeeded(body.score, message=body.message)

    def close(self) -> None:
        self._client.close()
