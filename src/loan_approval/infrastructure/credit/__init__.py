"""Credit bureau adapters."""

from .http_credit_bureau import HttpCreditBureauService

__all__ = ["HttpCreditBureauService"]
