"""API models."""

from .applications import ApplicationSubmission, DocumentPayload

__all__ = ["ApplicationSubmission", "DocumentPayload"]
