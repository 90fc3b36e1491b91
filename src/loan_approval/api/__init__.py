"""HTTP API for the approval pipeline."""

from .server import create_fastapi_app

__all__ = ["create_fastapi_app"]
