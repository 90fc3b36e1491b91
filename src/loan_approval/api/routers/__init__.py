"""API routers."""

from .applications import router as applications_router

__all__ = ["applications_router"]
