"""FastAPI server factory and application setup."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from loan_approval import PACKAGE_NAME
from loan_approval._version import __version__
from loan_approval.api.middleware import LoggingMiddleware
from loan_approval.api.routers import applications_router
from loan_approval.application.approval.pipeline import ApplicationApprovalPipeline
from loan_approval.config.schemas.server_schema import ServerConfig
from loan_approval.domain.base.exceptions import DomainException
from loan_approval.infrastructure.error.exception_handler import get_exception_handler
from loan_approval.infrastructure.logging.logger import get_logger


def create_fastapi_app(
    pipeline: ApplicationApprovalPipeline,
    server_config: Optional[ServerConfig] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        pipeline: Approval pipeline serving the requests
        server_config: Server configuration

    Returns:
        Configured FastAPI application
    """
    server_config = server_config or ServerConfig()
    logger = get_logger(__name__)

    app = FastAPI(
        title="Loan Approval API",
        description="REST API running loan applications through the approval pipeline",
        version=__version__,
        docs_url="/docs" if server_config.docs_enabled else None,
        redoc_url="/redoc" if server_config.docs_enabled else None,
    )
    app.state.pipeline = pipeline

    if server_config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=server_config.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
        logger.info("CORS middleware enabled")

    app.add_middleware(LoggingMiddleware)

    exception_handler = get_exception_handler()

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        """Translate domain and storage errors into the error envelope."""
        error_response = exception_handler.handle_error_for_http(exc)
        content = error_response.to_dict()
        content["request_id"] = getattr(request.state, "request_id", "unknown")
        return JSONResponse(status_code=error_response.http_status, content=content)

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": PACKAGE_NAME, "version": __version__}

    app.include_router(applications_router)

    logger.info("FastAPI application created", route_count=len(app.routes))
    return app
