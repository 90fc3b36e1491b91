"""HTTP API server configuration schema."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ServerConfig(BaseModel):
    """Settings for `loan-approval serve`."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field("0.0.0.0", description="Interface to bind")
    port: int = Field(8000, ge=1, le=65535, description="Port to listen on")
    log_level: str = Field("info", description="uvicorn log level")
    docs_enabled: bool = Field(True, description="Serve /docs and /redoc")
    cors_origins: List[str] = Field(default_factory=list, description="Origins allowed by CORS")
