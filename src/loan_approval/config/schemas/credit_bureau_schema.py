"""Credit bureau client configuration schema."""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class CreditBureauConfig(BaseModel):
    """Credit bureau HTTP client configuration."""

    base_url: Optional[str] = Field(None, description="Credit bureau API base URL")
    timeout_seconds: float = Field(5.0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate request timeout."""
        if v <= 0:
            raise ValueError("Credit bureau timeout must be positive")
        return v

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)
