"""Response bodies shared by the template services."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = Field(default="ok")
    timestamp: str = Field(..., description="Time of the check, RFC3339 UTC")
    service: str | None = Field(None, description="Short service identifier, if configured")


class ServiceInfo(BaseModel):
    """Service metadata and uptime."""

    name: str
    version: str = Field(default="1.0.0")
    uptime: str = Field(..., description="Time since process start, rounded to the second")
