"""Common schemas used across multiple API endpoints."""

from pydantic import BaseModel, Field


class HealthStatusResponse(BaseModel):
    """Component health check result.

    Attributes:
        status: "healthy" or "unhealthy".
        component: Checked component ("database", "cache").
        detail: Failure reason when unhealthy.
    """

    status: str = Field(..., examples=["healthy"])
    component: str = Field(..., examples=["database"])
    detail: str | None = None
