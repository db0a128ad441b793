"""Liveness response schema."""

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("OK", description="Always OK while the process serves requests")
    timestamp: str = Field(..., description="UTC time of the check, ISO 8601 with a Z suffix")
