"""Response Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel


class SubmissionResponse(BaseModel):
    """Result of a form submission."""

    success: bool
    message: str


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    success: bool = True
    message: str
    timestamp: datetime


class ApiInfo(BaseModel):
    """Root descriptor listing the available endpoints."""

    message: str
    endpoints: dict[str, str]
