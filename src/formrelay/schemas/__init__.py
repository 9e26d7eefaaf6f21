"""Pydantic schemas package."""

from formrelay.schemas.forms import (
    POSITION_LABELS,
    Attachment,
    CareerApplication,
    ContactMessage,
    Position,
)
from formrelay.schemas.responses import ApiInfo, HealthResponse, SubmissionResponse

__all__ = [
    "POSITION_LABELS",
    "ApiInfo",
    "Attachment",
    "CareerApplication",
    "ContactMessage",
    "HealthResponse",
    "Position",
    "SubmissionResponse",
]
