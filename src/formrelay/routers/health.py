"""Health and root info endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from formrelay.schemas.responses import ApiInfo, HealthResponse

router = APIRouter()

ENDPOINTS = {
    "health": "/api/health",
    "careers": "/api/careers/apply",
    "contact": "/api/contact",
}


@router.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(
        success=True,
        message="Backend is running",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/", response_model=ApiInfo)
def root() -> ApiInfo:
    """Describe the available endpoints."""
    return ApiInfo(message="RSN Backend API", endpoints=ENDPOINTS)
