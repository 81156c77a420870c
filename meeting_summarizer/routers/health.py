"""
Health check router for monitoring API status
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ..config import settings
from ..models.requests import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])

# Track application start time
app_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Health check endpoint reporting which collaborators are configured.

    Placeholder credentials do not make the service unhealthy, but requests
    that need them will fail.
    """
    services = {
        "storage": type(request.app.state.storage).__name__,
        "completion": "configured" if settings.completion_configured else "placeholder_credentials",
        "email": "configured" if settings.smtp_configured else "placeholder_credentials",
    }

    overall_status = "healthy"
    if "placeholder_credentials" in services.values():
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        version=settings.api_version,
        services=services,
        uptime_seconds=time.time() - app_start_time
    )
