"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from .. import __version__
from ..schemas import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health():
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat()
    )
