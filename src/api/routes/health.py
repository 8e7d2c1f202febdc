"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core import config
from core.config import API_VERSION

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if Graph credentials are missing.
    """
    graph_configured = config.graph_configured()
    timestamp = datetime.now(timezone.utc).isoformat()

    if graph_configured:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            graph_configured=True,
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                graph_configured=False,
                timestamp=timestamp,
                error="MS Graph credentials not configured",
            ).model_dump(),
        )
