"""Pydantic request and response models for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    graph_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    GRAPH_ERROR = "GRAPH_ERROR"
    NO_EVENTS_GENERATED = "NO_EVENTS_GENERATED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GenerateTestEventsRequest(BaseModel):
    """Body for POST /v1/test-events/generate."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    events_per_day: int = Field(default=3, alias="eventsPerDay")
    min_duration: int = Field(default=30, alias="minDuration")
    max_duration: int = Field(default=60, alias="maxDuration")
    time_zone: str = Field(default="UTC", alias="timeZone")
    realistic: bool = False


class GenerateTestEventsResponse(BaseModel):
    """Outcome of a bulk test-event creation."""

    success: bool
    requested: int
    created: int
    failed: int
    errors: list[dict]
    message: str
