"""API Pydantic models."""

from .responses import (
    ErrorCodes,
    ErrorResponse,
    GenerateTestEventsRequest,
    GenerateTestEventsResponse,
    HealthResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "GenerateTestEventsRequest",
    "GenerateTestEventsResponse",
]
