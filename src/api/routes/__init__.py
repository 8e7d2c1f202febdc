"""API route modules."""

from .calendar import router as calendar_router
from .health import router as health_router
from .generator import router as test_events_router

__all__ = ["health_router", "calendar_router", "test_events_router"]
