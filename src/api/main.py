"""FastAPI application entry point."""

import warnings
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import calendar_router, health_router, test_events_router
from core import config
from core.config import API_DEBUG, API_VERSION


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup: warn about missing configuration
    if not config.graph_configured():
        warnings.warn("MS Graph credentials not configured; calendar endpoints will fail")
    if not config.CALENDAR_API_KEY:
        warnings.warn("CALENDAR_API_KEY not set; all /v1 requests will be rejected")

    yield


app = FastAPI(
    title="Calendar Insights API",
    description="REST API for calendar statistics, time series and insights from MS365 calendars",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            code=ErrorCodes.INTERNAL_ERROR,
            details=[],
        ).model_dump(),
    )


# Include routers
app.include_router(health_router)
app.include_router(calendar_router)
app.include_router(test_events_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
