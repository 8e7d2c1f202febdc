"""FastAPI dependencies for authentication and shared request parsing."""

import secrets
from datetime import date

from fastapi import Header, HTTPException, status

from api.models.responses import ErrorCodes
from core.config import CALENDAR_API_KEY
from core.validation import resolve_date_range


async def verify_api_key(x_api_key: str = Header(..., alias="X-API-Key")) -> str:
    """
    Verify API key from X-API-Key header.

    Raises:
        HTTPException: 401 if key is missing or invalid
    """
    if not CALENDAR_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "API key not configured on server",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    # Use constant-time comparison to prevent timing attacks
    if not secrets.compare_digest(x_api_key, CALENDAR_API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Invalid or missing API key",
                "code": ErrorCodes.UNAUTHORIZED,
                "details": [],
            },
        )

    return x_api_key


def date_range_or_400(start_date: str | None, end_date: str | None) -> tuple[date, date]:
    """Resolve a date range, turning validation errors into a 400 response."""
    try:
        return resolve_date_range(start_date, end_date)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": str(e),
                "code": ErrorCodes.INVALID_REQUEST,
                "details": ["Expected format: YYYY-MM-DD"],
            },
        )
