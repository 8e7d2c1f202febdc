"""Calendar analysis endpoints."""

from collections.abc import Callable
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.dependencies import date_range_or_400, verify_api_key
from api.logging import RequestLog, get_client_ip, safe_log_request
from api.models.responses import ErrorCodes
from models.events import CalendarEvent
from services.analyzer import analyze_range
from services.calendar import CalendarServiceError, fetch_calendar_events
from services.insights import generate_insights
from services.timeseries import analyze_time_series

router = APIRouter(prefix="/v1/calendar")

StartDate = Annotated[str | None, Query(alias="startDate", description="YYYY-MM-DD")]
EndDate = Annotated[str | None, Query(alias="endDate", description="YYYY-MM-DD")]


async def fetch_events_or_502(start: date, end: date) -> list[CalendarEvent]:
    """Fetch events, turning Graph failures into a 502 response."""
    try:
        return await fetch_calendar_events(start, end)
    except CalendarServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "Failed to fetch calendar events",
                "code": ErrorCodes.GRAPH_ERROR,
                "details": [str(e)],
            },
        )


async def _analyze_request(
    request: Request,
    endpoint: str,
    start_date: str | None,
    end_date: str | None,
    build: Callable[[list[CalendarEvent], str, str], dict],
) -> dict:
    """Resolve the range, fetch events, run `build` and log the request."""
    request_log = RequestLog(
        endpoint=endpoint,
        method="GET",
        client_ip=get_client_ip(request),
        start_date=start_date,
        end_date=end_date,
    )

    try:
        start, end = date_range_or_400(start_date, end_date)
        request_log.start_date = start.isoformat()
        request_log.end_date = end.isoformat()

        events = await fetch_events_or_502(start, end)
        request_log.events_count = len(events)

        result = build(events, start.isoformat(), end.isoformat())
        request_log.finish(200)
        return result

    except HTTPException as e:
        request_log.record_http_error(e)
        raise

    except Exception as e:
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.finish(500)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Internal server error",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        # Always log the request
        safe_log_request(request_log)


@router.get("/events")
async def calendar_events(
    request: Request,
    start_date: StartDate = None,
    end_date: EndDate = None,
    _api_key: str = Depends(verify_api_key),
):
    """Events in the range together with their range metadata."""

    def build(events, start, end):
        return {"events": events, "metadata": analyze_range(events, start, end)}

    return await _analyze_request(request, "/v1/calendar/events", start_date, end_date, build)


@router.get("/insights")
async def calendar_insights(
    request: Request,
    start_date: StartDate = None,
    end_date: EndDate = None,
    _api_key: str = Depends(verify_api_key),
):
    """Range metadata plus the insights and recommendations derived from it."""

    def build(events, start, end):
        metadata = analyze_range(events, start, end)
        return {"metadata": metadata, "insights": generate_insights(events, metadata)}

    return await _analyze_request(request, "/v1/calendar/insights", start_date, end_date, build)


@router.get("/timeseries")
async def calendar_timeseries(
    request: Request,
    start_date: StartDate = None,
    end_date: EndDate = None,
    _api_key: str = Depends(verify_api_key),
):
    """Daily metrics for every day in the range, including empty days."""

    def build(events, start, end):
        return {"timeSeries": analyze_time_series(events, start, end)}

    return await _analyze_request(request, "/v1/calendar/timeseries", start_date, end_date, build)
