"""Synthetic test-event preview and generation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.dependencies import verify_api_key
from api.logging import RequestLog, get_client_ip, safe_log_request
from api.models.responses import (
    ErrorCodes,
    GenerateTestEventsRequest,
    GenerateTestEventsResponse,
)
from core.config import PREVIEW_LIMIT
from models.events import SyntheticEvent
from services.calendar import CalendarServiceError, create_calendar_events_bulk
from services.generator import GeneratorConfig, generate_events, generate_realistic_week

router = APIRouter(prefix="/v1/test-events")


def build_test_events(options: GenerateTestEventsRequest) -> list[SyntheticEvent]:
    """
    Generate events for the requested options.

    Raises:
        HTTPException: 400 if the options are invalid
    """
    try:
        if options.realistic:
            return generate_realistic_week(options.start_date, options.time_zone)
        return generate_events(
            GeneratorConfig(
                start_date=options.start_date,
                end_date=options.end_date,
                events_per_day=options.events_per_day,
                min_duration=options.min_duration,
                max_duration=options.max_duration,
                time_zone=options.time_zone,
            )
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": str(e),
                "code": ErrorCodes.INVALID_REQUEST,
                "details": [],
            },
        )


@router.get("/preview")
async def preview_test_events(
    start_date: Annotated[str, Query(alias="startDate")],
    end_date: Annotated[str, Query(alias="endDate")],
    events_per_day: Annotated[int, Query(alias="eventsPerDay")] = 3,
    min_duration: Annotated[int, Query(alias="minDuration")] = 30,
    max_duration: Annotated[int, Query(alias="maxDuration")] = 60,
    time_zone: Annotated[str, Query(alias="timeZone")] = "UTC",
    realistic: bool = False,
    _api_key: str = Depends(verify_api_key),
):
    """Generate events without creating them and return the first few."""
    options = GenerateTestEventsRequest(
        start_date=start_date,
        end_date=end_date,
        events_per_day=events_per_day,
        min_duration=min_duration,
        max_duration=max_duration,
        time_zone=time_zone,
        realistic=realistic,
    )
    events = build_test_events(options)

    return {
        "count": len(events),
        "events": events[:PREVIEW_LIMIT],
        "total": len(events),
    }


@router.post("/generate", response_model=GenerateTestEventsResponse)
async def generate_test_events(
    request: Request,
    options: GenerateTestEventsRequest,
    _api_key: str = Depends(verify_api_key),
):
    """Generate events and create them in the configured calendar."""
    request_log = RequestLog(
        endpoint="/v1/test-events/generate",
        method="POST",
        client_ip=get_client_ip(request),
        start_date=options.start_date,
        end_date=options.end_date,
    )

    try:
        events = build_test_events(options)
        if not events:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "error": "No events generated. Check your date range and configuration.",
                    "code": ErrorCodes.NO_EVENTS_GENERATED,
                    "details": [],
                },
            )

        try:
            result = await create_calendar_events_bulk(events)
        except CalendarServiceError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail={
                    "error": "Failed to create calendar events",
                    "code": ErrorCodes.GRAPH_ERROR,
                    "details": [str(e)],
                },
            )

        request_log.events_count = result["created"]
        for error in result["errors"]:
            request_log.details.append(("warning", f"{error['event']}: {error['error']}"))
        request_log.finish(200)

        return GenerateTestEventsResponse(
            success=True,
            requested=len(events),
            created=result["created"],
            failed=result["failed"],
            errors=result["errors"],
            message=f"Created {result['created']} out of {len(events)} events",
        )

    except HTTPException as e:
        request_log.record_http_error(e)
        raise

    finally:
        # Always log the request
        safe_log_request(request_log)
