"""
Calendar event fetching and creation through MS Graph.
"""

import asyncio
from datetime import date, datetime, time, timedelta, timezone

from msgraph.generated.models.body_type import BodyType
from msgraph.generated.models.date_time_time_zone import DateTimeTimeZone
from msgraph.generated.models.event import Event
from msgraph.generated.models.item_body import ItemBody

from core.config import BULK_CREATE_DELAY_SECONDS, GRAPH_USER_ID
from core.graph_client import GraphConfigurationError, get_graph_client
from models.events import BulkCreateResult, CalendarEvent, Participant, SyntheticEvent

EVENT_FIELDS = ["id", "subject", "start", "end", "organizer", "attendees", "isAllDay"]
PAGE_SIZE = 100


class CalendarServiceError(Exception):
    """Raised when MS Graph cannot be reached or rejects a calendar request."""


def _user_builder(user_id: str | None):
    """Request builder for the given (or configured) calendar user."""
    user_id = user_id or GRAPH_USER_ID
    if not user_id:
        raise CalendarServiceError("No calendar user configured (MICROSOFT_GRAPH_USER_ID)")
    try:
        graph = get_graph_client()
    except GraphConfigurationError as e:
        raise CalendarServiceError(str(e)) from e
    return graph.users.by_user_id(user_id)


def _utc_midnight(d: date) -> str:
    return datetime.combine(d, time.min, tzinfo=timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


async def fetch_calendar_events(
    start_date: date, end_date: date, user_id: str | None = None
) -> list[CalendarEvent]:
    """
    Fetch all events from the user's calendar view within a date range.

    The window runs from midnight UTC of start_date to midnight UTC after
    end_date so the last day is included. Follows pagination links.

    Raises:
        CalendarServiceError: if any Graph request fails
    """
    from msgraph.generated.users.item.calendar_view.calendar_view_request_builder import (
        CalendarViewRequestBuilder,
    )

    user = _user_builder(user_id)

    query_params = CalendarViewRequestBuilder.CalendarViewRequestBuilderGetQueryParameters(
        start_date_time=_utc_midnight(start_date),
        end_date_time=_utc_midnight(end_date + timedelta(days=1)),
        select=EVENT_FIELDS,
        orderby=["start/dateTime"],
        top=PAGE_SIZE,
    )
    config = CalendarViewRequestBuilder.CalendarViewRequestBuilderGetRequestConfiguration(
        query_parameters=query_params
    )

    calendar_view = user.calendar_view
    events: list[CalendarEvent] = []

    try:
        response = await calendar_view.get(request_configuration=config)
        while response:
            for event in response.value or []:
                events.append(parse_event(event))

            if not response.odata_next_link:
                break
            response = await calendar_view.with_url(response.odata_next_link).get()
    except Exception as e:
        raise CalendarServiceError(f"Failed to fetch calendar events: {e}") from e

    return events


def _parse_participant(recipient) -> Participant | None:
    if recipient is None or recipient.email_address is None:
        return None
    return {
        "emailAddress": {
            "name": recipient.email_address.name or "",
            "address": recipient.email_address.address or "",
        }
    }


def parse_event(event) -> CalendarEvent:
    """Convert an MS Graph event model into a plain CalendarEvent dict."""
    start = None
    end = None
    if event.start and event.start.date_time:
        start = {"dateTime": event.start.date_time, "timeZone": event.start.time_zone or "UTC"}
    if event.end and event.end.date_time:
        end = {"dateTime": event.end.date_time, "timeZone": event.end.time_zone or "UTC"}

    attendees = [_parse_participant(a) for a in (event.attendees or [])]

    return {
        "id": event.id or "",
        "subject": event.subject or "",
        "start": start,
        "end": end,
        "isAllDay": bool(event.is_all_day),
        "organizer": _parse_participant(event.organizer),
        "attendees": [a for a in attendees if a is not None],
    }


def build_graph_event(event: SyntheticEvent) -> Event:
    """Convert a generated event into an MS Graph Event object."""
    body = event.get("body")
    return Event(
        subject=event["subject"],
        start=DateTimeTimeZone(
            date_time=event["start"]["dateTime"],
            time_zone=event["start"]["timeZone"],
        ),
        end=DateTimeTimeZone(
            date_time=event["end"]["dateTime"],
            time_zone=event["end"]["timeZone"],
        ),
        body=ItemBody(
            content_type=BodyType.Html if body and body["contentType"].upper() == "HTML" else BodyType.Text,
            content=body["content"] if body else "",
        ),
    )


async def create_calendar_events_bulk(
    events: list[SyntheticEvent],
    user_id: str | None = None,
    delay: float = BULK_CREATE_DELAY_SECONDS,
) -> BulkCreateResult:
    """
    Create events one at a time, pausing between posts to avoid throttling.

    Individual failures are collected in the result rather than raised.
    """
    user = _user_builder(user_id)

    created = 0
    failed = 0
    errors = []

    for event in events:
        try:
            await user.events.post(build_graph_event(event))
            created += 1
            if delay:
                await asyncio.sleep(delay)
        except Exception as e:
            failed += 1
            errors.append({"event": event["subject"], "error": str(e)})

    return {"created": created, "failed": failed, "errors": errors}
