"""
Event normalization shared by the calendar analyzers.

Drops all-day and incomplete events, parses start/end instants and sorts
chronologically. Malformed events are skipped, never reported.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone

from dateutil import parser as dateutil_parser

from models.events import CalendarEvent


@dataclass(frozen=True)
class NormalizedEvent:
    """Calendar event with parsed UTC instants and duration in minutes."""

    event: CalendarEvent
    start_instant: datetime
    end_instant: datetime
    duration_minutes: int

    @property
    def date_key(self) -> str:
        return date_key(self.start_instant)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def round1(value: float) -> float:
    """Round to 1 decimal place with half-up semantics."""
    return math.floor(value * 10 + 0.5) / 10


def round2(value: float) -> float:
    """Round to 2 decimal places with half-up semantics."""
    return math.floor(value * 100 + 0.5) / 100


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end (negative if end is earlier)."""
    return round_half_up((end - start).total_seconds() / 60)


def date_key(instant: datetime) -> str:
    """UTC calendar date of an instant as YYYY-MM-DD."""
    return instant.astimezone(timezone.utc).date().isoformat()


def format_instant(instant: datetime) -> str:
    """ISO-8601 UTC string with milliseconds, e.g. 2024-01-01T09:30:00.000Z."""
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_instant(value: str | None) -> datetime | None:
    """
    Parse a Graph dateTime string into an aware UTC datetime.

    Strings without an offset are read as UTC. Returns None when the value
    is missing or unparseable.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = dateutil_parser.isoparse(value.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _date_time(event: CalendarEvent, field: str) -> str | None:
    value = event.get(field)
    if not isinstance(value, dict):
        return None
    return value.get("dateTime")


def normalize_event(event: CalendarEvent) -> NormalizedEvent | None:
    """Normalize one event, or return None if it must be excluded."""
    if not isinstance(event, dict) or event.get("isAllDay"):
        return None

    start = parse_instant(_date_time(event, "start"))
    end = parse_instant(_date_time(event, "end"))
    if start is None or end is None:
        return None

    return NormalizedEvent(
        event=event,
        start_instant=start,
        end_instant=end,
        duration_minutes=minutes_between(start, end),
    )


def normalize_events(events: list[CalendarEvent]) -> list[NormalizedEvent]:
    """
    Filter and sort events for analysis.

    The sort is stable, so events starting at the same instant keep their
    original relative order. The input list is not modified.
    """
    normalized = []
    for event in events or []:
        parsed = normalize_event(event)
        if parsed is not None:
            normalized.append(parsed)

    return sorted(normalized, key=lambda e: e.start_instant)


def adjacent_gaps(events: list[NormalizedEvent]) -> list[tuple[datetime, datetime, int]]:
    """
    Gaps between directly adjacent events of a sorted sequence.

    Returns (gap_start, gap_end, minutes) tuples. Overlapping and
    back-to-back pairs produce no gap.
    """
    gaps = []
    for current, following in zip(events, events[1:]):
        gap_start = current.end_instant
        gap_end = following.start_instant
        if gap_end <= gap_start:
            continue
        minutes = minutes_between(gap_start, gap_end)
        if minutes > 0:
            gaps.append((gap_start, gap_end, minutes))
    return gaps
