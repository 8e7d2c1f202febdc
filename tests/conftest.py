"""
Pytest configuration and shared fixtures.
"""

import itertools
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def make_event():
    """Factory for CalendarEvent dicts in the MS Graph shape."""
    counter = itertools.count(1)

    def _make(
        start: str | None,
        end: str | None,
        subject: str = "Meeting",
        is_all_day: bool = False,
        time_zone: str = "UTC",
    ) -> dict:
        event_id = f"evt-{next(counter)}"
        return {
            "id": event_id,
            "subject": subject,
            "start": {"dateTime": start, "timeZone": time_zone} if start is not None else None,
            "end": {"dateTime": end, "timeZone": time_zone} if end is not None else None,
            "isAllDay": is_all_day,
            "organizer": {
                "emailAddress": {"name": "Organizer", "address": "organizer@example.com"}
            },
            "attendees": [],
        }

    return _make


@pytest.fixture
def meetings(make_event):
    """Build events from (start, end) pairs, e.g. ("2024-01-01T09:00", "2024-01-01T09:30")."""

    def _meetings(*pairs: tuple[str, str]) -> list[dict]:
        return [make_event(f"{start}:00", f"{end}:00") for start, end in pairs]

    return _meetings


@pytest.fixture
def sample_events(make_event):
    """A small working day: two adjacent meetings and an all-day event."""
    return [
        make_event("2024-01-01T10:00:00", "2024-01-01T10:30:00", subject="Sync"),
        make_event("2024-01-01T09:00:00", "2024-01-01T09:30:00", subject="Standup"),
        make_event("2024-01-01T00:00:00", "2024-01-02T00:00:00", subject="Holiday", is_all_day=True),
    ]
