"""
Range-level calendar statistics.
"""

from models.events import CalendarEvent, Gap, RangeMetadata
from services.normalizer import adjacent_gaps, format_instant, normalize_events, round2


def analyze_range(events: list[CalendarEvent], start_date: str, end_date: str) -> RangeMetadata:
    """
    Compute summary metadata for a list of events.

    start_date and end_date are echoed back as the date range only; events
    are not filtered by them. Gaps are measured between adjacent events in
    start order across the whole range.
    """
    normalized = normalize_events(events)

    total_duration = sum(e.duration_minutes for e in normalized)
    average_duration = total_duration / len(normalized) if normalized else 0

    # Events are sorted, so keys come out in ascending date order
    events_per_day: dict[str, int] = {}
    for event in normalized:
        events_per_day[event.date_key] = events_per_day.get(event.date_key, 0) + 1

    gaps: list[Gap] = [
        {
            "start": format_instant(gap_start),
            "end": format_instant(gap_end),
            "durationMinutes": minutes,
        }
        for gap_start, gap_end, minutes in adjacent_gaps(normalized)
    ]
    total_gap = sum(gap["durationMinutes"] for gap in gaps)
    average_gap = total_gap / len(gaps) if gaps else 0

    return {
        "dateRange": {"start": start_date, "end": end_date},
        "totalEvents": len(normalized),
        "totalDuration": total_duration,
        "averageDuration": round2(average_duration),
        "eventsPerDay": events_per_day,
        "gaps": gaps,
        "averageGap": round2(average_gap),
        "totalMeetingHours": round2(total_duration / 60),
    }
