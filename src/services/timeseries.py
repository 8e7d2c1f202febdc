"""
Per-day calendar metrics for time series charts.
"""

from collections import defaultdict
from datetime import date, timedelta

from models.events import CalendarEvent, DailyMetric, DayCount, TimeSeriesData
from services.normalizer import NormalizedEvent, adjacent_gaps, normalize_events, round2


def date_sequence(start_date: str, end_date: str) -> list[str]:
    """
    All calendar dates from start_date to end_date inclusive, as YYYY-MM-DD.

    Empty when start_date is after end_date.
    """
    current = date.fromisoformat(start_date)
    end = date.fromisoformat(end_date)
    dates = []
    while current <= end:
        dates.append(current.isoformat())
        current += timedelta(days=1)
    return dates


def daily_metric(day: str, day_events: list[NormalizedEvent]) -> DailyMetric:
    """Metrics for one day; gaps are measured within the day only."""
    meeting_count = len(day_events)
    total_duration = sum(e.duration_minutes for e in day_events)
    day_gaps = [minutes for _, _, minutes in adjacent_gaps(day_events)]

    return {
        "date": day,
        "meetingCount": meeting_count,
        "meetingHours": round2(total_duration / 60),
        "totalDuration": total_duration,
        "averageDuration": round2(total_duration / meeting_count) if meeting_count else 0,
        "averageGap": round2(sum(day_gaps) / len(day_gaps)) if day_gaps else 0,
        "longestGap": max(day_gaps) if day_gaps else 0,
        "shortestGap": min(day_gaps) if day_gaps else 0,
    }


def find_peak_day(metrics: list[DailyMetric]) -> DayCount:
    """Day with the most meetings; the earliest wins ties."""
    peak: DayCount = {"date": "", "count": 0}
    for metric in metrics:
        if metric["meetingCount"] > peak["count"]:
            peak = {"date": metric["date"], "count": metric["meetingCount"]}
    return peak


def find_quietest_day(metrics: list[DailyMetric]) -> DayCount:
    """Day with the fewest meetings, empty days included; the earliest wins ties."""
    if not metrics:
        return {"date": "", "count": 0}

    quietest: DayCount = {"date": metrics[0]["date"], "count": metrics[0]["meetingCount"]}
    for metric in metrics[1:]:
        if metric["meetingCount"] < quietest["count"]:
            quietest = {"date": metric["date"], "count": metric["meetingCount"]}
    return quietest


def analyze_time_series(
    events: list[CalendarEvent], start_date: str, end_date: str
) -> TimeSeriesData:
    """
    Build one DailyMetric per day in the inclusive range plus a summary.

    Days without events are included and count towards the per-day
    averages, so the averages describe workload density over the whole
    period rather than over active days only.
    """
    normalized = normalize_events(events)

    events_by_date: dict[str, list[NormalizedEvent]] = defaultdict(list)
    for event in normalized:
        events_by_date[event.date_key].append(event)

    metrics = [
        daily_metric(day, events_by_date.get(day, []))
        for day in date_sequence(start_date, end_date)
    ]

    total_days = len(metrics)
    total_meetings = sum(m["meetingCount"] for m in metrics)
    total_hours = sum(m["meetingHours"] for m in metrics)

    return {
        "metrics": metrics,
        "summary": {
            "totalDays": total_days,
            "averageMeetingsPerDay": round2(total_meetings / total_days) if total_days else 0,
            "averageHoursPerDay": round2(total_hours / total_days) if total_days else 0,
            "peakDay": find_peak_day(metrics),
            "quietestDay": find_quietest_day(metrics),
        },
    }
