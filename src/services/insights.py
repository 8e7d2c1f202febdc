"""
Heuristic insights and recommendations derived from range metadata.

Every rule is evaluated on each call, in a fixed order, so several
insights can be reported together.
"""

from datetime import date

from core.config import (
    BACK_TO_BACK_THRESHOLD,
    FOCUS_GAP_MINUTES,
    HIGH_LOAD_DAY_MEETINGS,
    LONG_MEETING_MINUTES,
    MIN_AVERAGE_GAP_MINUTES,
    MODERATE_BALANCE_HOURS,
    MODERATE_BALANCE_MEETINGS_PER_DAY,
    OVERLOAD_MEETING_HOURS,
    OVERLOAD_MEETINGS_PER_DAY,
    POOR_BALANCE_HOURS,
    POOR_BALANCE_MEETINGS_PER_DAY,
    SHORT_GAP_MINUTES,
)
from models.events import (
    CalendarEvent,
    CalendarInsights,
    DayCount,
    Insight,
    RangeMetadata,
    WorkLifeBalance,
)
from services.normalizer import normalize_events, round1, round2, round_half_up


def format_day_display(day: str) -> str:
    """Format a YYYY-MM-DD string as 'Monday, Jan 1' (no zero-padding)."""
    d = date.fromisoformat(day)
    return f"{d.strftime('%A')}, {d.strftime('%b')} {d.day}"


def find_busiest_day(events_per_day: dict[str, int]) -> DayCount:
    """First day with the highest count, or an empty entry when there are none."""
    busiest: DayCount = {"date": "", "count": 0}
    for day, count in events_per_day.items():
        if count > busiest["count"]:
            busiest = {"date": day, "count": count}
    return busiest


def classify_work_life_balance(total_hours: float, meetings_per_day: float) -> WorkLifeBalance:
    if total_hours > POOR_BALANCE_HOURS or meetings_per_day > POOR_BALANCE_MEETINGS_PER_DAY:
        return "poor"
    if total_hours > MODERATE_BALANCE_HOURS or meetings_per_day > MODERATE_BALANCE_MEETINGS_PER_DAY:
        return "moderate"
    return "good"


def generate_insights(events: list[CalendarEvent], metadata: RangeMetadata) -> CalendarInsights:
    """
    Apply the insight rules to a range analysis.

    The per-day average here divides by the number of days that have
    meetings, unlike the time series summary which spreads over every day
    in the range.
    """
    insights: list[Insight] = []
    recommendations: list[str] = []

    normalized = normalize_events(events)
    long_meetings = [e for e in normalized if e.duration_minutes > LONG_MEETING_MINUTES]

    events_per_day = metadata["eventsPerDay"]
    gaps = metadata["gaps"]
    total_hours = metadata["totalMeetingHours"]
    average_gap = metadata["averageGap"]

    busiest_day = find_busiest_day(events_per_day)
    average_meetings_per_day = metadata["totalEvents"] / max(1, len(events_per_day))

    meeting_overload = (
        average_meetings_per_day > OVERLOAD_MEETINGS_PER_DAY
        or total_hours > OVERLOAD_MEETING_HOURS
    )
    high_meeting_days = len(
        [count for count in events_per_day.values() if count >= HIGH_LOAD_DAY_MEETINGS]
    )

    long_gaps = [gap for gap in gaps if gap["durationMinutes"] >= FOCUS_GAP_MINUTES]
    focus_time_available = len(long_gaps) > 0

    work_life_balance = classify_work_life_balance(total_hours, average_meetings_per_day)

    if meeting_overload:
        insights.append(
            {
                "type": "warning",
                "title": "High Meeting Load Detected",
                "description": (
                    f"You have {round1(total_hours):.1f} meeting hours this week with an average of "
                    f"{round1(average_meetings_per_day):.1f} meetings per day."
                ),
                "priority": "high",
                "actionable": "Consider blocking focus time and declining non-essential meetings.",
            }
        )
        recommendations.append("Block 2-3 hours daily for focused work")
        recommendations.append("Review recurring meetings - can any be reduced in frequency?")

    if busiest_day["count"] > 0:
        insights.append(
            {
                "type": "info",
                "title": "Busiest Day",
                "description": (
                    f"{format_day_display(busiest_day['date'])} is your busiest day "
                    f"with {busiest_day['count']} meetings."
                ),
                "priority": "medium",
                "actionable": "Prepare in advance and block buffer time before/after.",
            }
        )

    if focus_time_available:
        total_focus_time = sum(gap["durationMinutes"] for gap in long_gaps)
        insights.append(
            {
                "type": "success",
                "title": "Focus Time Available",
                "description": (
                    f"You have {len(long_gaps)} gaps of {FOCUS_GAP_MINUTES}+ minutes totaling "
                    f"{round_half_up(total_focus_time / 60)} hours that could be used for "
                    "focused work."
                ),
                "priority": "medium",
                "actionable": "Block these times in your calendar to protect them.",
            }
        )
        recommendations.append("Schedule deep work during identified focus time slots")
    elif gaps and average_gap < MIN_AVERAGE_GAP_MINUTES:
        insights.append(
            {
                "type": "warning",
                "title": "Limited Focus Time",
                "description": (
                    f"Your average gap between meetings is only {round_half_up(average_gap)} "
                    "minutes, leaving little time for focused work."
                ),
                "priority": "high",
                "actionable": "Consider scheduling longer breaks between meetings.",
            }
        )
        recommendations.append("Aim for at least 30-minute buffers between meetings")

    short_gaps = [gap for gap in gaps if gap["durationMinutes"] < SHORT_GAP_MINUTES]
    if len(short_gaps) > BACK_TO_BACK_THRESHOLD:
        insights.append(
            {
                "type": "warning",
                "title": "Back-to-Back Meetings",
                "description": (
                    f"You have {len(short_gaps)} gaps of less than {SHORT_GAP_MINUTES} minutes "
                    "between meetings, which can lead to meeting fatigue."
                ),
                "priority": "medium",
                "actionable": "Add buffer time between meetings to allow for breaks and preparation.",
            }
        )
        recommendations.append("Add 15-minute buffers between consecutive meetings")

    if metadata["averageDuration"] > LONG_MEETING_MINUTES:
        insights.append(
            {
                "type": "suggestion",
                "title": "Long Average Meeting Duration",
                "description": (
                    f"Your average meeting is {round_half_up(metadata['averageDuration'])} "
                    f"minutes and {len(long_meetings)} of your meetings ran longer than "
                    f"{LONG_MEETING_MINUTES} minutes. Consider if some meetings could be shorter."
                ),
                "priority": "low",
                "actionable": "Try defaulting to 25 or 45-minute meetings instead of 30 or 60.",
            }
        )
        recommendations.append("Experiment with shorter default meeting durations")

    if high_meeting_days > 0:
        insights.append(
            {
                "type": "warning",
                "title": "Multiple High-Meeting Days",
                "description": (
                    f"You have {high_meeting_days} day(s) with {HIGH_LOAD_DAY_MEETINGS}+ "
                    "meetings, which can be overwhelming."
                ),
                "priority": "high",
                "actionable": "Distribute meetings more evenly across the week if possible.",
            }
        )

    if (
        not meeting_overload
        and average_gap >= MIN_AVERAGE_GAP_MINUTES
        and work_life_balance == "good"
    ):
        insights.append(
            {
                "type": "success",
                "title": "Well-Balanced Schedule",
                "description": "Your calendar shows good balance with adequate time between meetings.",
                "priority": "low",
            }
        )

    if metadata["totalEvents"] == 0:
        insights.append(
            {
                "type": "info",
                "title": "No Meetings Found",
                "description": "No meetings found in the selected date range.",
                "priority": "low",
            }
        )

    return {
        "insights": insights,
        "patterns": {
            "busiestDay": busiest_day,
            "averageMeetingsPerDay": round2(average_meetings_per_day),
            "meetingOverload": meeting_overload,
            "focusTimeAvailable": focus_time_available,
            "workLifeBalance": work_life_balance,
        },
        # Unique, in order of first appearance
        "recommendations": list(dict.fromkeys(recommendations)),
    }
