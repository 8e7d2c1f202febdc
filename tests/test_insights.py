"""
Tests for calendar insights and recommendations.
"""

import pytest

from services.analyzer import analyze_range
from services.insights import (
    classify_work_life_balance,
    find_busiest_day,
    format_day_display,
    generate_insights,
)


def titles(result):
    return [insight["title"] for insight in result["insights"]]


def insights_for(events, start="2024-01-01", end="2024-01-07"):
    return generate_insights(events, analyze_range(events, start, end))


class TestGenerateInsights:
    """Test cases for generate_insights"""

    def test_no_events_only_reports_no_meetings(self):
        result = insights_for([])

        assert result["insights"] == [
            {
                "type": "info",
                "title": "No Meetings Found",
                "description": "No meetings found in the selected date range.",
                "priority": "low",
            }
        ]
        assert result["patterns"] == {
            "busiestDay": {"date": "", "count": 0},
            "averageMeetingsPerDay": 0,
            "meetingOverload": False,
            "focusTimeAvailable": False,
            "workLifeBalance": "good",
        }
        assert result["recommendations"] == []

    def test_meeting_overload(self):
        metadata = {
            "dateRange": {"start": "2024-01-01", "end": "2024-01-05"},
            "totalEvents": 35,
            "totalDuration": 1920,
            "averageDuration": 54.86,
            "eventsPerDay": {f"2024-01-0{d}": 7 for d in range(1, 6)},
            "gaps": [],
            "averageGap": 0,
            "totalMeetingHours": 32,
        }

        result = generate_insights([], metadata)

        overload = result["insights"][0]
        assert overload["title"] == "High Meeting Load Detected"
        assert overload["type"] == "warning"
        assert overload["priority"] == "high"
        assert overload["description"] == (
            "You have 32.0 meeting hours this week with an average of 7.0 meetings per day."
        )
        assert result["patterns"]["meetingOverload"] is True
        assert result["patterns"]["averageMeetingsPerDay"] == 7
        assert result["patterns"]["workLifeBalance"] == "moderate"
        assert "Multiple High-Meeting Days" in titles(result)
        assert "Well-Balanced Schedule" not in titles(result)
        assert result["recommendations"][:2] == [
            "Block 2-3 hours daily for focused work",
            "Review recurring meetings - can any be reduced in frequency?",
        ]

    def test_overload_description_rounds_half_up(self):
        metadata = {
            "dateRange": {"start": "2024-01-01", "end": "2024-01-04"},
            "totalEvents": 25,
            "totalDuration": 1935,
            "averageDuration": 77.4,
            "eventsPerDay": {"2024-01-01": 7, "2024-01-02": 6, "2024-01-03": 6, "2024-01-04": 6},
            "gaps": [],
            "averageGap": 0,
            "totalMeetingHours": 32.25,
        }

        result = generate_insights([], metadata)

        assert result["insights"][0]["description"] == (
            "You have 32.3 meeting hours this week with an average of 6.3 meetings per day."
        )

    def test_overload_by_hours_alone(self):
        metadata = {
            "dateRange": {"start": "2024-01-01", "end": "2024-01-05"},
            "totalEvents": 10,
            "totalDuration": 1860,
            "averageDuration": 186,
            "eventsPerDay": {f"2024-01-0{d}": 2 for d in range(1, 6)},
            "gaps": [],
            "averageGap": 0,
            "totalMeetingHours": 31,
        }

        result = generate_insights([], metadata)

        assert result["patterns"]["meetingOverload"] is True
        assert result["patterns"]["workLifeBalance"] == "moderate"

    def test_focus_time_and_balanced_schedule(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:00"),
            ("2024-01-01T11:00", "2024-01-01T12:00"),
        )

        result = insights_for(events)

        assert titles(result) == ["Busiest Day", "Focus Time Available", "Well-Balanced Schedule"]
        focus = result["insights"][1]
        assert focus["type"] == "success"
        assert focus["description"] == (
            "You have 1 gaps of 60+ minutes totaling 1 hours that could be used for focused work."
        )
        assert result["patterns"]["focusTimeAvailable"] is True
        assert result["recommendations"] == ["Schedule deep work during identified focus time slots"]

    def test_busiest_day_description(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:00"),
            ("2024-01-01T11:00", "2024-01-01T12:00"),
        )

        busiest = insights_for(events)["insights"][0]

        assert busiest["description"] == "Monday, Jan 1 is your busiest day with 2 meetings."
        assert busiest["priority"] == "medium"

    def test_limited_focus_time(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:00"),
            ("2024-01-01T10:10", "2024-01-01T11:00"),
            ("2024-01-01T11:20", "2024-01-01T12:00"),
        )

        result = insights_for(events)

        assert titles(result) == ["Busiest Day", "Limited Focus Time"]
        limited = result["insights"][1]
        assert limited["priority"] == "high"
        assert limited["description"].startswith("Your average gap between meetings is only 15 minutes")
        assert result["recommendations"] == ["Aim for at least 30-minute buffers between meetings"]

    def test_back_to_back_meetings(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T09:30"),
            ("2024-01-01T09:35", "2024-01-01T10:05"),
            ("2024-01-01T10:10", "2024-01-01T10:40"),
            ("2024-01-01T10:45", "2024-01-01T11:15"),
            ("2024-01-01T11:20", "2024-01-01T11:50"),
        )

        result = insights_for(events)

        assert titles(result) == ["Busiest Day", "Limited Focus Time", "Back-to-Back Meetings"]
        assert result["insights"][2]["priority"] == "medium"
        assert result["recommendations"] == [
            "Aim for at least 30-minute buffers between meetings",
            "Add 15-minute buffers between consecutive meetings",
        ]

    def test_three_short_gaps_is_not_back_to_back(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T09:30"),
            ("2024-01-01T09:35", "2024-01-01T10:05"),
            ("2024-01-01T10:10", "2024-01-01T10:40"),
            ("2024-01-01T10:45", "2024-01-01T11:15"),
        )

        assert "Back-to-Back Meetings" not in titles(insights_for(events))

    def test_long_average_duration(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:30"),
            ("2024-01-02T09:00", "2024-01-02T10:30"),
        )

        result = insights_for(events)

        long_duration = next(i for i in result["insights"] if i["title"] == "Long Average Meeting Duration")
        assert long_duration["type"] == "suggestion"
        assert long_duration["priority"] == "low"
        assert "Your average meeting is 90 minutes" in long_duration["description"]
        assert "2 of your meetings ran longer than 60 minutes" in long_duration["description"]
        assert "Experiment with shorter default meeting durations" in result["recommendations"]

    def test_exactly_one_hour_average_is_not_long(self, meetings):
        events = meetings(("2024-01-01T09:00", "2024-01-01T10:00"))

        assert "Long Average Meeting Duration" not in titles(insights_for(events))

    def test_high_meeting_day(self, meetings):
        events = meetings(*[(f"2024-01-01T{h:02d}:00", f"2024-01-01T{h:02d}:30") for h in range(9, 15)])

        result = insights_for(events)

        high = next(i for i in result["insights"] if i["title"] == "Multiple High-Meeting Days")
        assert high["description"] == "You have 1 day(s) with 6+ meetings, which can be overwhelming."
        assert result["patterns"]["meetingOverload"] is False
        assert result["patterns"]["workLifeBalance"] == "moderate"

    def test_average_divides_by_days_with_meetings(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:00"),
            ("2024-01-01T11:00", "2024-01-01T12:00"),
            ("2024-01-03T09:00", "2024-01-03T10:00"),
        )

        result = insights_for(events, "2024-01-01", "2024-01-07")

        assert result["patterns"]["averageMeetingsPerDay"] == 1.5
        assert result["patterns"]["busiestDay"] == {"date": "2024-01-01", "count": 2}

    def test_recommendations_are_unique(self, meetings):
        metadata = {
            "dateRange": {"start": "2024-01-01", "end": "2024-01-01"},
            "totalEvents": 8,
            "totalDuration": 2400,
            "averageDuration": 300,
            "eventsPerDay": {"2024-01-01": 8},
            "gaps": [
                {"start": "a", "end": "b", "durationMinutes": 5},
                {"start": "c", "end": "d", "durationMinutes": 5},
                {"start": "e", "end": "f", "durationMinutes": 5},
                {"start": "g", "end": "h", "durationMinutes": 5},
            ],
            "averageGap": 5,
            "totalMeetingHours": 40,
        }

        result = generate_insights([], metadata)

        assert len(result["recommendations"]) == len(set(result["recommendations"]))
        assert result["patterns"]["workLifeBalance"] == "poor"
        assert titles(result) == [
            "High Meeting Load Detected",
            "Busiest Day",
            "Limited Focus Time",
            "Back-to-Back Meetings",
            "Long Average Meeting Duration",
            "Multiple High-Meeting Days",
        ]

    def test_idempotent(self, sample_events):
        assert insights_for(sample_events) == insights_for(sample_events)


class TestHelpers:
    """Test cases for insight helpers"""

    @pytest.mark.parametrize(
        "hours, per_day, expected",
        [
            (36, 1, "poor"),
            (10, 7.5, "poor"),
            (26, 1, "moderate"),
            (10, 6, "moderate"),
            (35, 7, "moderate"),
            (25, 5, "good"),
            (0, 0, "good"),
        ],
    )
    def test_work_life_balance(self, hours, per_day, expected):
        assert classify_work_life_balance(hours, per_day) == expected

    def test_busiest_day_first_max_wins(self):
        busiest = find_busiest_day({"2024-01-01": 2, "2024-01-02": 3, "2024-01-03": 3})

        assert busiest == {"date": "2024-01-02", "count": 3}

    def test_busiest_day_empty(self):
        assert find_busiest_day({}) == {"date": "", "count": 0}

    def test_format_day_display(self):
        assert format_day_display("2024-03-05") == "Tuesday, Mar 5"
