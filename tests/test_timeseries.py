"""
Tests for per-day time series metrics.
"""

from services.timeseries import analyze_time_series, date_sequence


class TestDateSequence:
    """Test cases for date_sequence"""

    def test_inclusive_range(self):
        assert date_sequence("2024-01-01", "2024-01-03") == ["2024-01-01", "2024-01-02", "2024-01-03"]

    def test_single_day(self):
        assert date_sequence("2024-01-01", "2024-01-01") == ["2024-01-01"]

    def test_crosses_leap_day(self):
        assert date_sequence("2024-02-28", "2024-03-01") == ["2024-02-28", "2024-02-29", "2024-03-01"]

    def test_start_after_end_is_empty(self):
        assert date_sequence("2024-01-05", "2024-01-01") == []


class TestAnalyzeTimeSeries:
    """Test cases for analyze_time_series"""

    def test_includes_days_without_events(self, meetings):
        events = meetings(
            ("2024-01-02T09:00", "2024-01-02T10:00"),
            ("2024-01-02T11:00", "2024-01-02T12:00"),
        )

        data = analyze_time_series(events, "2024-01-01", "2024-01-03")
        metrics = data["metrics"]

        assert len(metrics) == 3
        assert [m["date"] for m in metrics] == ["2024-01-01", "2024-01-02", "2024-01-03"]
        assert [m["meetingCount"] for m in metrics] == [0, 2, 0]
        assert data["summary"]["peakDay"] == {"date": "2024-01-02", "count": 2}
        assert data["summary"]["quietestDay"] == {"date": "2024-01-01", "count": 0}

    def test_empty_day_metric_is_all_zero(self):
        data = analyze_time_series([], "2024-01-01", "2024-01-01")

        assert data["metrics"] == [
            {
                "date": "2024-01-01",
                "meetingCount": 0,
                "meetingHours": 0,
                "totalDuration": 0,
                "averageDuration": 0,
                "averageGap": 0,
                "longestGap": 0,
                "shortestGap": 0,
            }
        ]

    def test_averages_include_empty_days(self, meetings):
        events = meetings(
            ("2024-01-02T09:00", "2024-01-02T10:00"),
            ("2024-01-02T11:00", "2024-01-02T12:00"),
        )

        summary = analyze_time_series(events, "2024-01-01", "2024-01-03")["summary"]

        assert summary["totalDays"] == 3
        assert summary["averageMeetingsPerDay"] == 0.67
        assert summary["averageHoursPerDay"] == 0.67

    def test_daily_gap_statistics(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:00"),
            ("2024-01-01T10:30", "2024-01-01T11:00"),
            ("2024-01-01T13:00", "2024-01-01T14:00"),
        )

        metric = analyze_time_series(events, "2024-01-01", "2024-01-01")["metrics"][0]

        assert metric["meetingCount"] == 3
        assert metric["totalDuration"] == 150
        assert metric["meetingHours"] == 2.5
        assert metric["averageDuration"] == 50
        assert metric["averageGap"] == 75
        assert metric["longestGap"] == 120
        assert metric["shortestGap"] == 30

    def test_gaps_do_not_cross_days(self, meetings):
        events = meetings(
            ("2024-01-01T16:00", "2024-01-01T17:00"),
            ("2024-01-02T09:00", "2024-01-02T10:00"),
        )

        metrics = analyze_time_series(events, "2024-01-01", "2024-01-02")["metrics"]

        assert [m["averageGap"] for m in metrics] == [0, 0]
        assert [m["longestGap"] for m in metrics] == [0, 0]

    def test_events_outside_range_are_ignored(self, meetings):
        events = meetings(
            ("2023-12-31T09:00", "2023-12-31T10:00"),
            ("2024-01-01T09:00", "2024-01-01T10:00"),
        )

        data = analyze_time_series(events, "2024-01-01", "2024-01-02")

        assert sum(m["meetingCount"] for m in data["metrics"]) == 1

    def test_peak_day_ties_go_to_earliest(self, meetings):
        events = meetings(
            ("2024-01-02T09:00", "2024-01-02T10:00"),
            ("2024-01-01T09:00", "2024-01-01T10:00"),
        )

        summary = analyze_time_series(events, "2024-01-01", "2024-01-02")["summary"]

        assert summary["peakDay"] == {"date": "2024-01-01", "count": 1}
        assert summary["quietestDay"] == {"date": "2024-01-01", "count": 1}

    def test_peak_and_quietest_bound_every_day(self, meetings):
        events = meetings(
            ("2024-01-01T09:00", "2024-01-01T10:00"),
            ("2024-01-02T09:00", "2024-01-02T10:00"),
            ("2024-01-02T11:00", "2024-01-02T12:00"),
            ("2024-01-02T13:00", "2024-01-02T14:00"),
            ("2024-01-04T09:00", "2024-01-04T10:00"),
            ("2024-01-04T11:00", "2024-01-04T12:00"),
        )

        data = analyze_time_series(events, "2024-01-01", "2024-01-04")
        counts = [m["meetingCount"] for m in data["metrics"]]

        assert counts == [1, 3, 0, 2]
        assert data["summary"]["peakDay"] == {"date": "2024-01-02", "count": 3}
        assert data["summary"]["quietestDay"] == {"date": "2024-01-03", "count": 0}
        assert all(data["summary"]["peakDay"]["count"] >= c for c in counts)
        assert all(data["summary"]["quietestDay"]["count"] <= c for c in counts)

    def test_no_events_defaults(self):
        summary = analyze_time_series([], "2024-01-01", "2024-01-03")["summary"]

        assert summary == {
            "totalDays": 3,
            "averageMeetingsPerDay": 0,
            "averageHoursPerDay": 0,
            "peakDay": {"date": "", "count": 0},
            "quietestDay": {"date": "2024-01-01", "count": 0},
        }

    def test_start_after_end_yields_empty_series(self, meetings):
        events = meetings(("2024-01-02T09:00", "2024-01-02T10:00"))

        data = analyze_time_series(events, "2024-01-05", "2024-01-01")

        assert data["metrics"] == []
        assert data["summary"]["totalDays"] == 0
        assert data["summary"]["quietestDay"] == {"date": "", "count": 0}

    def test_idempotent(self, sample_events):
        first = analyze_time_series(sample_events, "2024-01-01", "2024-01-02")
        second = analyze_time_series(sample_events, "2024-01-01", "2024-01-02")

        assert first == second
