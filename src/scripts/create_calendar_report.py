#!/usr/bin/env python3
"""
Print calendar statistics, daily metrics and insights for a date range.

Fetches events from the configured MS365 calendar, runs the range,
time series and insight analyses, and prints a summary.

Usage:
    uv run python src/scripts/create_calendar_report.py --start 2025-11-03 --end 2025-11-07
    uv run python src/scripts/create_calendar_report.py --json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.validation import resolve_date_range
from services.analyzer import analyze_range
from services.calendar import fetch_calendar_events
from services.insights import generate_insights
from services.timeseries import analyze_time_series


def print_report(metadata: dict, time_series: dict, insights: dict):
    """Print a human-readable report."""
    date_range = metadata["dateRange"]
    print(f"\nCalendar report {date_range['start']} to {date_range['end']}")
    print("=" * 60)

    print(f"Meetings:            {metadata['totalEvents']}")
    print(f"Meeting hours:       {metadata['totalMeetingHours']}")
    print(f"Average duration:    {metadata['averageDuration']} min")
    print(f"Average gap:         {metadata['averageGap']} min ({len(metadata['gaps'])} gaps)")

    summary = time_series["summary"]
    print(f"Meetings per day:    {summary['averageMeetingsPerDay']} (over {summary['totalDays']} days)")
    print(f"Hours per day:       {summary['averageHoursPerDay']}")
    if summary["peakDay"]["date"]:
        print(f"Peak day:            {summary['peakDay']['date']} ({summary['peakDay']['count']} meetings)")
    print(f"Quietest day:        {summary['quietestDay']['date']} ({summary['quietestDay']['count']} meetings)")

    print("\nDaily:")
    for metric in time_series["metrics"]:
        bar = "#" * metric["meetingCount"]
        print(f"  {metric['date']}  {metric['meetingCount']:>3}  {metric['meetingHours']:>6.2f}h  {bar}")

    patterns = insights["patterns"]
    print(f"\nWork-life balance:   {patterns['workLifeBalance']}")
    print("\nInsights:")
    for insight in insights["insights"]:
        print(f"  [{insight['priority'].upper()}] {insight['title']}: {insight['description']}")

    if insights["recommendations"]:
        print("\nRecommendations:")
        for recommendation in insights["recommendations"]:
            print(f"  - {recommendation}")


async def main(start_str: str | None, end_str: str | None, as_json: bool = False):
    """Main entry point."""
    start_date, end_date = resolve_date_range(start_str, end_str)
    if not as_json:
        print(f"Fetching events for {start_date} to {end_date}...")

    events = await fetch_calendar_events(start_date, end_date)
    if not as_json:
        print(f"Found {len(events)} events")

    start, end = start_date.isoformat(), end_date.isoformat()
    metadata = analyze_range(events, start, end)
    time_series = analyze_time_series(events, start, end)
    insights = generate_insights(events, metadata)

    if as_json:
        print(json.dumps({"metadata": metadata, "timeSeries": time_series, "insights": insights}, indent=2))
    else:
        print_report(metadata, time_series, insights)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print calendar analytics for a date range")
    parser.add_argument("--start", help="Start date (YYYY-MM-DD). Defaults to 7 days ago.")
    parser.add_argument("--end", help="End date (YYYY-MM-DD). Defaults to today.")
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of a summary")
    args = parser.parse_args()

    try:
        asyncio.run(main(args.start, args.end, args.json))
    except ValueError as e:
        parser.error(str(e))
