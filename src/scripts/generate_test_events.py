#!/usr/bin/env python3
"""
Generate synthetic meetings and add them to the configured MS365 calendar.

Usage:
    uv run python src/scripts/generate_test_events.py --start 2025-11-03 --end 2025-11-07
    uv run python src/scripts/generate_test_events.py --start 2025-11-03 --realistic --dry-run
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.calendar import create_calendar_events_bulk
from services.generator import GeneratorConfig, generate_events, generate_realistic_week


async def main(args: argparse.Namespace):
    """Main entry point."""
    rng = random.Random(args.seed)

    if args.realistic:
        events = generate_realistic_week(args.start, args.time_zone, rng=rng)
    else:
        config = GeneratorConfig(
            start_date=args.start,
            end_date=args.end or args.start,
            events_per_day=args.events_per_day,
            min_duration=args.min_duration,
            max_duration=args.max_duration,
            time_zone=args.time_zone,
        )
        events = generate_events(config, rng=rng)

    print(f"Generated {len(events)} events")
    for i, event in enumerate(events, 1):
        print(f"  [{i}] {event['start']['dateTime']} - {event['end']['dateTime']}  {event['subject']}")

    if args.dry_run or not events:
        return

    print(f"\nAdding {len(events)} events to calendar...")
    result = await create_calendar_events_bulk(events)
    for error in result["errors"]:
        print(f"  ERROR: {error['event']} - {error['error']}")

    print(f"\nComplete! Added {result['created']} events, {result['failed']} errors")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate test calendar events")
    parser.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", help="Last day (YYYY-MM-DD). Defaults to --start.")
    parser.add_argument("--events-per-day", type=int, default=3)
    parser.add_argument("--min-duration", type=int, default=30, help="Minutes")
    parser.add_argument("--max-duration", type=int, default=60, help="Minutes")
    parser.add_argument("--time-zone", default="UTC")
    parser.add_argument("--realistic", action="store_true", help="Generate a realistic working week")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument("--dry-run", action="store_true", help="Print events without creating them")
    args = parser.parse_args()

    try:
        asyncio.run(main(args))
    except ValueError as e:
        parser.error(str(e))
