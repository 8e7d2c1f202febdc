"""
Synthetic calendar events for populating a test calendar.
"""

import math
import random
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from faker import Faker

from core.config import WORK_END_HOUR, WORK_START_HOUR
from core.validation import parse_date, validate_generation_range
from models.events import SyntheticEvent

fake = Faker()

MEETING_SUBJECTS = [
    "Team Standup",
    "Project Review",
    "Client Meeting",
    "Sprint Planning",
    "Code Review",
    "Design Discussion",
    "One-on-One",
    "Product Demo",
    "Strategy Session",
    "Weekly Sync",
    "Retrospective",
    "Training Session",
    "Workshop",
    "Interview",
    "Budget Review",
    "Status Update",
    "Brainstorming",
    "Technical Deep Dive",
    "Architecture Review",
    "Performance Review",
]

SUBJECT_SUFFIXES = [
    "Q1 Planning",
    "2024",
    "Review",
    "Follow-up",
    "Part 1",
    "Part 2",
    "Final",
    "Initial",
]

# Random gap left after each meeting (minutes)
MIN_BREAK_MINUTES = 15
MAX_BREAK_MINUTES = 60

MAX_EVENTS_PER_DAY = 20


@dataclass
class GeneratorConfig:
    """Options for generate_events (dates are YYYY-MM-DD, durations in minutes)."""

    start_date: str
    end_date: str
    events_per_day: int = 3
    min_duration: int = 30
    max_duration: int = 60
    time_zone: str = "UTC"


def get_zone(time_zone: str) -> ZoneInfo:
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown time zone '{time_zone}'")


def validate_config(config: GeneratorConfig) -> tuple[date, date]:
    """
    Check generator options and return the parsed date range.

    Raises:
        ValueError: describing the first invalid option
    """
    start = parse_date(config.start_date, "startDate")
    end = parse_date(config.end_date, "endDate")
    validate_generation_range(start, end)

    if not 1 <= config.events_per_day <= MAX_EVENTS_PER_DAY:
        raise ValueError(f"eventsPerDay must be between 1 and {MAX_EVENTS_PER_DAY}")
    if config.min_duration <= 0:
        raise ValueError("minDuration must be positive")
    if config.max_duration < config.min_duration:
        raise ValueError("maxDuration must not be less than minDuration")

    get_zone(config.time_zone)
    return start, end


def body_sentence(rng: random.Random) -> str:
    """Faker sentence drawn from a seed taken from rng, so seeded runs repeat."""
    fake.seed_instance(rng.getrandbits(32))
    return fake.sentence(nb_words=6)


def format_wall_time(day: date, hour: float) -> str:
    """Wall-clock ISO string for a fractional hour of a day (seconds dropped)."""
    hours = math.floor(hour)
    minutes = math.floor((hour - hours) * 60)
    return datetime.combine(day, time(hours, minutes)).isoformat()


def generate_day_events(
    day: date,
    count: int,
    min_duration: float,
    max_duration: float,
    time_zone: str,
    rng: random.Random,
) -> list[SyntheticEvent]:
    """
    Lay out up to `count` meetings inside working hours for one day.

    Start times are random but never overlap: each meeting starts no earlier
    than the previous one's end plus a random break. Meetings that would run
    past the end of the working day are dropped.
    """
    available_hours = WORK_END_HOUR - WORK_START_HOUR
    time_slots = sorted(WORK_START_HOUR + rng.random() * available_hours for _ in range(count))

    events: list[SyntheticEvent] = []
    last_end_hour = float(WORK_START_HOUR)

    for slot in time_slots:
        start_hour = max(slot, last_end_hour)
        duration = min_duration + rng.random() * (max_duration - min_duration)
        end_hour = start_hour + duration / 60

        if end_hour > WORK_END_HOUR:
            continue

        subject = f"{rng.choice(MEETING_SUBJECTS)} - {rng.choice(SUBJECT_SUFFIXES)}"
        events.append(
            {
                "subject": subject,
                "start": {"dateTime": format_wall_time(day, start_hour), "timeZone": time_zone},
                "end": {"dateTime": format_wall_time(day, end_hour), "timeZone": time_zone},
                "body": {
                    "contentType": "HTML",
                    "content": f"<p>Test event generated for calendar analysis. {body_sentence(rng)}</p>",
                },
            }
        )

        gap = MIN_BREAK_MINUTES + rng.random() * (MAX_BREAK_MINUTES - MIN_BREAK_MINUTES)
        last_end_hour = end_hour + gap / 60

    return events


def generate_events(config: GeneratorConfig, rng: random.Random | None = None) -> list[SyntheticEvent]:
    """Generate events for every day of the configured range (weekends included)."""
    rng = rng or random.Random()
    start, end = validate_config(config)

    events: list[SyntheticEvent] = []
    current = start
    while current <= end:
        events.extend(
            generate_day_events(
                current,
                config.events_per_day,
                config.min_duration,
                config.max_duration,
                config.time_zone,
                rng,
            )
        )
        current += timedelta(days=1)

    return events


def generate_realistic_week(
    start_date: str, time_zone: str = "UTC", rng: random.Random | None = None
) -> list[SyntheticEvent]:
    """
    Generate a working week of meetings starting at start_date.

    Weekends are skipped. The third and fifth days of the window get five
    meetings, other weekdays between two and five, each 30 to 90 minutes.
    """
    rng = rng or random.Random()
    start = parse_date(start_date, "startDate")
    get_zone(time_zone)

    events: list[SyntheticEvent] = []
    for offset in range(7):
        current = start + timedelta(days=offset)
        if current.weekday() >= 5:
            continue

        meetings = 5 if offset in (2, 4) else 2 + rng.randrange(4)
        events.extend(generate_day_events(current, meetings, 30, 90, time_zone, rng))

    return events
