"""
Date range validation shared by the API and scripts.
"""

from datetime import date, datetime, timedelta, timezone

from core.config import DEFAULT_RANGE_DAYS, MAX_GENERATE_RANGE_DAYS

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str, field_name: str = "date") -> date:
    """Parse a YYYY-MM-DD string, raising ValueError with a readable message."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError):
        raise ValueError(f"Invalid {field_name} '{value}'. Use YYYY-MM-DD")


def today_utc() -> date:
    """Current UTC calendar date."""
    return datetime.now(timezone.utc).date()


def resolve_date_range(
    start_str: str | None, end_str: str | None, default_days: int = DEFAULT_RANGE_DAYS
) -> tuple[date, date]:
    """
    Resolve an optional start/end pair into concrete dates.

    Both dates must be given together; when either is missing the range
    defaults to the last `default_days` days ending today.

    Raises:
        ValueError: if a date is malformed or start is after end
    """
    if start_str and end_str:
        start = parse_date(start_str, "startDate")
        end = parse_date(end_str, "endDate")
    else:
        end = today_utc()
        start = end - timedelta(days=default_days)

    if start > end:
        raise ValueError("Start date must be before end date")

    return start, end


def validate_generation_range(start: date, end: date) -> None:
    """Check a test-event generation window is ordered and not too long."""
    if start > end:
        raise ValueError("Start date must be before end date")
    if (end - start).days > MAX_GENERATE_RANGE_DAYS:
        raise ValueError(f"Date range cannot exceed {MAX_GENERATE_RANGE_DAYS} days")
