"""
Data models for calendar events and analysis results.

Using TypedDict so every record stays a plain, JSON-serializable dict.
Keys keep the camelCase names the dashboard consumes.
"""

from typing import Literal, NotRequired, TypedDict


class DateTimeTimeZone(TypedDict):
    """Instant plus informational timezone label."""
    dateTime: str
    timeZone: str


class EmailAddress(TypedDict):
    name: str
    address: str


class Participant(TypedDict):
    emailAddress: EmailAddress


class CalendarEvent(TypedDict):
    """Calendar event as fetched from MS Graph."""
    id: str
    subject: str
    start: DateTimeTimeZone | None
    end: DateTimeTimeZone | None
    isAllDay: NotRequired[bool]
    organizer: NotRequired[Participant | None]
    attendees: NotRequired[list[Participant]]


class Gap(TypedDict):
    """Free interval between two adjacent events."""
    start: str
    end: str
    durationMinutes: int


class DateRange(TypedDict):
    start: str
    end: str


class RangeMetadata(TypedDict):
    """Aggregate statistics for a whole date range."""
    dateRange: DateRange
    totalEvents: int
    totalDuration: int  # minutes
    averageDuration: float  # minutes
    eventsPerDay: dict[str, int]
    gaps: list[Gap]
    averageGap: float  # minutes
    totalMeetingHours: float


class DailyMetric(TypedDict):
    """Metrics for a single calendar day."""
    date: str
    meetingCount: int
    meetingHours: float
    totalDuration: int  # minutes
    averageDuration: float  # minutes
    averageGap: float  # minutes
    longestGap: int  # minutes
    shortestGap: int  # minutes


class DayCount(TypedDict):
    date: str
    count: int


class TimeSeriesSummary(TypedDict):
    totalDays: int
    averageMeetingsPerDay: float
    averageHoursPerDay: float
    peakDay: DayCount
    quietestDay: DayCount


class TimeSeriesData(TypedDict):
    metrics: list[DailyMetric]
    summary: TimeSeriesSummary


InsightType = Literal["warning", "suggestion", "info", "success"]
Priority = Literal["high", "medium", "low"]
WorkLifeBalance = Literal["good", "moderate", "poor"]


class Insight(TypedDict):
    type: InsightType
    title: str
    description: str
    priority: Priority
    actionable: NotRequired[str]


class CalendarPatterns(TypedDict):
    busiestDay: DayCount
    averageMeetingsPerDay: float
    meetingOverload: bool
    focusTimeAvailable: bool
    workLifeBalance: WorkLifeBalance


class CalendarInsights(TypedDict):
    insights: list[Insight]
    patterns: CalendarPatterns
    recommendations: list[str]


class ItemBody(TypedDict):
    contentType: str
    content: str


class SyntheticEvent(TypedDict):
    """Synthetic event ready to be posted to a calendar."""
    subject: str
    start: DateTimeTimeZone
    end: DateTimeTimeZone
    body: ItemBody


class BulkCreateResult(TypedDict):
    created: int
    failed: int
    errors: list[dict]
