"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(os.environ.get("CALENDAR_DB_PATH", PROJECT_ROOT / "data" / "db" / "calendar-insights.db"))

# =============================================================================
# ANALYSIS CONFIGURATION
# =============================================================================

DEFAULT_RANGE_DAYS = 7  # Used when a request omits startDate/endDate

# Meeting overload
OVERLOAD_MEETINGS_PER_DAY = 6
OVERLOAD_MEETING_HOURS = 30

# Work-life balance
POOR_BALANCE_HOURS = 35
POOR_BALANCE_MEETINGS_PER_DAY = 7
MODERATE_BALANCE_HOURS = 25
MODERATE_BALANCE_MEETINGS_PER_DAY = 5

# Gaps (minutes)
FOCUS_GAP_MINUTES = 60
SHORT_GAP_MINUTES = 15
MIN_AVERAGE_GAP_MINUTES = 30
BACK_TO_BACK_THRESHOLD = 3  # More than this many short gaps triggers a warning

# Meetings
LONG_MEETING_MINUTES = 60
HIGH_LOAD_DAY_MEETINGS = 6

# =============================================================================
# TEST EVENT GENERATION
# =============================================================================

MAX_GENERATE_RANGE_DAYS = 30
PREVIEW_LIMIT = 10
BULK_CREATE_DELAY_SECONDS = 0.1
WORK_START_HOUR = 9
WORK_END_HOUR = 17

# =============================================================================
# MS GRAPH CREDENTIALS (from environment)
# =============================================================================

GRAPH_TENANT_ID = os.environ.get("MICROSOFT_GRAPH_TENANT_ID", "")
GRAPH_APP_ID = os.environ.get("MICROSOFT_GRAPH_APP_ID", "")
GRAPH_CLIENT_SECRET = os.environ.get("MICROSOFT_GRAPH_CLIENT_SECRET", "")
GRAPH_USER_ID = os.environ.get("MICROSOFT_GRAPH_USER_ID", "")  # Mailbox whose calendar is analyzed

# =============================================================================
# API CONFIGURATION
# =============================================================================

CALENDAR_API_KEY = os.environ.get("CALENDAR_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"


def graph_configured() -> bool:
    """True when every Graph credential needed for calendar access is set."""
    return all([GRAPH_TENANT_ID, GRAPH_APP_ID, GRAPH_CLIENT_SECRET, GRAPH_USER_ID])
