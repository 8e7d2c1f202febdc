"""SQLite request logging for API."""

import sqlite3
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fastapi import HTTPException, Request

from core.config import DB_PATH


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    started_at: float = field(default_factory=time.time, repr=False)
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    events_count: int | None = None
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)

    def finish(self, status_code: int) -> None:
        """Record the final status and elapsed time."""
        self.status_code = status_code
        self.processing_time_ms = int((time.time() - self.started_at) * 1000)

    def record_http_error(self, e: HTTPException) -> None:
        """Copy code, message and details from a structured HTTPException."""
        if isinstance(e.detail, dict):
            self.error_code = e.detail.get("code")
            self.error_message = e.detail.get("error")
            for detail in e.detail.get("details", []):
                self.details.append(("validation_error", detail))
        else:
            self.error_message = str(e.detail)
        self.finish(e.status_code)


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def log_request(log: RequestLog) -> None:
    """Write request log to SQLite database."""
    conn = sqlite3.connect(DB_PATH)
    try:
        cursor = conn.cursor()

        # Insert main request record
        cursor.execute(
            """
            INSERT INTO api_requests (
                request_id, timestamp, endpoint, method, client_ip,
                start_date, end_date, status_code, error_code, error_message,
                processing_time_ms, events_count
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                log.request_id,
                log.timestamp,
                log.endpoint,
                log.method,
                log.client_ip,
                log.start_date,
                log.end_date,
                log.status_code,
                log.error_code,
                log.error_message,
                log.processing_time_ms,
                log.events_count,
            ),
        )

        # Insert detail records
        for detail_type, message in log.details:
            cursor.execute(
                """
                INSERT INTO api_request_details (request_id, detail_type, message)
                VALUES (?, ?, ?)
            """,
                (log.request_id, detail_type, message),
            )

        conn.commit()
    finally:
        conn.close()


def safe_log_request(log: RequestLog) -> None:
    """Log a request without ever failing it."""
    try:
        log_request(log)
    except Exception:
        # Don't fail the request if logging fails
        pass
