"""Common time helpers shared across models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def now_ms() -> int:
    """Current time as epoch milliseconds, the cache timestamp unit."""
    return int(utc_now().timestamp() * 1000)


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp as supplied by the server, or None."""
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
