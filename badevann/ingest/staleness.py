"""Staleness checks for the cached temperature snapshot."""

from badevann.models.common import now_ms


def cache_age_minutes(timestamp_ms: int, now: int | None = None) -> float:
    """Age of a snapshot in minutes."""
    if now is None:
        now = now_ms()
    return (now - timestamp_ms) / 60000


def is_cache_stale(timestamp_ms: int, timeout_minutes: int, now: int | None = None) -> bool:
    """Check whether a snapshot is too old to reuse.

    A timeout of 0 disables caching, so everything is stale. A snapshot
    exactly ``timeout_minutes`` old is stale.
    """
    if timeout_minutes <= 0:
        return True
    if now is None:
        now = now_ms()
    return now - timestamp_ms >= timeout_minutes * 60000
