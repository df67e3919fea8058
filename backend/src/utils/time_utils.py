"""
Timestamp helpers.

Timestamps double as sort keys, so every one of them is rendered in the same
fixed-width shape: UTC, millisecond precision, "Z" suffix
(e.g. 2025-01-27T12:00:00.123Z). String order then equals time order.
"""

from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as a fixed-width UTC ISO-8601 string."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp produced by format_timestamp back into an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
