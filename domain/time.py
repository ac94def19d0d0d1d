"""
Domain time utilities (pure).

Centralized timestamp validation and formatting helpers.

Behavior and error messages must remain consistent across the domain model.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

# Fixed-width compact stamp used in sale identifiers (yyyyMMddHHmmssSSS).
_COMPACT_FORMAT: str = "%Y%m%d%H%M%S"

# Human-readable stamp used on receipts (dd-MM-yyyy HH:mm:ss).
_DISPLAY_FORMAT: str = "%d-%m-%Y %H:%M:%S"


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Enforces the requirement that timestamps are UTC.

    Invariants:
    - Timestamps must be timezone-aware.
    - Timestamps must have UTC offset 0.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""

    return datetime.now(timezone.utc)


def compact_millis(value: datetime) -> str:
    """
    Format a UTC timestamp as yyyyMMddHHmmssSSS (17 digits, no separators).
    """

    require_utc_timestamp("value", value)
    return value.strftime(_COMPACT_FORMAT) + f"{value.microsecond // 1000:03d}"


def display_timestamp(value: datetime) -> str:
    """Format a timestamp as dd-MM-yyyy HH:mm:ss."""

    return value.strftime(_DISPLAY_FORMAT)
