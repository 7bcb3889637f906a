"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Normalize ``value`` so it is expressed in UTC.

    Naive values are assumed to already be UTC.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso8601(value: datetime) -> str:
    """Render ``value`` as an ISO-8601 UTC string with a ``Z`` suffix."""

    return ensure_utc(value).isoformat().replace("+00:00", "Z")


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO-8601 string produced by :func:`to_iso8601`.

    Raises ``ValueError`` when ``value`` is not a valid timestamp.
    """

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    return ensure_utc(datetime.fromisoformat(text))
