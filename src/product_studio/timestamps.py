"""ISO-8601 timestamp helpers shared by the API, composer and reports."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Return a UTC ISO-8601 string with millisecond precision and a ``Z`` suffix."""
    if moment is None:
        moment = utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis(moment: datetime | None = None) -> int:
    if moment is None:
        moment = utc_now()
    return int(moment.timestamp() * 1000)
