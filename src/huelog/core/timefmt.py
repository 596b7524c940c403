"""Timestamp layouts for rendered entries.

A layout is either one of the named layouts below or a ``strftime`` pattern.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Final, Union

RFC3339: Final = "RFC3339"
RFC3339_NANO: Final = "RFC3339Nano"
KITCHEN: Final = "Kitchen"

Timestamp = Union[datetime, float, int]


def _offset(dt: datetime) -> str:
    delta = dt.utcoffset() or timedelta(0)
    if not delta:
        return "Z"
    total = int(delta.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _rfc3339(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + _offset(dt)


def _rfc3339_nano(dt: datetime) -> str:
    frac = f"{dt.microsecond:06d}".rstrip("0")
    base = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if frac:
        base = f"{base}.{frac}"
    return base + _offset(dt)


def _kitchen(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d}{'PM' if dt.hour >= 12 else 'AM'}"


_NAMED: Final[dict[str, Callable[[datetime], str]]] = {
    RFC3339: _rfc3339,
    RFC3339_NANO: _rfc3339_nano,
    KITCHEN: _kitchen,
}


def to_datetime(ts: Timestamp) -> datetime:
    """Normalize a timestamp; POSIX numbers and naive datetimes are UTC."""
    if isinstance(ts, datetime):
        if ts.tzinfo is None:
            return ts.replace(tzinfo=timezone.utc)
        return ts
    return datetime.fromtimestamp(float(ts), tz=timezone.utc)


def format_time(ts: Timestamp, layout: str) -> str:
    dt = to_datetime(ts)
    named = _NAMED.get(layout)
    if named is not None:
        return named(dt)
    return dt.strftime(layout)
