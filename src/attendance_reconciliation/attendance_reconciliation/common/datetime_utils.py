from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Iterator, Mapping, Optional

from ..core.exceptions import MalformedDateError

_DATE_PREFIX = re.compile(r"^\s*(\d{4})-(\d{2})-(\d{2})")
_EMBEDDED_DATE_KEYS = ("date", "$date", "value")
# Numbers above this are epoch milliseconds rather than seconds.
_EPOCH_MS_CUTOFF = 10**11


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def _from_epoch(value: float) -> datetime:
    seconds = value / 1000 if abs(value) >= _EPOCH_MS_CUTOFF else value
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)


def to_date(value: Any) -> date:
    """Read a calendar date out of any encoding the capture layer produces.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings, ISO datetime
    strings (time-of-day and offset are ignored, the written calendar date is
    kept), epoch seconds/milliseconds and embedded objects such as
    ``{"date": "2026-01-21"}`` or ``{"$date": ...}``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, Mapping):
        for key in _EMBEDDED_DATE_KEYS:
            if key in value:
                return to_date(value[key])
        raise MalformedDateError(f"no date field in {value!r}")
    if isinstance(value, bool):
        raise MalformedDateError(f"not a date: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return _from_epoch(float(value)).date()
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedDateError(f"epoch out of range: {value!r}") from exc
    if isinstance(value, str):
        m = _DATE_PREFIX.match(value)
        if not m:
            raise MalformedDateError(f"not a date: {value!r}")
        try:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError as exc:
            raise MalformedDateError(f"not a date: {value!r}") from exc
    raise MalformedDateError(f"unsupported date type: {type(value).__name__}")


def date_key(value: Any) -> str:
    """Canonical ``YYYY-MM-DD`` key for a date in any supported encoding."""
    return to_date(value).strftime("%Y-%m-%d")


def to_naive_datetime(value: Any) -> Optional[datetime]:
    """Read a punch timestamp; timezone-aware values keep their wall time."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, Mapping):
        for key in _EMBEDDED_DATE_KEYS:
            if key in value:
                return to_naive_datetime(value[key])
        raise MalformedDateError(f"no timestamp field in {value!r}")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return _from_epoch(float(value))
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedDateError(f"epoch out of range: {value!r}") from exc
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).replace(tzinfo=None)
        except ValueError as exc:
            raise MalformedDateError(f"not a timestamp: {value!r}") from exc
    raise MalformedDateError(f"unsupported timestamp type: {type(value).__name__}")


def parse_time_of_day(value: Any) -> time:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a time."""
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if isinstance(value, str):
        for fmt in ("%H:%M:%S", "%H:%M"):
            try:
                return datetime.strptime(value.strip(), fmt).time()
            except ValueError:
                continue
    raise MalformedDateError(f"not a time of day: {value!r}")


def weekday_index(d: date) -> int:
    """Weekday with 0 = Sunday ... 6 = Saturday."""
    return (d.weekday() + 1) % 7


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Inclusive day-by-day range; empty when end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def month_dates(year: int, month: int) -> list[date]:
    start, end = month_bounds(year, month)
    return list(iter_dates(start, end))


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end (negative when end is earlier)."""
    return int((end - start).total_seconds() // 60)
