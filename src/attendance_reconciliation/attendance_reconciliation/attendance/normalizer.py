from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_date, to_naive_datetime
from ..core.exceptions import MalformedDateError
from .calculation import normalize_break_sessions
from .model import AttendanceRecord, BreakSession

logger = logging.getLogger(__name__)

_DATE_FIELDS = ("date", "attendanceDate", "attendance_date", "work_date", "workDate")
_CLOCK_IN_FIELDS = ("clockIn", "clock_in", "check_in_time")
_CLOCK_OUT_FIELDS = ("clockOut", "clock_out", "check_out_time")


def _first(raw: Mapping[str, Any], names) -> Any:
    for name in names:
        if name in raw and raw[name] is not None:
            return raw[name]
    return None


def _int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return max(0, int(float(value)))
    except (TypeError, ValueError):
        return 0


def _timestamp(value: Any, field_name: str) -> Optional[datetime]:
    try:
        return to_naive_datetime(value)
    except MalformedDateError:
        logger.warning("attendance_timestamp_malformed", extra={"field": field_name, "raw": str(value)[:100]})
        return None


def _break_session(raw: Any) -> Optional[BreakSession]:
    if isinstance(raw, BreakSession):
        return raw
    if not isinstance(raw, Mapping):
        return None
    return BreakSession(
        start=_timestamp(_first(raw, ("breakIn", "break_in", "start")), "breakIn"),
        end=_timestamp(_first(raw, ("breakOut", "break_out", "end")), "breakOut"),
        duration_minutes=_int(_first(raw, ("durationMinutes", "duration_minutes", "duration", "totalBreakMinutes"))),
    )


def record_date_value(raw: Any) -> Any:
    if isinstance(raw, AttendanceRecord):
        return raw.date
    if isinstance(raw, Mapping):
        return _first(raw, _DATE_FIELDS)
    return getattr(raw, "date", None)


def normalize_record(raw: Any) -> AttendanceRecord:
    """Convert a capture-layer record into an AttendanceRecord.

    Raises MalformedDateError when the record date cannot be read; every other
    bad field degrades to ``None`` or ``0``.
    """
    if isinstance(raw, AttendanceRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedDateError(f"unsupported attendance record: {type(raw).__name__}")

    work_date = to_date(record_date_value(raw))
    sessions = [_break_session(s) for s in normalize_break_sessions(_first(raw, ("breakSessions", "break_sessions")))]
    employee_id = _first(raw, ("employeeId", "employee_id", "user_id"))

    return AttendanceRecord(
        employee_id=int(employee_id) if isinstance(employee_id, (int, str)) and str(employee_id).isdigit() else None,
        date=work_date,
        clock_in=_timestamp(_first(raw, _CLOCK_IN_FIELDS), "clockIn"),
        clock_out=_timestamp(_first(raw, _CLOCK_OUT_FIELDS), "clockOut"),
        break_sessions=tuple(s for s in sessions if s is not None),
        total_worked_minutes=_int(_first(raw, ("totalWorkedMinutes", "total_worked_minutes"))),
        total_break_minutes=_int(_first(raw, ("totalBreakMinutes", "total_break_minutes", "break_minutes"))),
        work_mode=_first(raw, ("workMode", "work_mode")),
    )
