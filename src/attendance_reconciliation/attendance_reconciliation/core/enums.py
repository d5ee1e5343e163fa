from __future__ import annotations

from enum import Enum


class DayClassification(str, Enum):
    """Calendar context of a date, independent of punches."""

    WORKING_DAY = "WORKING_DAY"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
    LEAVE = "LEAVE"


class DayStatus(str, Enum):
    """Authoritative status of one calendar day for one employee."""

    HOLIDAY = "holiday"
    WEEKEND = "weekend"
    LEAVE = "leave"
    PRESENT = "present"
    LATE = "late"
    HALF_DAY = "half_day"
    INCOMPLETE = "incomplete"
    ABSENT = "absent"
    FUTURE = "future"


class HalfDayType(str, Enum):
    FULL_DAY = "full_day"
    FIRST_HALF = "first_half"
    SECOND_HALF = "second_half"


class AttendanceState(str, Enum):
    """Live state of a day that is still being captured."""

    NOT_CLOCKED_IN = "not_clocked_in"
    WORKING = "working"
    ON_BREAK = "on_break"
    CLOCKED_OUT = "clocked_out"


class LateStatusMode(str, Enum):
    """How late arrival shows up on a present day.

    FLAG keeps the day ``present`` with ``is_late`` set; BUCKET reports it
    under the separate ``late`` status.
    """

    FLAG = "flag"
    BUCKET = "bucket"


class WarningCode(str, Enum):
    MALFORMED_DATE = "MALFORMED_DATE"
    AMBIGUOUS_MATCH = "AMBIGUOUS_MATCH"
    IMPLAUSIBLE_DURATION = "IMPLAUSIBLE_DURATION"
    INCONSISTENT_COUNTS = "INCONSISTENT_COUNTS"
