from __future__ import annotations

from ..calculation import calculate_work_minutes
from ..model import AttendanceRecord
from .base import WorkedMinutesCalculator


class StandardWorkedMinutesCalculator(WorkedMinutesCalculator):
    """Trust stored totals; fall back to (out - in) - breaks when they are missing."""

    def worked_minutes(self, record: AttendanceRecord) -> int:
        stored = int(record.total_worked_minutes or 0)
        if stored > 0:
            return stored
        return calculate_work_minutes(record.clock_in, record.clock_out, record.break_sessions).work_minutes

    def break_minutes(self, record: AttendanceRecord) -> int:
        stored = int(record.total_break_minutes or 0)
        if stored > 0:
            return stored
        return calculate_work_minutes(record.clock_in, record.clock_out, record.break_sessions).break_minutes


class StoredTotalsCalculator(WorkedMinutesCalculator):
    """Use only what the capture layer persisted; missing totals count as 0."""

    def worked_minutes(self, record: AttendanceRecord) -> int:
        return max(0, int(record.total_worked_minutes or 0))

    def break_minutes(self, record: AttendanceRecord) -> int:
        return max(0, int(record.total_break_minutes or 0))
