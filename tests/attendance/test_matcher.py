from __future__ import annotations

from datetime import date, datetime

from attendance_reconciliation.attendance.matcher import AttendanceMatcher, match_record
from attendance_reconciliation.attendance.model import AttendanceRecord
from attendance_reconciliation.core.enums import WarningCode


def test_matcher_normalizes_mixed_date_encodings():
    records = [
        {"date": "2026-01-21", "clockIn": "2026-01-21T09:00:00"},
        {"attendanceDate": "2026-01-22T23:30:00-05:00", "clockIn": "2026-01-22T09:00:00Z"},
        {"date": {"$date": "2026-01-23T00:00:00.000Z"}},
        {"date": date(2026, 1, 24)},
        {"date": datetime(2026, 1, 25, 8, 0)},
        {"date": 1769428800000},
    ]

    matcher = AttendanceMatcher(records)

    assert len(matcher) == 6
    for day in range(21, 27):
        found = matcher.find(date(2026, 1, day))
        assert found is not None
        assert found.date == date(2026, 1, day)
    assert matcher.warnings == ()


def test_matcher_lookup_accepts_string_keys():
    matcher = AttendanceMatcher([{"date": "2026-01-21"}])

    assert matcher.find("2026-01-21T18:00:00") is not None
    assert matcher.find("garbage") is None
    assert matcher.find(date(2026, 1, 22)) is None


def test_matcher_skips_malformed_dates_with_warning():
    matcher = AttendanceMatcher([{"date": "21/01/2026"}, {"date": None}, {"date": "2026-01-21"}])

    assert len(matcher) == 1
    codes = [w.code for w in matcher.warnings]
    assert codes == [WarningCode.MALFORMED_DATE, WarningCode.MALFORMED_DATE]


def test_matcher_keeps_first_record_on_duplicate_date():
    first = {"date": "2026-01-21", "totalWorkedMinutes": 480}
    second = {"date": "2026-01-21T00:00:00Z", "totalWorkedMinutes": 120}

    matcher = AttendanceMatcher([first, second])

    assert matcher.find(date(2026, 1, 21)).total_worked_minutes == 480
    assert len(matcher.warnings) == 1
    assert matcher.warnings[0].code == WarningCode.AMBIGUOUS_MATCH
    assert matcher.warnings[0].date == date(2026, 1, 21)


def test_matcher_accepts_domain_records():
    rec = AttendanceRecord(employee_id=1, date=date(2026, 1, 21))

    assert AttendanceMatcher([rec]).find(date(2026, 1, 21)) is rec


def test_match_record_linear_scan():
    records = [{"date": "bad"}, {"date": "2026-01-20"}, {"date": "2026-01-21T10:00:00", "workMode": "remote"}]

    found = match_record(date(2026, 1, 21), records)

    assert found is not None
    assert found.work_mode == "remote"
    assert match_record(date(2026, 1, 22), records) is None


def test_normalized_record_reads_break_sessions_json():
    raw = {
        "date": "2026-01-21",
        "employeeId": "12",
        "clockIn": "2026-01-21T09:00:00+05:30",
        "clockOut": "2026-01-21T17:30:00+05:30",
        "breakSessions": '[{"breakIn": "2026-01-21T12:00:00", "breakOut": "2026-01-21T12:30:00"}]',
        "totalWorkedMinutes": "480",
    }

    rec = AttendanceMatcher([raw]).find(date(2026, 1, 21))

    assert rec.employee_id == 12
    assert rec.clock_in == datetime(2026, 1, 21, 9, 0)
    assert len(rec.break_sessions) == 1
    assert rec.total_worked_minutes == 480


def test_matcher_records_sorted_by_date():
    matcher = AttendanceMatcher([{"date": "2026-01-23"}, {"date": "2026-01-21"}, {"date": "2026-01-22"}])

    assert [r.date.day for r in matcher.records()] == [21, 22, 23]
