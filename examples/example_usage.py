"""Example: monthly summary with in-memory repositories (no database).

The host application normally supplies repositories backed by its own storage.
"""

from datetime import date

from attendance_reconciliation.calendars.model import Holiday
from attendance_reconciliation.main import bootstrap


class MemoryHolidays:
    def list_range(self, *, start, end):
        return [Holiday(holiday_date=date(2026, 1, 26), name="Republic Day")]


class MemoryLeaves:
    def list_for_employee(self, *, employee_id, start, end):
        return []


class MemoryAttendance:
    def list_for_employee(self, *, employee_id, start_date, end_date):
        return [
            {"date": "2026-01-21", "clockIn": "2026-01-21T09:25:00", "clockOut": "2026-01-21T17:30:00"},
            {"date": "2026-01-22", "clockIn": "2026-01-22T09:00:00"},
        ]


class MemoryShifts:
    def get_default(self):
        return None

    def get_for_employee_and_date(self, *, employee_id, work_date):
        return None


def main():
    container = bootstrap(
        holidays_repo=MemoryHolidays(),
        leaves_repo=MemoryLeaves(),
        attendance_repo=MemoryAttendance(),
        shifts_repo=MemoryShifts(),
    )
    summary = container.period_report_service.monthly_summary(employee_id=1, year=2026, month=1)
    print(summary.as_dict())


if __name__ == "__main__":
    main()
