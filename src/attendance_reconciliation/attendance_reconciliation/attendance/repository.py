from __future__ import annotations

from datetime import date
from typing import Any, Protocol, Sequence


class AttendanceRepository(Protocol):
    def list_for_employee(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[Any]:
        """Raw records as persisted by the capture subsystem, in any date encoding."""

        raise NotImplementedError
