from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Holiday, LeaveInterval


class HolidayRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        raise NotImplementedError


class LeaveRepository(Protocol):
    def list_for_employee(self, *, employee_id: int, start: date, end: date) -> Sequence[LeaveInterval]:
        """Leave intervals overlapping [start, end]; unapproved ones are filtered by the classifier."""

        raise NotImplementedError
