from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import ShiftRule


class ShiftRepository(Protocol):
    def get_default(self) -> Optional[ShiftRule]:
        raise NotImplementedError

    def get_for_employee_and_date(self, *, employee_id: int, work_date: date) -> Optional[ShiftRule]:
        raise NotImplementedError
