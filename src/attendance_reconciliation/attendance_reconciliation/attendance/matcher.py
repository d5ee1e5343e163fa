from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

from ..common.datetime_utils import date_key
from ..core.data_quality import DataWarning
from ..core.enums import WarningCode
from ..core.exceptions import MalformedDateError
from .model import AttendanceRecord
from .normalizer import normalize_record, record_date_value

logger = logging.getLogger(__name__)


class AttendanceMatcher:
    """Index attendance records by canonical ``YYYY-MM-DD`` key.

    Records are normalised once here. Unreadable dates are skipped and the
    first record wins when several share a date; both cases are kept in
    ``warnings`` rather than raised.
    """

    def __init__(self, records: Iterable[Any]):
        self._index: dict[str, AttendanceRecord] = {}
        self._warnings: list[DataWarning] = []

        for raw in records:
            try:
                record = normalize_record(raw)
            except MalformedDateError as exc:
                logger.warning("attendance_date_malformed", extra={"raw_date": str(record_date_value(raw))[:100]})
                self._warnings.append(
                    DataWarning(
                        code=WarningCode.MALFORMED_DATE,
                        message=f"Skipped attendance record with unreadable date: {exc}",
                    )
                )
                continue

            key = record.date.strftime("%Y-%m-%d")
            if key in self._index:
                logger.warning("attendance_duplicate_date", extra={"date": key, "employee_id": record.employee_id})
                self._warnings.append(
                    DataWarning(
                        code=WarningCode.AMBIGUOUS_MATCH,
                        message=f"Multiple attendance records for {key}; using the first one",
                        date=record.date,
                    )
                )
                continue
            self._index[key] = record

    @property
    def warnings(self) -> tuple[DataWarning, ...]:
        return tuple(self._warnings)

    def __len__(self) -> int:
        return len(self._index)

    def find(self, day: Any) -> Optional[AttendanceRecord]:
        try:
            return self._index.get(date_key(day))
        except MalformedDateError:
            return None

    __call__ = find

    def records(self) -> list[AttendanceRecord]:
        return [self._index[k] for k in sorted(self._index)]


def match_record(day: date, records: Iterable[Any]) -> Optional[AttendanceRecord]:
    """Linear-scan lookup with the same normalisation as AttendanceMatcher."""
    key = date_key(day)
    for raw in records:
        try:
            if date_key(record_date_value(raw)) == key:
                return normalize_record(raw)
        except MalformedDateError:
            logger.warning("attendance_date_malformed", extra={"raw_date": str(record_date_value(raw))[:100]})
            continue
    return None
