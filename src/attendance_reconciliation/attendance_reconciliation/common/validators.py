from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_range(value: float, field_name: str, *, low: float, high: float, low_inclusive: bool = True) -> float:
    too_low = value < low if low_inclusive else value <= low
    if too_low or value > high:
        lower = "[" if low_inclusive else "("
        raise ValidationError(f"{field_name} must be in {lower}{low}, {high}], got {value}")
    return value


def require_weekday_indices(values, field_name: str) -> frozenset[int]:
    days = frozenset(int(v) for v in values)
    bad = sorted(d for d in days if d < 0 or d > 6)
    if bad:
        raise ValidationError(f"{field_name} must contain weekday indices 0-6, got {bad}")
    return days
