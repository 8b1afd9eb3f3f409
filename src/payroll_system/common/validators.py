from __future__ import annotations

import math

from ..core.constants import MAX_JOIN_YEAR, MIN_JOIN_YEAR
from ..core.exceptions import ValidationError

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def validate_date(day: int, month: int, year: int) -> bool:
    """Check a joining date.

    Leap years are simply ``year % 4 == 0`` (century years are not excluded),
    which is the rule existing data files were written with.
    """
    valid = True
    if month < 1 or month > 12:
        valid = False
    if day < 1 or day > 31:
        valid = False
    elif month == 2 and day > (29 if year % 4 == 0 else 28):
        valid = False
    elif month in _THIRTY_DAY_MONTHS and day > 30:
        valid = False
    if year < MIN_JOIN_YEAR or year > MAX_JOIN_YEAR:
        valid = False
    return valid


def validate_positive(value: float) -> bool:
    return value > 0


def validate_non_negative(value: float) -> bool:
    return value >= 0


def _whole_number(value, message: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(message)
    if isinstance(value, float) and number != value:
        raise ValidationError(message)
    return number


def require_valid_date(day: int, month: int, year: int) -> tuple[int, int, int]:
    message = "Join date must be three whole numbers (DD MM YYYY)"
    day, month, year = (_whole_number(v, message) for v in (day, month, year))
    if not validate_date(day, month, year):
        raise ValidationError(f"Invalid join date {day:02d}/{month:02d}/{year}")
    return day, month, year


def require_positive(value, field_name: str, *, max_value: int | None = None) -> int:
    number = _whole_number(value, f"{field_name} must be a whole number")
    if not validate_positive(number):
        raise ValidationError(f"{field_name} must be greater than 0")
    if max_value is not None and number > max_value:
        raise ValidationError(f"{field_name} must not exceed {max_value}")
    return number


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if not validate_non_negative(number):
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_token(value: str, field_name: str) -> str:
    """A single non-empty word, as stored in space-delimited files."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    if len(value.split()) != 1 or value != value.strip():
        raise ValidationError(f"{field_name} must not contain spaces")
    return value


def truncate(value: str | None, limit: int) -> str:
    return (value or "")[:limit]


def require_no_nul(value: str, field_name: str) -> str:
    # NUL is the padding byte of fixed-width fields.
    if "\x00" in value:
        raise ValidationError(f"{field_name} must not contain NUL characters")
    return value
