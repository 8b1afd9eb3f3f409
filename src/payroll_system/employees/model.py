from __future__ import annotations

from dataclasses import dataclass, field, fields

from ..common.validators import (
    require_no_nul,
    require_non_negative,
    require_positive,
    require_valid_date,
    truncate,
)
from ..core.constants import (
    ADDRESS_MAX_LEN,
    DESIGNATION_MAX_LEN,
    MAX_INT_FIELD,
    NAME_MAX_LEN,
    PHONE_MAX_LEN,
)

_INCOME_LABELS = {
    "base_salary": "Base salary",
    "loan": "Loan",
    "bonus": "Bonus",
    "tax": "Tax",
    "medical_allowance": "Medical allowance",
    "travel_allowance": "Travel allowance",
}

_TEXT_FIELDS = (
    ("name", "Name", NAME_MAX_LEN),
    ("address", "Address", ADDRESS_MAX_LEN),
    ("phone", "Phone", PHONE_MAX_LEN),
    ("designation", "Designation", DESIGNATION_MAX_LEN),
)


@dataclass(frozen=True)
class Income:
    """Salary components of an employee.

    Every component defaults to 0 and must not be negative.
    """

    base_salary: float = 0.0
    loan: float = 0.0
    bonus: float = 0.0
    tax: float = 0.0
    medical_allowance: float = 0.0
    travel_allowance: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = require_non_negative(getattr(self, f.name), _INCOME_LABELS[f.name])
            object.__setattr__(self, f.name, value)

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class JoinDate:
    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        day, month, year = require_valid_date(self.day, self.month, self.year)
        object.__setattr__(self, "day", day)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "year", year)

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year}"


@dataclass(frozen=True)
class EmployeeRecord:
    """Domain entity: one persisted employee record.

    Text fields longer than their fixed width are truncated. NUL characters are
    rejected since NUL pads the stored fields.
    """

    employee_code: int
    grade: int
    join_date: JoinDate
    name: str = ""
    address: str = ""
    phone: str = ""
    designation: str = ""
    income: Income = field(default_factory=Income)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "employee_code", require_positive(self.employee_code, "Employee code", max_value=MAX_INT_FIELD)
        )
        object.__setattr__(self, "grade", require_positive(self.grade, "Grade", max_value=MAX_INT_FIELD))
        for name, label, limit in _TEXT_FIELDS:
            object.__setattr__(self, name, require_no_nul(truncate(getattr(self, name), limit), label))
