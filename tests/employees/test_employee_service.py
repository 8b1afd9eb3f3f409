from __future__ import annotations

from typing import Optional

import pytest

from payroll_system.core.exceptions import RecordNotFoundError, ValidationError
from payroll_system.employees.model import EmployeeRecord
from payroll_system.employees.service import EmployeeService


class InMemoryEmployees:
    def __init__(self):
        self.records: list[EmployeeRecord] = []

    def add(self, record: EmployeeRecord) -> None:
        self.records.append(record)

    def find_by_code(self, code: int) -> Optional[EmployeeRecord]:
        return next((r for r in self.records if r.employee_code == code), None)

    def delete_by_code(self, code: int) -> int:
        before = len(self.records)
        self.records = [r for r in self.records if r.employee_code != code]
        return 1 if len(self.records) < before else 0

    def list_sorted_by_grade_desc(self):
        return sorted(self.records, key=lambda r: r.grade, reverse=True)


def _add(svc: EmployeeService, **overrides) -> EmployeeRecord:
    fields = dict(employee_code=1, grade=2, day=10, month=10, year=2000, name="A", base_salary=1000)
    fields.update(overrides)
    return svc.add_employee(**fields)


def test_add_employee_builds_and_stores_record():
    repo = InMemoryEmployees()
    svc = EmployeeService(repo)

    rec = _add(svc, name="x" * 30, bonus=0)
    assert repo.records == [rec]
    assert rec.name == "x" * 25
    assert rec.join_date.year == 2000


def test_add_employee_rejects_invalid_input_without_storing():
    repo = InMemoryEmployees()
    svc = EmployeeService(repo)

    with pytest.raises(ValidationError):
        _add(svc, day=31, month=4, year=2001)
    with pytest.raises(ValidationError):
        _add(svc, loan=-1)
    with pytest.raises(ValidationError):
        _add(svc, employee_code=0)
    assert repo.records == []


def test_get_by_code_raises_when_missing():
    svc = EmployeeService(InMemoryEmployees())
    with pytest.raises(RecordNotFoundError):
        svc.get_by_code(5)
    assert svc.find_by_code(5) is None


def test_delete_and_list_delegate_to_repository():
    repo = InMemoryEmployees()
    svc = EmployeeService(repo)
    _add(svc, employee_code=1, grade=1)
    _add(svc, employee_code=2, grade=4)

    assert [r.employee_code for r in svc.list_by_grade()] == [2, 1]
    assert svc.delete_by_code(2) == 1
    assert svc.delete_by_code(2) == 0


def test_net_salary_uses_calculator():
    svc = EmployeeService(InMemoryEmployees())
    rec = _add(svc, base_salary=1000, bonus=100, medical_allowance=50, travel_allowance=25, tax=75, loan=200)
    assert svc.net_salary(rec) == pytest.approx(900.0)
