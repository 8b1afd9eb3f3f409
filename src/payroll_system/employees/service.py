from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import RecordNotFoundError
from ..payroll.calculator.base import SalaryCalculator
from ..payroll.calculator.standard_calculator import StandardSalaryCalculator
from .model import EmployeeRecord, Income, JoinDate
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employee records (admin)."""

    def __init__(self, employees: EmployeeRepository, *, calculator: Optional[SalaryCalculator] = None):
        self._employees = employees
        self._calculator = calculator or StandardSalaryCalculator()

    def add_employee(
        self,
        *,
        employee_code: int,
        grade: int,
        day: int,
        month: int,
        year: int,
        name: str = "",
        address: str = "",
        phone: str = "",
        designation: str = "",
        base_salary: float = 0.0,
        loan: float = 0.0,
        bonus: float = 0.0,
        tax: float = 0.0,
        medical_allowance: float = 0.0,
        travel_allowance: float = 0.0,
    ) -> EmployeeRecord:
        record = EmployeeRecord(
            employee_code=employee_code,
            grade=grade,
            join_date=JoinDate(day=day, month=month, year=year),
            name=name,
            address=address,
            phone=phone,
            designation=designation,
            income=Income(
                base_salary=base_salary,
                loan=loan,
                bonus=bonus,
                tax=tax,
                medical_allowance=medical_allowance,
                travel_allowance=travel_allowance,
            ),
        )
        self._employees.add(record)
        return record

    def add(self, record: EmployeeRecord) -> EmployeeRecord:
        self._employees.add(record)
        return record

    def find_by_code(self, code: int) -> Optional[EmployeeRecord]:
        return self._employees.find_by_code(int(code))

    def get_by_code(self, code: int) -> EmployeeRecord:
        record = self._employees.find_by_code(int(code))
        if record is None:
            raise RecordNotFoundError(f"No employee with code {code}")
        return record

    def delete_by_code(self, code: int) -> int:
        return self._employees.delete_by_code(int(code))

    def list_by_grade(self) -> Sequence[EmployeeRecord]:
        return self._employees.list_sorted_by_grade_desc()

    def net_salary(self, record: EmployeeRecord) -> float:
        return self._calculator.net_salary(record.income)
