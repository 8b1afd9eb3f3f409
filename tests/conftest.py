from __future__ import annotations

import pytest

from payroll_system.credentials.file_credential_repository import FileCredentialRepository
from payroll_system.employees.file_employee_repository import FileEmployeeRepository
from payroll_system.employees.model import EmployeeRecord, Income, JoinDate


@pytest.fixture
def employee_repo(tmp_path):
    return FileEmployeeRepository(tmp_path / "EMPLOYEE.DAT")


@pytest.fixture
def credential_repo(tmp_path):
    return FileCredentialRepository(tmp_path / "userData.txt")


@pytest.fixture
def make_record():
    def _make(code: int = 1, grade: int = 1, **overrides) -> EmployeeRecord:
        values = dict(
            employee_code=code,
            grade=grade,
            join_date=JoinDate(day=15, month=6, year=2001),
            name=f"Employee {code}",
            address="12 Main Road",
            phone="0300123456",
            designation="Clerk",
            income=Income(base_salary=50000, bonus=2000, tax=1500),
        )
        values.update(overrides)
        return EmployeeRecord(**values)

    return _make
