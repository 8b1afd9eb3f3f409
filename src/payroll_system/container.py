from __future__ import annotations

from dataclasses import dataclass

from .credentials.file_credential_repository import FileCredentialRepository
from .credentials.service import AuthService
from .employees.file_employee_repository import FileEmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .storage.connection import StorageConfig


@dataclass(frozen=True)
class Container:
    storage: StorageConfig

    credentials_repo: FileCredentialRepository
    employees_repo: FileEmployeeRepository

    auth_service: AuthService
    employee_service: EmployeeService


def build_container(*, storage: StorageConfig) -> Container:
    credentials_repo = FileCredentialRepository(storage.credential_path)
    employees_repo = FileEmployeeRepository(storage.employee_path)

    auth_service = AuthService(credentials_repo)
    employee_service = EmployeeService(employees_repo, calculator=StandardSalaryCalculator())

    return Container(
        storage=storage,
        credentials_repo=credentials_repo,
        employees_repo=employees_repo,
        auth_service=auth_service,
        employee_service=employee_service,
    )
