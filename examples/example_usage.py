"""Example: use the service layer directly (no console menu)."""

import importlib

from payroll_system.config import get_settings_module
from payroll_system.container import build_container
from payroll_system.storage.connection import StorageConfig


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage=StorageConfig.from_settings(settings))
    svc = container.employee_service
    for record in svc.list_by_grade():
        print(record.employee_code, record.name, record.grade, svc.net_salary(record))


if __name__ == "__main__":
    main()
