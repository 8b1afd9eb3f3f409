"""Seed demo data.

Note: Appends, so running twice duplicates the demo rows (codes are not unique-checked).
"""

from __future__ import annotations

import importlib

from payroll_system.config import get_settings_module
from payroll_system.container import build_container
from payroll_system.storage.connection import StorageConfig

DEMO_USERS = [("admin", "admin123")]

DEMO_EMPLOYEES = [
    dict(employee_code=101, grade=3, day=12, month=4, year=2001, name="Ayesha Khan", address="House 12, Block C",
         phone="0300123456", designation="Accountant", base_salary=55000, tax=2500, medical_allowance=3000),
    dict(employee_code=102, grade=5, day=1, month=9, year=1998, name="Bilal Ahmed", address="Street 4, Gulshan",
         phone="0311987654", designation="Manager", base_salary=90000, bonus=10000, tax=6000, travel_allowance=4000),
    dict(employee_code=103, grade=1, day=29, month=2, year=2004, name="Sara Ali", address="Flat 7, Clifton",
         phone="0321555123", designation="Clerk", base_salary=30000, loan=5000),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage=StorageConfig.from_settings(settings))

    for username, password in DEMO_USERS:
        container.auth_service.register(username, password)
    for fields in DEMO_EMPLOYEES:
        container.employee_service.add_employee(**fields)

    print(
        "OK: Seeded demo data -> "
        f"{container.storage.credential_path} ({len(DEMO_USERS)} users), "
        f"{container.storage.employee_path} ({len(DEMO_EMPLOYEES)} employees)"
    )


if __name__ == "__main__":
    main()
