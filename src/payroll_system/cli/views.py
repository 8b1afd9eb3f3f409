from __future__ import annotations

from ..employees.model import EmployeeRecord

BANNER = " WELCOME TO OUR CONSOLE BASED PAYROLL MANAGEMENT SYSTEM "
TITLE = ":::::::::::: XYZ Payroll Management System ::::::::::::::"

MAIN_MENU = "\n1. Login\n2. Register"
ADMIN_MENU = (
    "\n1. Add Employee Record"
    "\n2. Delete Employee Record"
    "\n3. Search Employee"
    "\n4. Display Employee List"
    "\n5. Exit Program"
)


def format_employee(record: EmployeeRecord, net_salary: float) -> str:
    return "\n".join(
        [
            "",
            f"Employee Code: {record.employee_code}",
            f"Employee Name: {record.name}",
            f"Employee Address: {record.address}",
            f"Employee Phone Number: {record.phone}",
            f"Employee Designation: {record.designation}",
            f"Employee Joined: {record.join_date}",
            f"Employee Grade: {record.grade}",
            f"Employee Salary: {net_salary:.2f}",
        ]
    )
