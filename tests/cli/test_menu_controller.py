from __future__ import annotations

import pytest
from click.testing import CliRunner

from payroll_system.main import main


@pytest.fixture
def run_menu(tmp_path):
    runner = CliRunner()

    def _run(*lines: str, intro: bool = False):
        args = ["--data-dir", str(tmp_path)]
        if not intro:
            args.insert(0, "--no-intro")
        return runner.invoke(main, args, input="\n".join(lines) + "\n", env={"APP_ENV": "testing"})

    return _run


@pytest.fixture
def with_user(tmp_path):
    (tmp_path / "userData.txt").write_text("admin admin123\n", encoding="utf-8")


ADD_EMPLOYEE = [
    "1",  # Add
    "John Smith",
    "10",
    "Street 1",
    "0300123456",
    "15 6 2001",
    "Clerk",
    "2",
    "1000",
    "0",
    "100",
    "50",
    "0",
    "0",
]


def test_register_login_add_search_and_exit(run_menu, tmp_path):
    result = run_menu("2", "alice", "secret", "alice", "secret", *ADD_EMPLOYEE, "3", "10", "5")

    assert result.exit_code == 0, result.output
    assert "Registration Successful." in result.output
    assert "LOGIN SUCCESSFUL." in result.output
    assert "Employee 10 added." in result.output
    assert "Employee Name: John Smith" in result.output
    assert "Employee Salary: 1050.00" in result.output
    assert (tmp_path / "userData.txt").read_text(encoding="utf-8") == "alice secret\n"
    assert (tmp_path / "EMPLOYEE.DAT").stat().st_size == 381


def test_add_reprompts_until_values_are_valid(run_menu, with_user):
    result = run_menu(
        "1", "admin", "admin123",
        "1", "Jane", "0", "11", "", "", "31 4 2001", "15 6 2001", "", "2",
        "1000", "-5", "0", "0", "0", "0", "0",
        "4", "5",
    )

    assert result.exit_code == 0, result.output
    assert "Employee Code must be greater than 0. Please re-enter." in result.output
    assert "Invalid join date 31/04/2001. Please re-enter." in result.output
    assert "Loan Amount must not be negative. Please re-enter." in result.output
    assert "Employee Code: 11" in result.output


def test_three_failed_logins_return_to_main_menu(run_menu, with_user):
    result = run_menu("1", "admin", "x", "admin", "y", "admin", "z", "9")

    assert result.exit_code == 1
    assert result.output.count("Invalid credentials. Please try again.") == 2
    assert "Login failed after 3 attempts." in result.output
    assert "Invalid choice. Exiting application." in result.output


def test_empty_store_messages(run_menu, with_user):
    result = run_menu("1", "admin", "admin123", "4", "3", "99", "2", "99", "5")

    assert result.exit_code == 0, result.output
    assert "No employee records found." in result.output
    assert result.output.count("Record Not Found. Please check the Employee Code.") == 2


def test_delete_then_list(run_menu, with_user):
    result = run_menu("1", "admin", "admin123", *ADD_EMPLOYEE, "2", "10", "4", "5")

    assert result.exit_code == 0, result.output
    assert "Record deleted." in result.output
    assert "No employee records found." in result.output


def test_invalid_admin_option_exits_with_failure(run_menu, with_user):
    result = run_menu("1", "admin", "admin123", "7")

    assert result.exit_code == 1
    assert "Invalid option selected. Exiting program." in result.output


def test_register_rejects_username_with_spaces(run_menu, tmp_path):
    result = run_menu("2", "al ice", "pw", "9")

    assert result.exit_code == 1
    assert "Registration failed: Username must not contain spaces" in result.output
    assert not (tmp_path / "userData.txt").exists()


def test_intro_banner_is_shown(run_menu):
    result = run_menu("9", intro=True)
    assert "WELCOME TO OUR CONSOLE BASED PAYROLL MANAGEMENT SYSTEM" in result.output
