from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

import click

from ..common.validators import require_non_negative, require_positive, require_valid_date
from ..container import Container
from ..core.constants import MAX_INT_FIELD, MAX_LOGIN_ATTEMPTS
from ..core.enums import AdminMenuChoice, MainMenuChoice, MenuState
from ..core.exceptions import RecordNotFoundError, StorageError, ValidationError
from . import views

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MenuController:
    """Console flow as an explicit state machine.

    This is the only layer that prompts, re-prompts on invalid input and decides
    the exit status. Stores and services never touch the console.
    """

    def __init__(
        self,
        container: Container,
        *,
        max_login_attempts: int = MAX_LOGIN_ATTEMPTS,
        intro_delay: float = 0.0,
    ):
        self._container = container
        self._max_login_attempts = max(1, int(max_login_attempts))
        self._intro_delay = float(intro_delay)
        self._exit_code = 0
        self._handlers: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.AT_MAIN_MENU: self._main_menu,
            MenuState.AWAITING_LOGIN: self._login,
            MenuState.IN_ADMIN_MENU: self._admin_menu,
        }

    def run(self, *, show_intro: bool = True) -> int:
        if show_intro:
            self.intro()

        state = MenuState.AT_MAIN_MENU
        while state != MenuState.EXITING:
            state = self._handlers[state]()
        return self._exit_code

    def intro(self) -> None:
        text = ":" * 12 + views.BANNER + ":" * 12
        if self._intro_delay <= 0:
            click.echo(text)
            return
        for ch in text:
            click.echo(ch, nl=False)
            time.sleep(self._intro_delay)
        click.echo()

    # ----- states -----

    def _main_menu(self) -> MenuState:
        click.echo(views.TITLE)
        click.echo(views.MAIN_MENU)
        choice = click.prompt("Enter your choice", type=str).strip()

        if choice == MainMenuChoice.LOGIN.value:
            return MenuState.AWAITING_LOGIN
        if choice == MainMenuChoice.REGISTER.value:
            return self._signup()

        click.echo("Invalid choice. Exiting application.")
        return self._exit(1)

    def _signup(self) -> MenuState:
        username = click.prompt("Enter a new Username", type=str)
        password = click.prompt("Enter a Password", type=str, hide_input=True)
        try:
            self._container.auth_service.register(username, password)
        except ValidationError as e:
            click.echo(f"Registration failed: {e}")
            return MenuState.AT_MAIN_MENU
        except StorageError as e:
            logger.exception("Registration could not be stored")
            click.echo(f"Registration failed: {e}", err=True)
            return MenuState.AT_MAIN_MENU

        click.echo("Registration Successful.")
        return MenuState.AWAITING_LOGIN

    def _login(self) -> MenuState:
        for attempt in range(1, self._max_login_attempts + 1):
            username = click.prompt("Enter Username", type=str)
            password = click.prompt("Enter Password", type=str, hide_input=True)
            try:
                ok = self._container.auth_service.authenticate(username, password)
            except StorageError as e:
                logger.exception("Credential file unreadable")
                click.echo(f"Login failed: {e}", err=True)
                return MenuState.AT_MAIN_MENU

            if ok:
                click.echo("LOGIN SUCCESSFUL.")
                return MenuState.IN_ADMIN_MENU
            if attempt < self._max_login_attempts:
                click.echo("Invalid credentials. Please try again.")

        click.echo(f"Login failed after {self._max_login_attempts} attempts.")
        return MenuState.AT_MAIN_MENU

    def _admin_menu(self) -> MenuState:
        click.echo(views.ADMIN_MENU)
        choice = click.prompt("Enter your option", type=str).strip()

        actions = {
            AdminMenuChoice.ADD.value: self.add_employee,
            AdminMenuChoice.DELETE.value: self.delete_employee,
            AdminMenuChoice.SEARCH.value: self.search_employee,
            AdminMenuChoice.LIST.value: self.list_employees,
        }
        if choice == AdminMenuChoice.EXIT.value:
            return self._exit(0)
        action = actions.get(choice)
        if action is None:
            click.echo("Invalid option selected. Exiting program.")
            return self._exit(1)

        try:
            action()
        except StorageError as e:
            logger.exception("Admin action %s failed", choice)
            click.echo(f"Storage error: {e}", err=True)
        return MenuState.IN_ADMIN_MENU

    def _exit(self, code: int) -> MenuState:
        self._exit_code = code
        return MenuState.EXITING

    # ----- admin actions -----

    def add_employee(self) -> None:
        svc = self._container.employee_service

        name = click.prompt("Enter Employee Name", type=str, default="", show_default=False)
        code = self._prompt_valid(
            "Enter Employee Code", lambda v: require_positive(v, "Employee Code", max_value=MAX_INT_FIELD)
        )
        address = click.prompt("Enter Employee Address", type=str, default="", show_default=False)
        phone = click.prompt("Enter Employee Phone Number", type=str, default="", show_default=False)
        day, month, year = self._prompt_valid("Enter Date (DD MM YYYY)", _parse_date)
        designation = click.prompt("Enter Designation", type=str, default="", show_default=False)
        grade = self._prompt_valid("Enter Employee Grade", lambda v: require_positive(v, "Grade", max_value=MAX_INT_FIELD))

        amounts = {}
        for field_name, label in (
            ("base_salary", "Base Salary"),
            ("loan", "Loan Amount"),
            ("bonus", "Bonus"),
            ("tax", "Tax Amount"),
            ("medical_allowance", "Medical Allowance"),
            ("travel_allowance", "Travel Allowance"),
        ):
            amounts[field_name] = self._prompt_valid(
                f"Enter Employee {label}", lambda v, label=label: require_non_negative(v, label)
            )

        record = svc.add_employee(
            employee_code=code,
            grade=grade,
            day=day,
            month=month,
            year=year,
            name=name,
            address=address,
            phone=phone,
            designation=designation,
            **amounts,
        )
        click.echo(f"Employee {record.employee_code} added.")

    def delete_employee(self) -> None:
        code = click.prompt("Enter Employee Code to delete record", type=int)
        if self._container.employee_service.delete_by_code(code):
            click.echo("Record deleted.")
        else:
            click.echo("Record Not Found. Please check the Employee Code.")

    def search_employee(self) -> None:
        svc = self._container.employee_service
        code = click.prompt("Enter Employee Code to search for", type=int)
        try:
            record = svc.get_by_code(code)
        except RecordNotFoundError:
            click.echo("Record Not Found. Please check the Employee Code.")
            return
        click.echo(views.format_employee(record, svc.net_salary(record)))

    def list_employees(self) -> None:
        svc = self._container.employee_service
        records = svc.list_by_grade()
        if not records:
            click.echo("No employee records found.")
            return
        for record in records:
            click.echo(views.format_employee(record, svc.net_salary(record)))

    def _prompt_valid(self, text: str, convert: Callable[[str], T]) -> T:
        while True:
            raw = click.prompt(text, type=str)
            try:
                return convert(raw)
            except ValidationError as e:
                click.echo(f"{e}. Please re-enter.")


def _parse_date(raw: str) -> tuple[int, int, int]:
    parts = raw.split()
    if len(parts) != 3:
        raise ValidationError("Join date must be three numbers (DD MM YYYY)")
    return require_valid_date(*parts)
