from __future__ import annotations

from enum import Enum


class MenuState(str, Enum):
    """States of the console flow."""

    AT_MAIN_MENU = "AT_MAIN_MENU"
    AWAITING_LOGIN = "AWAITING_LOGIN"
    IN_ADMIN_MENU = "IN_ADMIN_MENU"
    EXITING = "EXITING"


class MainMenuChoice(str, Enum):
    LOGIN = "1"
    REGISTER = "2"


class AdminMenuChoice(str, Enum):
    """Options offered once a user is logged in."""

    ADD = "1"
    DELETE = "2"
    SEARCH = "3"
    LIST = "4"
    EXIT = "5"
