from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .cli.controller import MenuController
from .config import get_settings_module
from .container import build_container
from .storage.connection import StorageConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    log_file = getattr(settings, "LOG_FILE", "")

    pkg_logger = logging.getLogger("payroll_system")
    pkg_logger.setLevel(level)
    if pkg_logger.handlers:
        return
    if not log_file:
        # Keep the console reserved for the menu.
        pkg_logger.addHandler(logging.NullHandler())
        return

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)


def create_controller(*, data_dir: Optional[str] = None) -> MenuController:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(settings)

    storage = StorageConfig.from_settings(settings)
    if data_dir:
        storage = StorageConfig(
            data_dir=Path(data_dir),
            employee_file=storage.employee_file,
            credential_file=storage.credential_file,
        )

    if bool(getattr(settings, "DEBUG", False)):
        logger.debug(
            "settings=%s employees=%s credentials=%s",
            settings_module,
            storage.employee_path,
            storage.credential_path,
        )

    container = build_container(storage=storage)
    return MenuController(
        container,
        max_login_attempts=int(getattr(settings, "MAX_LOGIN_ATTEMPTS", 3)),
        intro_delay=float(getattr(settings, "INTRO_DELAY", 0.0)),
    )


@click.command()
@click.option("--no-intro", is_flag=True, help="Skip the welcome banner.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding EMPLOYEE.DAT and userData.txt (overrides PAYROLL_DATA_DIR).",
)
@click.pass_context
def main(ctx: click.Context, no_intro: bool, data_dir: Optional[str]) -> None:
    """XYZ Payroll Management System."""
    controller = create_controller(data_dir=data_dir)
    ctx.exit(controller.run(show_intro=not no_intro))
