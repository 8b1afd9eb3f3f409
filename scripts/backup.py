"""Backup data files.

Copies the employee and credential files into ``backups/<timestamp>/``.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from payroll_system.config import get_settings_module
from payroll_system.storage.connection import StorageConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = StorageConfig.from_settings(settings)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = Path(__file__).resolve().parents[1] / "backups" / ts
    out_dir.mkdir(parents=True, exist_ok=True)

    copied = 0
    for path in (storage.employee_path, storage.credential_path):
        if not path.exists():
            print(f"SKIP: {path} does not exist")
            continue
        shutil.copy2(path, out_dir / path.name)
        copied += 1

    if not copied:
        raise SystemExit("Nothing to back up.")
    print(f"OK: Backup created: {out_dir}")


if __name__ == "__main__":
    main()
