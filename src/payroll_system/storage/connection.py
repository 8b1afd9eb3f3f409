from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.constants import DEFAULT_CREDENTIAL_FILE, DEFAULT_EMPLOYEE_FILE


@dataclass(frozen=True)
class StorageConfig:
    data_dir: Path
    employee_file: str = DEFAULT_EMPLOYEE_FILE
    credential_file: str = DEFAULT_CREDENTIAL_FILE

    @property
    def employee_path(self) -> Path:
        return Path(self.data_dir) / self.employee_file

    @property
    def credential_path(self) -> Path:
        return Path(self.data_dir) / self.credential_file

    @classmethod
    def from_settings(cls, settings) -> "StorageConfig":
        return cls(
            data_dir=Path(getattr(settings, "DATA_DIR")),
            employee_file=str(getattr(settings, "EMPLOYEE_FILE", DEFAULT_EMPLOYEE_FILE)),
            credential_file=str(getattr(settings, "CREDENTIAL_FILE", DEFAULT_CREDENTIAL_FILE)),
        )
