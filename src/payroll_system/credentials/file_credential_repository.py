from __future__ import annotations

import logging
from pathlib import Path

from ..storage.flatfile import open_file
from .model import Credential
from .repository import CredentialRepository

logger = logging.getLogger(__name__)


class FileCredentialRepository(CredentialRepository):
    """Append-only text file, one ``username password`` pair per line."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def register(self, username: str, password: str) -> None:
        with open_file(self._path, "a", encoding="utf-8") as f:
            f.write(Credential(username=username, password=password).to_line())

    def authenticate(self, username: str, password: str) -> bool:
        if not self._path.exists():
            return False

        matched = False
        # Always read to the end; any matching line authenticates.
        with open_file(self._path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                stored = Credential.from_line(line)
                if stored is None:
                    logger.warning("Ignoring malformed line %d in %s", lineno, self._path)
                    continue
                if stored.username == username and stored.password == password:
                    matched = True
        return matched
