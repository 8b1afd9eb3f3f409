from __future__ import annotations

from typing import Protocol


class CredentialRepository(Protocol):
    def register(self, username: str, password: str) -> None:
        raise NotImplementedError

    def authenticate(self, username: str, password: str) -> bool:
        raise NotImplementedError
