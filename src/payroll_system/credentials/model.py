from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_token


@dataclass(frozen=True)
class Credential:
    """One ``username password`` line of the credential file.

    Passwords are stored as typed; hashing is out of scope for this store.
    Both values must be single tokens so one credential is always one line.
    """

    username: str
    password: str

    def __post_init__(self) -> None:
        require_token(self.username, "Username")
        require_token(self.password, "Password")

    def to_line(self) -> str:
        return f"{self.username} {self.password}\n"

    @classmethod
    def from_line(cls, line: str) -> "Credential | None":
        parts = line.split()
        if len(parts) != 2:
            return None
        return cls(username=parts[0], password=parts[1])
