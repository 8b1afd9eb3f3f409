from __future__ import annotations

import logging

from ..common.validators import require_token
from ..core.exceptions import AuthenticationError
from .repository import CredentialRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign up and log in."""

    def __init__(self, credentials: CredentialRepository):
        self._credentials = credentials

    def register(self, username: str, password: str) -> None:
        username = require_token(username, "Username")
        password = require_token(password, "Password")
        self._credentials.register(username, password)
        logger.info("Registered user %s", username)

    def authenticate(self, username: str, password: str) -> bool:
        ok = self._credentials.authenticate(username, password)
        if not ok:
            logger.info("Failed login for user %s", username)
        return ok

    def login(self, username: str, password: str) -> str:
        if not self.authenticate(username, password):
            raise AuthenticationError("Invalid username or password")
        return username
