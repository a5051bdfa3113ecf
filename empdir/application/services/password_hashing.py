"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from empdir.domain.accounts.repositories import PasswordHasher
from empdir.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str | None = None) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        if self._method:
            return str(generate_password_hash(password, method=self._method))
        return str(generate_password_hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError, OverflowError, MemoryError):
            # Unknown method or corrupt parameters in the stored hash.
            logger.warning("password_hashing: stored hash is malformed, rejecting")
            return False
