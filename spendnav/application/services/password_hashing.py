"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from spendnav.domain.users.repositories import PasswordHasher
from spendnav.shared.errors.base import InternalError
from spendnav.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing; every call to ``hash`` draws a fresh salt."""

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        if not isinstance(password, str):
            raise InternalError("password must be a string")
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (TypeError, ValueError) as exc:
            raise InternalError(f"password hashing failed: {exc}") from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (TypeError, ValueError):
            logger.warning("auth.password: stored digest is malformed")
            return False
