# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited bearer tokens (JWT)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from spendnav.domain.users.exceptions import InvalidTokenError
from spendnav.domain.users.repositories import TokenService
from spendnav.shared.config import AuthConfig
from spendnav.shared.logging import logger


class JwtTokenService(TokenService):
    """Issues and verifies HMAC-signed tokens carrying the user id.

    The signing configuration is handed in once at construction and never
    re-read, so a running process keeps a single, immutable key.
    """

    def __init__(self, config: AuthConfig) -> None:
        self._secret = config.jwt_secret
        self._algorithm = config.jwt_algorithm
        self._ttl = timedelta(days=config.token_ttl_days)

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: int, *, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + self._ttl
        payload = {"sub": str(user_id), "iat": issued_at, "exp": expires_at}
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"auth.token: issued for user={user_id} exp={expires_at.isoformat()}")
        return token

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
            return int(payload["sub"])
        except (JWTError, KeyError, TypeError, ValueError) as exc:
            # Signature, expiry and shape failures all look the same to callers.
            logger.debug(f"auth.token: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc
