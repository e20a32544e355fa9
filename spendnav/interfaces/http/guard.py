# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate in front of every per-user endpoint."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask import request

from spendnav.domain.users.exceptions import InvalidTokenError, MissingTokenError
from spendnav.domain.users.repositories import TokenService
from spendnav.shared.logging import logger


@dataclass(slots=True, frozen=True)
class AuthContext:
    """Identity resolved from a verified token, handed to the view explicitly."""

    user_id: int


class AccessGuard:
    def __init__(self, *, tokens: TokenService, header: str = "x-auth-token") -> None:
        self._tokens = tokens
        self._header = header

    def _extract_token(self) -> str:
        raw = (request.headers.get(self._header) or "").strip()
        if self._header.lower() == "authorization" and raw.lower().startswith("bearer "):
            raw = raw[7:].strip()
        return raw

    def authenticate(self) -> AuthContext:
        token = self._extract_token()
        if not token:
            logger.warning(f"Auth failed (no token) on {request.method} {request.path}")
            raise MissingTokenError()
        try:
            user_id = self._tokens.verify(token)
        except InvalidTokenError:
            logger.warning(f"Auth failed (token rejected) on {request.method} {request.path}")
            raise
        logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
        return AuthContext(user_id=user_id)

    def protect(self, view: Callable[..., Any]) -> Callable[..., Any]:
        """Run ``view`` with ``ctx=AuthContext`` or fail with 401 before it starts."""

        @wraps(view)
        def inner(*args, **kwargs):
            ctx = self.authenticate()
            return view(*args, ctx=ctx, **kwargs)

        return inner


__all__ = ["AccessGuard", "AuthContext"]
