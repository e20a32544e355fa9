# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from spendnav.domain.users.entities import User
from spendnav.domain.users.exceptions import InvalidCredentialsError
from spendnav.domain.users.repositories import PasswordHasher, TokenService, UserRepository


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: str
    user: User


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> LoginResult:
        user = self._users.find_by_email(email)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        # Unknown email and wrong password are reported identically.
        if not password_valid:
            raise InvalidCredentialsError()

        return LoginResult(token=self._tokens.issue(user.id), user=user)
