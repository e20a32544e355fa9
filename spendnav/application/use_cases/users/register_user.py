# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from spendnav.domain.users.entities import User
from spendnav.domain.users.exceptions import DuplicateEmailError
from spendnav.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, first_name: str, last_name: str, email: str, password: str) -> User:
        existing = self._users.find_by_email(email)
        if existing:
            raise DuplicateEmailError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=hashed,
            budget=0.0,
            created_at=datetime.now(UTC),
        )
        return self._users.add(user)
