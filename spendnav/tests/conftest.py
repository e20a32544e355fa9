from __future__ import annotations

import os
import tempfile

# Must be set before any spendnav module reads its configuration.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "spendnav-tests.log"))
os.environ["APP_ENV"] = "test"

from collections.abc import Iterator, Sequence  # noqa: E402
from dataclasses import replace  # noqa: E402

import pytest  # noqa: E402

from spendnav.domain.expenses.entities import Expense  # noqa: E402
from spendnav.domain.users.entities import User  # noqa: E402
from spendnav.domain.users.repositories import PasswordHasher  # noqa: E402
from spendnav.infrastructure.auth.tokens import JwtTokenService  # noqa: E402
from spendnav.infrastructure.db import ENGINE, Base  # noqa: E402
from spendnav.infrastructure.db import models  # noqa: E402,F401
from spendnav.shared.config import AuthConfig  # noqa: E402


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def save(self, user: User) -> User | None:
        if user.id not in self._users:
            return None
        self._users[user.id] = user
        return user

    def delete(self, user_id: int) -> None:
        self._users.pop(user_id, None)


class InMemoryExpenseRepository:
    def __init__(self) -> None:
        self._expenses: list[Expense] = []
        self._seq = 1

    def add(self, expense: Expense) -> Expense:
        stored = replace(expense, id=self._seq)
        self._seq += 1
        self._expenses.append(stored)
        return stored

    def list_for_user(self, user_id: int) -> Sequence[Expense]:
        owned = [e for e in self._expenses if e.user_id == user_id]
        return sorted(owned, key=lambda e: (e.date, e.id), reverse=True)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def expenses() -> InMemoryExpenseRepository:
    return InMemoryExpenseRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(JWT_SECRET="unit-test-secret", JWT_ALGORITHM="HS256", TOKEN_TTL_DAYS=7)


@pytest.fixture()
def token_service(auth_config: AuthConfig) -> JwtTokenService:
    return JwtTokenService(auth_config)


@pytest.fixture()
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
