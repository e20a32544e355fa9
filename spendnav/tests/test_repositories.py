from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from spendnav.domain.expenses.entities import Expense
from spendnav.domain.users.entities import User
from spendnav.domain.users.exceptions import DuplicateEmailError, UserNotFoundError
from spendnav.infrastructure.db import SessionLocal
from spendnav.infrastructure.repositories.expenses.sqlalchemy_expense_repository import (
    SqlAlchemyExpenseRepository,
)
from spendnav.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from spendnav.shared.errors.base import InternalError

pytestmark = pytest.mark.usefixtures("reset_database")


def _user(email: str = "bob@example.com") -> User:
    return User(
        id=0,
        first_name="Bob",
        last_name="Stone",
        email=email,
        password_hash="digest",
    )


@pytest.fixture()
def user_repo() -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(SessionLocal)


@pytest.fixture()
def expense_repo() -> SqlAlchemyExpenseRepository:
    return SqlAlchemyExpenseRepository(SessionLocal)


def test_user_roundtrip(user_repo: SqlAlchemyUserRepository) -> None:
    created = user_repo.add(_user())

    assert created.id > 0
    assert created.budget == 0
    assert user_repo.find_by_email("bob@example.com") == user_repo.find_by_id(created.id)
    assert user_repo.find_by_email("BOB@example.com") is None


def test_unique_email_enforced_by_store(user_repo: SqlAlchemyUserRepository) -> None:
    user_repo.add(_user())

    with pytest.raises(DuplicateEmailError):
        user_repo.add(_user())


def test_save_updates_budget(user_repo: SqlAlchemyUserRepository) -> None:
    created = user_repo.add(_user())

    saved = user_repo.save(created.with_budget(300))

    assert saved is not None
    assert saved.budget == 300
    assert user_repo.find_by_id(created.id).budget == 300


def test_save_missing_user_returns_none(user_repo: SqlAlchemyUserRepository) -> None:
    assert user_repo.save(_user().with_budget(1)) is None


def test_expenses_listed_by_date_descending(
    user_repo: SqlAlchemyUserRepository, expense_repo: SqlAlchemyExpenseRepository
) -> None:
    owner = user_repo.add(_user())
    other = user_repo.add(_user("eve@example.com"))
    base = datetime(2025, 6, 1, 9, 0, tzinfo=UTC)
    for offset, category in ((0, "first"), (2, "third"), (1, "second")):
        expense_repo.add(
            Expense(
                id=0,
                user_id=owner.id,
                category=category,
                amount=10,
                date=base + timedelta(days=offset),
            )
        )
    expense_repo.add(Expense(id=0, user_id=other.id, category="foreign", amount=1, date=base))

    listed = expense_repo.list_for_user(owner.id)

    assert [e.category for e in listed] == ["third", "second", "first"]
    assert all(e.user_id == owner.id for e in listed)


def test_expense_dates_are_normalised_to_utc(
    user_repo: SqlAlchemyUserRepository, expense_repo: SqlAlchemyExpenseRepository
) -> None:
    owner = user_repo.add(_user())
    local = datetime(2025, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))

    stored = expense_repo.add(
        Expense(id=0, user_id=owner.id, category="Taxi", amount=9.5, date=local, note="airport")
    )

    assert stored.date == local
    assert stored.date.utcoffset() == timedelta(0)
    assert stored.note == "airport"


def test_expense_for_missing_owner_raises_not_found(
    expense_repo: SqlAlchemyExpenseRepository,
) -> None:
    with pytest.raises(UserNotFoundError):
        expense_repo.add(
            Expense(id=0, user_id=999, category="A", amount=1, date=datetime.now(UTC))
        )


def test_non_owner_store_conflict_is_internal(
    user_repo: SqlAlchemyUserRepository, expense_repo: SqlAlchemyExpenseRepository
) -> None:
    owner = user_repo.add(_user())

    # SQLite stores NaN as NULL, tripping the NOT NULL constraint.
    with pytest.raises(InternalError) as exc_info:
        expense_repo.add(
            Expense(
                id=0,
                user_id=owner.id,
                category="A",
                amount=float("nan"),
                date=datetime.now(UTC),
            )
        )

    assert exc_info.value.status == 500
    assert expense_repo.list_for_user(owner.id) == []


def test_save_store_conflict_is_internal(user_repo: SqlAlchemyUserRepository) -> None:
    created = user_repo.add(_user())

    with pytest.raises(InternalError):
        user_repo.save(created.with_budget(float("nan")))

    assert user_repo.find_by_id(created.id).budget == 0
