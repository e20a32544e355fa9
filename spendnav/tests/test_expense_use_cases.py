from __future__ import annotations

from datetime import UTC, datetime

import pytest

from spendnav.application.use_cases.expenses.add_expense import AddExpenseUseCase
from spendnav.application.use_cases.expenses.analyze_spending import AnalyzeSpendingUseCase
from spendnav.application.use_cases.expenses.list_expenses import ListExpensesUseCase
from spendnav.domain.users.entities import User
from spendnav.domain.users.exceptions import UserNotFoundError


def _day(day: int) -> datetime:
    return datetime(2025, 3, day, 12, 0, tzinfo=UTC)


@pytest.fixture()
def owner(users) -> User:
    return users.add(
        User(id=0, first_name="Ann", last_name="Lee", email="ann@example.com", password_hash="x")
    )


def test_add_expense_is_owned_by_caller(expenses, owner: User) -> None:
    stored = AddExpenseUseCase(expenses=expenses).execute(
        owner.id, "Food", 12.5, _day(1), "lunch"
    )

    assert stored.id > 0
    assert stored.user_id == owner.id
    assert stored.note == "lunch"


def test_add_expense_accepts_negative_amount_and_defaults(expenses, owner: User) -> None:
    stored = AddExpenseUseCase(expenses=expenses).execute(owner.id, "Refund", -3)

    assert stored.amount == -3.0
    assert stored.note == ""
    assert stored.date.tzinfo is not None


def test_list_expenses_most_recent_first(expenses, owner: User) -> None:
    add = AddExpenseUseCase(expenses=expenses)
    add.execute(owner.id, "A", 1, _day(2))
    add.execute(owner.id, "B", 2, _day(5))
    add.execute(owner.id, "C", 3, _day(1))

    listed = ListExpensesUseCase(expenses=expenses).execute(owner.id)

    assert [e.category for e in listed] == ["B", "A", "C"]


def test_list_expenses_repeatable_without_writes(expenses, owner: User) -> None:
    add = AddExpenseUseCase(expenses=expenses)
    add.execute(owner.id, "A", 1, _day(2))
    add.execute(owner.id, "B", 2, _day(2))
    use_case = ListExpensesUseCase(expenses=expenses)

    assert {e.id for e in use_case.execute(owner.id)} == {e.id for e in use_case.execute(owner.id)}


def test_list_expenses_isolated_per_user(expenses, owner: User) -> None:
    add = AddExpenseUseCase(expenses=expenses)
    add.execute(owner.id, "Mine", 1, _day(1))
    add.execute(owner.id + 1, "Theirs", 2, _day(1))

    listed = ListExpensesUseCase(expenses=expenses).execute(owner.id)

    assert [e.category for e in listed] == ["Mine"]


def test_analyze_spending_floors_remaining(users, expenses, owner: User) -> None:
    users.save(owner.with_budget(80))
    add = AddExpenseUseCase(expenses=expenses)
    for category, amount in (("A", 30), ("B", 20), ("A", 50)):
        add.execute(owner.id, category, amount, _day(1))

    summary = AnalyzeSpendingUseCase(users=users, expenses=expenses).execute(owner.id)

    assert summary.budget == 80
    assert summary.total_spent == 100
    assert summary.remaining == 0
    assert summary.by_category == {"A": 80, "B": 20}


def test_analyze_spending_unknown_user(users, expenses) -> None:
    with pytest.raises(UserNotFoundError):
        AnalyzeSpendingUseCase(users=users, expenses=expenses).execute(404)
