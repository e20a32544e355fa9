from datetime import UTC, datetime

from spendnav.domain import Expense, summarize
from spendnav.domain.expenses import totals_by_category


def _expense(category: str, amount: float, user_id: int = 1) -> Expense:
    return Expense(
        id=0,
        user_id=user_id,
        category=category,
        amount=amount,
        date=datetime(2025, 1, 1, tzinfo=UTC),
    )


def test_summarize_with_no_expenses() -> None:
    summary = summarize(120.0, [])

    assert summary.total_spent == 0
    assert summary.remaining == 120.0
    assert summary.by_category == {}


def test_summarize_under_budget() -> None:
    summary = summarize(100.0, [_expense("Food", 25), _expense("Rent", 40)])

    assert summary.total_spent == 65
    assert summary.remaining == 35
    assert summary.by_category == {"Food": 25, "Rent": 40}


def test_summarize_overspend_reports_zero_remaining() -> None:
    summary = summarize(80.0, [_expense("A", 30), _expense("B", 20), _expense("A", 50)])

    assert summary.total_spent == 100
    assert summary.remaining == 0
    assert summary.by_category == {"A": 80, "B": 20}


def test_categories_are_not_normalised() -> None:
    totals = totals_by_category([_expense("food", 1), _expense("Food", 2), _expense("food ", 4)])

    assert totals == {"food": 1, "Food": 2, "food ": 4}
