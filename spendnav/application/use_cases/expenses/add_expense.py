# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from spendnav.domain.expenses.entities import Expense
from spendnav.domain.expenses.repositories import ExpenseRepository


class AddExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(
        self,
        user_id: int,
        category: str,
        amount: float,
        date: datetime | None = None,
        note: str = "",
    ) -> Expense:
        expense = Expense(
            id=0,
            user_id=user_id,
            category=category,
            amount=float(amount),
            date=date or datetime.now(UTC),
            note=note or "",
        )
        return self._expenses.add(expense)
