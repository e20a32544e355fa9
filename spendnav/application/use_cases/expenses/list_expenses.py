# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from spendnav.domain.expenses.entities import Expense
from spendnav.domain.expenses.repositories import ExpenseRepository


class ListExpensesUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, user_id: int) -> Sequence[Expense]:
        return list(self._expenses.list_for_user(user_id))
