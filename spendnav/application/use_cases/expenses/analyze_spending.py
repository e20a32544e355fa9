# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case computing budget and spend aggregates for one user."""

from __future__ import annotations

from spendnav.domain.expenses.analytics import summarize
from spendnav.domain.expenses.entities import SpendingSummary
from spendnav.domain.expenses.repositories import ExpenseRepository
from spendnav.domain.users.exceptions import UserNotFoundError
from spendnav.domain.users.repositories import UserRepository


class AnalyzeSpendingUseCase:
    def __init__(self, *, users: UserRepository, expenses: ExpenseRepository) -> None:
        self._users = users
        self._expenses = expenses

    def execute(self, user_id: int) -> SpendingSummary:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return summarize(user.budget, self._expenses.list_for_user(user_id))
