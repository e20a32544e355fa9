# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from spendnav.domain.users.exceptions import UserNotFoundError
from spendnav.domain.users.repositories import UserRepository


class UpdateBudgetUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int, budget: float) -> float:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        saved = self._users.save(user.with_budget(budget))
        if saved is None:
            raise UserNotFoundError()
        return saved.budget
