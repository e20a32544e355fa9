# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from spendnav.application.use_cases.expenses.add_expense import AddExpenseUseCase
from spendnav.application.use_cases.expenses.list_expenses import \
    ListExpensesUseCase
from spendnav.interfaces.http.controllers._request import parse_body
from spendnav.interfaces.http.dto.expenses import ExpenseDTO, ExpenseRequestDTO
from spendnav.interfaces.http.guard import AccessGuard, AuthContext
from spendnav.shared.logging import logger


class ExpensesController:
    def __init__(
        self,
        *,
        add_expense: AddExpenseUseCase,
        list_expenses: ListExpensesUseCase,
        guard: AccessGuard,
    ) -> None:
        self._add_expense = add_expense
        self._list_expenses = list_expenses
        self._guard = guard

    def create(self, *, ctx: AuthContext) -> tuple[Response, int]:
        dto = parse_body(ExpenseRequestDTO)
        # Owner always comes from the verified token, never from the body.
        expense = self._add_expense.execute(
            ctx.user_id, dto.category, dto.amount, dto.date, dto.note
        )
        logger.info(f"expenses.add: user={ctx.user_id} id={expense.id}")
        return jsonify(ExpenseDTO.from_entity(expense).model_dump(mode="json")), 200

    def index(self, *, ctx: AuthContext) -> tuple[Response, int]:
        expenses = self._list_expenses.execute(ctx.user_id)
        payload = [ExpenseDTO.from_entity(e).model_dump(mode="json") for e in expenses]
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("expenses", __name__, url_prefix="/api/expenses")
        bp.add_url_rule("", view_func=self._guard.protect(self.create), methods=["POST"])
        bp.add_url_rule("", view_func=self._guard.protect(self.index), methods=["GET"])
        return bp
