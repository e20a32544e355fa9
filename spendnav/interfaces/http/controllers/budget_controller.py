# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from spendnav.application.use_cases.users.update_budget import UpdateBudgetUseCase
from spendnav.infrastructure.audit import AuditAction, audit_log
from spendnav.interfaces.http.controllers._request import parse_body
from spendnav.interfaces.http.dto.budget import BudgetRequestDTO, BudgetUpdatedDTO
from spendnav.interfaces.http.guard import AccessGuard, AuthContext
from spendnav.shared.utils.request_meta import get_client_ip


class BudgetController:
    def __init__(self, *, update_budget: UpdateBudgetUseCase, guard: AccessGuard) -> None:
        self._update_budget = update_budget
        self._guard = guard

    def set_budget(self, *, ctx: AuthContext) -> tuple[Response, int]:
        dto = parse_body(BudgetRequestDTO)
        budget = self._update_budget.execute(ctx.user_id, dto.budget)
        audit_log(
            AuditAction.BUDGET_UPDATED,
            user_id=ctx.user_id,
            ip_address=get_client_ip(),
            details={"budget": budget},
        )
        return jsonify(BudgetUpdatedDTO(budget=budget).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("budget", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/budget", view_func=self._guard.protect(self.set_budget), methods=["POST"]
        )
        return bp
