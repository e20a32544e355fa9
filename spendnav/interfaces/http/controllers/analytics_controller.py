# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from spendnav.application.use_cases.expenses.analyze_spending import \
    AnalyzeSpendingUseCase
from spendnav.interfaces.http.dto.expenses import AnalyticsDTO
from spendnav.interfaces.http.guard import AccessGuard, AuthContext


class AnalyticsController:
    def __init__(self, *, analyze: AnalyzeSpendingUseCase, guard: AccessGuard) -> None:
        self._analyze = analyze
        self._guard = guard

    def analytics(self, *, ctx: AuthContext) -> tuple[Response, int]:
        summary = self._analyze.execute(ctx.user_id)
        return jsonify(AnalyticsDTO.from_summary(summary).model_dump(by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("analytics", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/analytics", view_func=self._guard.protect(self.analytics), methods=["GET"]
        )
        return bp
