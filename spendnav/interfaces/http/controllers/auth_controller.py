# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from spendnav.application.use_cases.users.login_user import LoginUserUseCase
from spendnav.application.use_cases.users.register_user import \
    RegisterUserUseCase
from spendnav.domain.users.exceptions import InvalidCredentialsError
from spendnav.infrastructure.audit import AuditAction, audit_log
from spendnav.interfaces.http.controllers._request import parse_body
from spendnav.interfaces.http.dto.auth import (LoginRequestDTO,
                                               LoginSuccessDTO, MessageDTO,
                                               PublicProfileDTO,
                                               RegisterRequestDTO)
from spendnav.shared.logging import logger
from spendnav.shared.utils.request_meta import get_client_ip


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO)

        user = self._register_use_case.execute(
            dto.first_name, dto.last_name, dto.email, dto.password
        )

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=get_client_ip(),
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(MessageDTO(msg="Registered successfully").model_dump()), 200

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO)
        ip_address = get_client_ip()

        try:
            result = self._login_use_case.execute(dto.email, dto.password)
        except InvalidCredentialsError:
            audit_log(AuditAction.LOGIN_FAILED, ip_address=ip_address, success=False)
            raise

        audit_log(AuditAction.LOGIN_SUCCESS, user_id=result.user.id, ip_address=ip_address)

        payload = LoginSuccessDTO(
            token=result.token,
            user=PublicProfileDTO(
                id=result.user.id,
                first_name=result.user.first_name,
                email=result.user.email,
                budget=result.user.budget,
            ),
        )
        logger.info(f"auth.login: ok user_id={result.user.id}")
        return jsonify(payload.model_dump(by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
