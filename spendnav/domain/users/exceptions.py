# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from spendnav.shared.errors.base import DomainError

# Both token failures share one message so callers cannot tell them apart.
_UNAUTHORIZED_MESSAGE = "Invalid or missing token"


class DuplicateEmailError(DomainError):
    code = "duplicate_email"
    message = "User exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class MissingTokenError(DomainError):
    code = "missing_token"
    status = HTTPStatus.UNAUTHORIZED
    message = _UNAUTHORIZED_MESSAGE


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = _UNAUTHORIZED_MESSAGE


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"
