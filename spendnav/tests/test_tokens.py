from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from spendnav.domain.users.exceptions import InvalidTokenError, MissingTokenError
from spendnav.infrastructure.auth.tokens import JwtTokenService
from spendnav.shared.config import AuthConfig


def test_issued_token_verifies_to_same_user(token_service: JwtTokenService) -> None:
    token = token_service.issue(42)

    assert token_service.verify(token) == 42


def test_token_expires_after_seven_days(token_service: JwtTokenService) -> None:
    issued_at = datetime(2025, 1, 1, tzinfo=UTC)
    token = token_service.issue(7, now=issued_at)

    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())
    assert claims["sub"] == "7"


def test_expired_token_is_rejected(token_service: JwtTokenService) -> None:
    token = token_service.issue(7, now=datetime.now(UTC) - timedelta(days=8))

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_token_signed_with_other_secret_is_rejected(token_service: JwtTokenService) -> None:
    foreign = JwtTokenService(AuthConfig(JWT_SECRET="someone-else"))
    token = foreign.issue(1)

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30.x"])
def test_garbled_token_is_rejected(token_service: JwtTokenService, garbage: str) -> None:
    with pytest.raises(InvalidTokenError):
        token_service.verify(garbage)


def test_token_without_subject_is_rejected(auth_config: AuthConfig) -> None:
    service = JwtTokenService(auth_config)
    token = jwt.encode(
        {"exp": datetime.now(UTC) + timedelta(hours=1)},
        auth_config.jwt_secret,
        algorithm=auth_config.jwt_algorithm,
    )

    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_missing_and_invalid_tokens_share_message() -> None:
    missing, invalid = MissingTokenError(), InvalidTokenError()

    assert missing.to_dict() == invalid.to_dict()
    assert missing.status == invalid.status == 401
