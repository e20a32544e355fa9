# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from spendnav.domain.users.entities import User as DomainUser
from spendnav.domain.users.exceptions import DuplicateEmailError
from spendnav.domain.users.repositories import UserRepository
from spendnav.infrastructure.db.models import User
from spendnav.infrastructure.repositories.timestamps import as_utc
from spendnav.infrastructure.unit_of_work import unit_of_work_scope
from spendnav.shared.errors.base import InternalError, StoreConflictError


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        password_hash=row.password_hash,
        budget=float(row.budget or 0),
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    password_hash=user.password_hash,
                    budget=user.budget,
                )
                if user.created_at is not None:
                    row.created_at = user.created_at
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except StoreConflictError as exc:
            # Lost a registration race on the unique email index.
            raise DuplicateEmailError() from exc

    def save(self, user: DomainUser) -> DomainUser | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(User, user.id)
                if row is None:
                    return None
                row.first_name = user.first_name
                row.last_name = user.last_name
                row.budget = user.budget
                session.flush()
                return _to_domain(row)
        except StoreConflictError as exc:
            raise InternalError(exc.message) from exc
