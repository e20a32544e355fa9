# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from spendnav.domain.expenses.entities import Expense as DomainExpense
from spendnav.domain.expenses.repositories import ExpenseRepository
from spendnav.domain.users.exceptions import UserNotFoundError
from spendnav.infrastructure.db.models import Expense, User
from spendnav.infrastructure.repositories.timestamps import as_utc
from spendnav.infrastructure.unit_of_work import unit_of_work_scope
from spendnav.shared.errors.base import InternalError, StoreConflictError


def _to_domain(row: Expense) -> DomainExpense:
    return DomainExpense(
        id=row.id,
        user_id=row.user_id,
        category=row.category,
        amount=float(row.amount),
        date=as_utc(row.date),
        note=row.note or "",
    )


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, expense: DomainExpense) -> DomainExpense:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                if session.get(User, expense.user_id) is None:
                    raise UserNotFoundError()
                row = Expense(
                    user_id=expense.user_id,
                    category=expense.category,
                    amount=expense.amount,
                    date=as_utc(expense.date),
                    note=expense.note,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except StoreConflictError as exc:
            # Foreign key: owner deleted between the lookup and the insert.
            if "FOREIGN KEY" in exc.message.upper():
                raise UserNotFoundError() from exc
            raise InternalError(exc.message) from exc

    def list_for_user(self, user_id: int) -> Sequence[DomainExpense]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Expense)
                .filter(Expense.user_id == user_id)
                .order_by(Expense.date.desc(), Expense.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]
