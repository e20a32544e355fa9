# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from spendnav.application.services.password_hashing import \
    WerkzeugPasswordHasher
from spendnav.application.use_cases.expenses.add_expense import AddExpenseUseCase
from spendnav.application.use_cases.expenses.analyze_spending import \
    AnalyzeSpendingUseCase
from spendnav.application.use_cases.expenses.list_expenses import \
    ListExpensesUseCase
from spendnav.application.use_cases.users.login_user import LoginUserUseCase
from spendnav.application.use_cases.users.register_user import \
    RegisterUserUseCase
from spendnav.application.use_cases.users.update_budget import \
    UpdateBudgetUseCase
from spendnav.infrastructure.auth.tokens import JwtTokenService
from spendnav.infrastructure.db import ENGINE, SessionLocal, build_session_factory
from spendnav.infrastructure.repositories.expenses.sqlalchemy_expense_repository import \
    SqlAlchemyExpenseRepository
from spendnav.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from spendnav.interfaces.http.controllers.analytics_controller import \
    AnalyticsController
from spendnav.interfaces.http.controllers.auth_controller import AuthController
from spendnav.interfaces.http.controllers.budget_controller import \
    BudgetController
from spendnav.interfaces.http.controllers.expenses_controller import \
    ExpensesController
from spendnav.interfaces.http.controllers.misc_controller import MiscController
from spendnav.interfaces.http.guard import AccessGuard
from spendnav.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        engine: Engine | None = None,
    ) -> None:
        self._config = config or load_config()
        self._engine = engine or ENGINE

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    @cached_property
    def session_factory(self) -> Callable[[], Session]:
        if self._engine is ENGINE:
            return SessionLocal
        return build_session_factory(self._engine)

    # Security primitives

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self._config.auth)

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(tokens=self.token_service, header=self._config.auth.token_header)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def expense_repository(self) -> SqlAlchemyExpenseRepository:
        return SqlAlchemyExpenseRepository(self.session_factory)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def update_budget_use_case(self) -> UpdateBudgetUseCase:
        return UpdateBudgetUseCase(users=self.user_repository)

    @cached_property
    def add_expense_use_case(self) -> AddExpenseUseCase:
        return AddExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def list_expenses_use_case(self) -> ListExpensesUseCase:
        return ListExpensesUseCase(expenses=self.expense_repository)

    @cached_property
    def analyze_spending_use_case(self) -> AnalyzeSpendingUseCase:
        return AnalyzeSpendingUseCase(
            users=self.user_repository,
            expenses=self.expense_repository,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def budget_controller(self) -> BudgetController:
        return BudgetController(
            update_budget=self.update_budget_use_case,
            guard=self.access_guard,
        )

    @cached_property
    def expenses_controller(self) -> ExpensesController:
        return ExpensesController(
            add_expense=self.add_expense_use_case,
            list_expenses=self.list_expenses_use_case,
            guard=self.access_guard,
        )

    @cached_property
    def analytics_controller(self) -> AnalyticsController:
        return AnalyticsController(
            analyze=self.analyze_spending_use_case,
            guard=self.access_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self._engine)


container = Container()
