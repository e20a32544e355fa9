# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.expenses.add_expense import AddExpenseUseCase
from .use_cases.expenses.analyze_spending import AnalyzeSpendingUseCase
from .use_cases.expenses.list_expenses import ListExpensesUseCase
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.update_budget import UpdateBudgetUseCase

__all__ = [
    "AddExpenseUseCase",
    "AnalyzeSpendingUseCase",
    "ListExpensesUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateBudgetUseCase",
]
