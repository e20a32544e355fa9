# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .analytics import summarize, total_spent, totals_by_category
from .entities import Expense, SpendingSummary
from .repositories import ExpenseRepository

__all__ = [
    "Expense",
    "ExpenseRepository",
    "SpendingSummary",
    "summarize",
    "total_spent",
    "totals_by_category",
]
