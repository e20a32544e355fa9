# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Spending aggregates computed from a full scan of one user's ledger."""

from __future__ import annotations

from collections.abc import Iterable

from .entities import Expense, SpendingSummary


def total_spent(expenses: Iterable[Expense]) -> float:
    return float(sum(expense.amount for expense in expenses))


def totals_by_category(expenses: Iterable[Expense]) -> dict[str, float]:
    """Sum amounts per category label exactly as stored (no case folding)."""

    totals: dict[str, float] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount
    return totals


def summarize(budget: float, expenses: Iterable[Expense]) -> SpendingSummary:
    items = list(expenses)
    spent = total_spent(items)
    # Overspending reads as zero remaining, never negative.
    remaining = max(0.0, budget - spent)
    return SpendingSummary(
        budget=budget,
        total_spent=spent,
        remaining=remaining,
        by_category=totals_by_category(items),
    )
