# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Expense:
    """A single spending event owned by exactly one user.

    Amount sign and category vocabulary are intentionally unchecked.
    """

    id: int
    user_id: int
    category: str
    amount: float
    date: datetime
    note: str = ""


@dataclass(slots=True, frozen=True)
class SpendingSummary:
    budget: float
    total_spent: float
    remaining: float
    by_category: dict[str, float] = field(default_factory=dict)
