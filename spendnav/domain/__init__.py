# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .expenses import Expense, SpendingSummary, summarize
from .users.entities import User

__all__ = [
    "Expense",
    "InvariantViolation",
    "InvariantViolationError",
    "SpendingSummary",
    "User",
    "summarize",
]
