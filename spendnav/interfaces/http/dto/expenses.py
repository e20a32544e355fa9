from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from spendnav.domain.expenses.entities import Expense, SpendingSummary


class ExpenseRequestDTO(BaseModel):
    # Unknown keys (a client-sent "user", for instance) are dropped.
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    category: str
    amount: float
    date: datetime | None = None
    note: str = ""


class ExpenseDTO(BaseModel):
    id: int
    user: int
    category: str
    amount: float
    date: datetime
    note: str

    @classmethod
    def from_entity(cls, expense: Expense) -> ExpenseDTO:
        return cls(
            id=expense.id,
            user=expense.user_id,
            category=expense.category,
            amount=expense.amount,
            date=expense.date,
            note=expense.note,
        )


class AnalyticsDTO(BaseModel):
    budget: float
    total_spent: float = Field(serialization_alias="totalSpent")
    remaining: float
    by_category: dict[str, float] = Field(serialization_alias="byCategory")

    @classmethod
    def from_summary(cls, summary: SpendingSummary) -> AnalyticsDTO:
        return cls(
            budget=summary.budget,
            total_spent=summary.total_spent,
            remaining=summary.remaining,
            by_category=dict(summary.by_category),
        )
