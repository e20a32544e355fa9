from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BudgetRequestDTO(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    budget: float


class BudgetUpdatedDTO(BaseModel):
    msg: str = "Budget updated"
    budget: float
