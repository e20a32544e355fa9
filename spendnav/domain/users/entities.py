# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from spendnav.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:
    """Registered account; ``password_hash`` never leaves the service."""

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str = field(repr=False)
    budget: float = 0.0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.budget < 0:
            raise InvariantViolation("budget cannot be negative", field="budget")

    def with_budget(self, budget: float) -> User:
        return User(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password_hash=self.password_hash,
            budget=float(budget),
            created_at=self.created_at,
        )
