"""Savings goals."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class SavingsGoal(SQLModel, table=True):
    __tablename__: ClassVar[str] = "savings_goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    target_amount: Decimal = Field(nullable=False, max_digits=10, decimal_places=2)
    current_amount: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    deadline: Optional[date] = Field(default=None)
