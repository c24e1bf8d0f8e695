"""Income deposits (salaries and other inflows)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .account import Account


class Income(SQLModel, table=True):
    """One deposit; ``period='yearly'`` marks an annual sum."""

    __tablename__: ClassVar[str] = "income"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(nullable=False, index=True)
    amount: Decimal = Field(nullable=False, max_digits=10, decimal_places=2)
    period: str = Field(default="monthly", nullable=False, max_length=16)
    occurred_on: date = Field(nullable=False, index=True)
    description: Optional[str] = Field(default=None, max_length=255)

    account_id: Optional[int] = Field(default=None, foreign_key="account.id")
    account: "Account | None" = Relationship(
        back_populates="incomes",
        sa_relationship=relationship("Account", back_populates="incomes"),
    )
