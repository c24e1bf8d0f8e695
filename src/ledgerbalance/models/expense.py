"""Expense entries."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .account import Account


class Expense(SQLModel, table=True):
    """A single outflow.

    ``category`` is free text copied from the default list or the owner's
    ``ExpenseCategory`` rows; names are kept as given.
    """

    __tablename__: ClassVar[str] = "expense"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(nullable=False, index=True)
    amount: Decimal = Field(nullable=False, max_digits=10, decimal_places=2)
    category: str = Field(default="other", nullable=False, max_length=100)
    description: str = Field(default="", max_length=255)
    occurred_on: date = Field(nullable=False, index=True)
    payment_method: Optional[str] = Field(default=None, max_length=64)

    account_id: Optional[int] = Field(default=None, foreign_key="account.id")
    account: "Account | None" = Relationship(
        back_populates="expenses",
        sa_relationship=relationship("Account", back_populates="expenses"),
    )
