"""Wallet/card accounts that partition an owner's events."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .expense import Expense
    from .income import Income


class Account(SQLModel, table=True):
    """A named wallet; at most one per owner carries ``is_default``."""

    __tablename__: ClassVar[str] = "account"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=128)
    currency: str = Field(default="EUR", max_length=3)
    is_default: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    incomes: list["Income"] = Relationship(
        back_populates="account",
        sa_relationship=relationship("Income", back_populates="account"),
    )
    expenses: list["Expense"] = Relationship(
        back_populates="account",
        sa_relationship=relationship("Expense", back_populates="account"),
    )
