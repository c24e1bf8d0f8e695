"""Budget limits."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Budget(SQLModel, table=True):
    """A spending ceiling for a category; spend is always computed."""

    __tablename__: ClassVar[str] = "budget"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(nullable=False, index=True)
    category: str = Field(nullable=False, max_length=100)
    limit: Decimal = Field(nullable=False, max_digits=10, decimal_places=2)
    period: str = Field(default="monthly", nullable=False, max_length=16)
