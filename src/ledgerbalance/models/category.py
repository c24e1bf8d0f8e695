"""Owner-defined expense categories."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ExpenseCategory(SQLModel, table=True):
    """Custom category name, unique per owner.

    Expenses copy the name as text, so renaming or deleting a row here never
    rewrites past spend.
    """

    __tablename__: ClassVar[str] = "expense_category"
    __table_args__ = (UniqueConstraint("owner_id", "name", name="uq_expense_category_owner_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=100)
