"""SQLModel table exports."""

from .account import Account
from .budget import Budget
from .category import ExpenseCategory
from .expense import Expense
from .income import Income
from .savings import SavingsGoal

__all__ = [
    "Account",
    "Budget",
    "Expense",
    "ExpenseCategory",
    "Income",
    "SavingsGoal",
]
