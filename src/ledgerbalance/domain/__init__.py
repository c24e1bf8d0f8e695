"""Domain records and repository protocols."""

from .records import (
    AccountRecord,
    AccountSelector,
    BudgetPeriod,
    BudgetRecord,
    CategoryRecord,
    EventSnapshot,
    ExpenseEvent,
    IncomeEvent,
    IncomePeriod,
    MonthKey,
    SavingsGoalRecord,
    YearlyProration,
)

__all__ = [
    "AccountRecord",
    "AccountSelector",
    "BudgetPeriod",
    "BudgetRecord",
    "CategoryRecord",
    "EventSnapshot",
    "ExpenseEvent",
    "IncomeEvent",
    "IncomePeriod",
    "MonthKey",
    "SavingsGoalRecord",
    "YearlyProration",
]
