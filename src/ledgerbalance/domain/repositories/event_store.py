"""Read-only event store protocol."""

from __future__ import annotations

from typing import Protocol

from ..records import (
    AccountRecord,
    AccountSelector,
    BudgetRecord,
    CategoryRecord,
    ExpenseEvent,
    IncomeEvent,
    SavingsGoalRecord,
)


class EventStore(Protocol):
    """Source of an owner's ledger records.

    Implementations return events ordered by date and already scoped to the
    owner; the account filter narrows income and expense listings only.
    """

    def list_accounts(self, owner_id: int) -> list[AccountRecord]:
        """List the owner's accounts."""
        ...

    def list_income_events(
        self, owner_id: int, account_filter: AccountSelector | None = None
    ) -> list[IncomeEvent]:
        """List income events, optionally narrowed to one account bucket."""
        ...

    def list_expense_events(
        self, owner_id: int, account_filter: AccountSelector | None = None
    ) -> list[ExpenseEvent]:
        """List expense events, optionally narrowed to one account bucket."""
        ...

    def list_budgets(self, owner_id: int) -> list[BudgetRecord]:
        """List the owner's budgets."""
        ...

    def list_savings_goals(self, owner_id: int) -> list[SavingsGoalRecord]:
        """List the owner's savings goals."""
        ...

    def list_categories(self, owner_id: int) -> list[CategoryRecord]:
        """List the owner's custom expense categories by name."""
        ...
