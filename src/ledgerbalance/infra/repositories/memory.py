"""In-memory event store over an explicit record snapshot."""

from __future__ import annotations

from typing import Iterable

from ...domain.records import (
    AccountRecord,
    AccountSelector,
    BudgetRecord,
    CategoryRecord,
    ExpenseEvent,
    IncomeEvent,
    SavingsGoalRecord,
)


class InMemoryEventStore:
    """Event store backed by plain record collections.

    Records for several owners may be mixed; every listing is owner scoped.
    """

    def __init__(
        self,
        *,
        accounts: Iterable[AccountRecord] = (),
        incomes: Iterable[IncomeEvent] = (),
        expenses: Iterable[ExpenseEvent] = (),
        budgets: Iterable[BudgetRecord] = (),
        savings_goals: Iterable[SavingsGoalRecord] = (),
        categories: Iterable[CategoryRecord] = (),
    ):
        self.accounts = tuple(accounts)
        self.incomes = tuple(incomes)
        self.expenses = tuple(expenses)
        self.budgets = tuple(budgets)
        self.savings_goals = tuple(savings_goals)
        self.categories = tuple(categories)

    def list_accounts(self, owner_id: int) -> list[AccountRecord]:
        return sorted((a for a in self.accounts if a.owner_id == owner_id), key=lambda a: a.id)

    def list_income_events(
        self, owner_id: int, account_filter: AccountSelector | None = None
    ) -> list[IncomeEvent]:
        selector = AccountSelector.coerce(account_filter)
        rows = [
            i for i in self.incomes if i.owner_id == owner_id and selector.matches(i.account_id)
        ]
        return sorted(rows, key=lambda i: (i.occurred_on, i.id))

    def list_expense_events(
        self, owner_id: int, account_filter: AccountSelector | None = None
    ) -> list[ExpenseEvent]:
        selector = AccountSelector.coerce(account_filter)
        rows = [
            e for e in self.expenses if e.owner_id == owner_id and selector.matches(e.account_id)
        ]
        return sorted(rows, key=lambda e: (e.occurred_on, e.id))

    def list_budgets(self, owner_id: int) -> list[BudgetRecord]:
        return [b for b in self.budgets if b.owner_id == owner_id]

    def list_savings_goals(self, owner_id: int) -> list[SavingsGoalRecord]:
        return [g for g in self.savings_goals if g.owner_id == owner_id]

    def list_categories(self, owner_id: int) -> list[CategoryRecord]:
        return sorted((c for c in self.categories if c.owner_id == owner_id), key=lambda c: c.name)
