"""Owner-level facade over the ledger calculators.

Each call fetches a complete snapshot from the event store, validates it,
and derives the requested figure from scratch. Nothing derived is cached
between calls, so a mutation in the store is visible on the next query.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import wraps
from typing import Any, Callable, TypeVar

from ..constants.categories import DEFAULT_EXPENSE_CATEGORIES
from ..domain.records import (
    AccountSelector,
    EventSnapshot,
    SavingsGoalRecord,
    YearlyProration,
)
from ..domain.repositories.event_store import EventStore
from ..errors import LedgerError
from ..logging_config import get_logger
from . import balance, budgeting, categories, savings
from .accounts import validate_snapshot

logger = get_logger("services.engine")

F = TypeVar("F", bound=Callable[..., Any])


def _logs_rejections(method: F) -> F:
    """Log any ``LedgerError`` escaping an engine call at WARNING, then re-raise."""

    @wraps(method)
    def wrapper(self, subject, *args, **kwargs):
        try:
            return method(self, subject, *args, **kwargs)
        except LedgerError as exc:
            logger.warning(
                "Rejected ledger request",
                extra={
                    "owner_id": getattr(subject, "owner_id", subject),
                    "operation": method.__name__,
                    "error": type(exc).__name__,
                    "field": exc.field,
                },
            )
            raise

    return wrapper  # type: ignore[return-value]


@dataclass(slots=True)
class MonthlyOverview:
    """Headline figures for one month of one account scope."""

    year: int
    month: int
    income: Decimal
    expenses: Decimal
    remaining_balance: Decimal
    monthly_budget: Decimal
    remaining_budget: Decimal


class LedgerEngine:
    """Answer balance, budget and category questions for an owner."""

    def __init__(
        self,
        store: EventStore,
        *,
        proration: YearlyProration = YearlyProration.CALENDAR_YEAR,
    ):
        self.store = store
        self.proration = proration

    @_logs_rejections
    def load_snapshot(
        self, owner_id: int, account_filter: AccountSelector | int | None = None
    ) -> EventSnapshot:
        """Fetch and validate everything needed for one owner and account scope."""

        return self._load(owner_id, account_filter)

    def _load(self, owner_id: int, account_filter: AccountSelector | int | None) -> EventSnapshot:
        selector = AccountSelector.coerce(account_filter)
        snapshot = EventSnapshot(
            owner_id=owner_id,
            accounts=tuple(self.store.list_accounts(owner_id)),
            incomes=tuple(self.store.list_income_events(owner_id, selector)),
            expenses=tuple(self.store.list_expense_events(owner_id, selector)),
            budgets=tuple(self.store.list_budgets(owner_id)),
            savings_goals=tuple(self.store.list_savings_goals(owner_id)),
            categories=tuple(self.store.list_categories(owner_id)),
        )
        validate_snapshot(snapshot, selector)
        logger.debug(
            "Loaded ledger snapshot",
            extra={
                "owner_id": owner_id,
                "account_scope": selector.scope,
                "account_id": selector.account_id,
                "incomes": len(snapshot.incomes),
                "expenses": len(snapshot.expenses),
            },
        )
        return snapshot

    def _balance_options(self, snapshot: EventSnapshot, selector: AccountSelector) -> dict[str, Any]:
        return {"account": selector, "proration": self.proration, "accounts": snapshot.accounts}

    @_logs_rejections
    def remaining_balance(
        self, owner_id: int, account_filter: AccountSelector | int | None, year: int, month: int
    ) -> Decimal:
        """Balance available for the account scope at the end of ``(year, month)``."""

        selector = AccountSelector.coerce(account_filter)
        snapshot = self._load(owner_id, selector)
        return balance.remaining_balance(
            snapshot.incomes,
            snapshot.expenses,
            year,
            month,
            **self._balance_options(snapshot, selector),
        )

    @_logs_rejections
    def balance_history(
        self, owner_id: int, account_filter: AccountSelector | int | None = None
    ) -> list[balance.MonthlyBalance]:
        """Running balance after each active month of the account scope."""

        selector = AccountSelector.coerce(account_filter)
        snapshot = self._load(owner_id, selector)
        return balance.balance_history(
            snapshot.incomes, snapshot.expenses, **self._balance_options(snapshot, selector)
        )

    @_logs_rejections
    def remaining_budget(self, owner_id: int, year: int, month: int) -> Decimal:
        """Monthly budget headroom against spend across every account."""

        snapshot = self._load(owner_id, None)
        return budgeting.remaining_budget(snapshot.budgets, snapshot.expenses, year, month)

    @_logs_rejections
    def budget_statuses(self, owner_id: int, on: date) -> list[budgeting.BudgetStatus]:
        """Spend and progress of every budget in the window containing ``on``."""

        snapshot = self._load(owner_id, None)
        return budgeting.budget_statuses(snapshot.budgets, snapshot.expenses, on)

    @_logs_rejections
    def expense_categories(self, owner_id: int) -> list[str]:
        """Default category names followed by the owner's own, without repeats."""

        snapshot = self._load(owner_id, None)
        return _category_names(snapshot)

    @_logs_rejections
    def category_breakdown(
        self,
        owner_id: int,
        account_filter: AccountSelector | int | None,
        year: int,
        month: int,
        *,
        include_empty: bool = False,
    ) -> list[categories.CategoryShare]:
        """Category shares of the month's spend for the account scope.

        With ``include_empty`` every known category is listed, zero rows too.
        """

        snapshot = self._load(owner_id, account_filter)
        names = _category_names(snapshot) if include_empty else ()
        return categories.category_breakdown(snapshot.expenses, year, month, categories=names)

    @_logs_rejections
    def savings_suggestions(
        self, owner_id: int, year: int, month: int
    ) -> list[savings.SavingsSuggestion]:
        snapshot = self._load(owner_id, None)
        return savings.savings_suggestions(snapshot.expenses, year, month)

    @_logs_rejections
    def adjust_savings_goal(self, goal: SavingsGoalRecord, delta: Any) -> SavingsGoalRecord:
        """Pure transform; the caller persists the returned goal."""

        return savings.adjust_savings_goal(goal, delta)

    @_logs_rejections
    def monthly_overview(
        self, owner_id: int, account_filter: AccountSelector | int | None, year: int, month: int
    ) -> MonthlyOverview:
        """Income, spend, balance and budget headroom for one month.

        Income, spend and balance follow the account scope; the budget figures
        always cover every account, as budgets are not account-specific.
        """

        selector = AccountSelector.coerce(account_filter)
        snapshot = self._load(owner_id, selector)
        options = self._balance_options(snapshot, selector)
        full = snapshot if selector.scope == "all" else self._load(owner_id, None)

        monthly_budget = budgeting.monthly_budget_total(snapshot.budgets)
        return MonthlyOverview(
            year=year,
            month=month,
            income=balance.income_for_month(snapshot.incomes, year, month, **options),
            expenses=balance.expense_for_month(snapshot.expenses, year, month, account=selector),
            remaining_balance=balance.remaining_balance(
                snapshot.incomes, snapshot.expenses, year, month, **options
            ),
            monthly_budget=monthly_budget,
            remaining_budget=budgeting.remaining_budget(full.budgets, full.expenses, year, month),
        )


def _category_names(snapshot: EventSnapshot) -> list[str]:
    names = list(DEFAULT_EXPENSE_CATEGORIES)
    for record in snapshot.categories:
        if record.name not in names:
            names.append(record.name)
    return names
