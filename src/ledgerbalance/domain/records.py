"""Immutable ledger records consumed by the balance services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Optional

from ..errors import LedgerError


class IncomePeriod(str, Enum):
    """How an income amount is spread across calendar months."""

    MONTHLY = "monthly"
    YEARLY = "yearly"


class BudgetPeriod(str, Enum):
    """Window a budget limit applies to."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class YearlyProration(str, Enum):
    """Which months of its calendar year a yearly income is spread over.

    ``CALENDAR_YEAR`` gives every month of the year a 1/12 share.
    ``ACCOUNT_LIFETIME`` withholds the share from months before the month the
    receiving account was created; withheld shares are not redistributed.
    """

    CALENDAR_YEAR = "calendar_year"
    ACCOUNT_LIFETIME = "account_lifetime"


class MonthKey(NamedTuple):
    """A calendar month; tuple ordering is chronological."""

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True, slots=True)
class AccountSelector:
    """Which account's events a query sees.

    Matching is exact equality on the event's account reference; events with
    no reference form their own ``unassigned`` bucket and are never shared
    with named accounts.
    """

    scope: str = "all"  # all | unassigned | account
    account_id: Optional[int] = None

    @classmethod
    def all(cls) -> "AccountSelector":
        return cls()

    @classmethod
    def unassigned(cls) -> "AccountSelector":
        return cls(scope="unassigned")

    @classmethod
    def account(cls, account_id: int) -> "AccountSelector":
        return cls(scope="account", account_id=account_id)

    @classmethod
    def coerce(cls, value: "AccountSelector | int | None") -> "AccountSelector":
        """Accept a selector, a bare account id, or ``None`` (all accounts)."""

        if value is None:
            return cls.all()
        if isinstance(value, AccountSelector):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise LedgerError(
                f"account filter must be an account id or selector (got {value!r})",
                field="account_filter",
                value=value,
            )
        return cls.account(value)

    def matches(self, account_id: Optional[int]) -> bool:
        if self.scope == "all":
            return True
        if self.scope == "unassigned":
            return account_id is None
        return account_id == self.account_id


@dataclass(frozen=True, slots=True)
class AccountRecord:
    """A wallet/card partition of one owner's events."""

    id: int
    owner_id: int
    name: str = ""
    is_default: bool = False
    created_on: Optional[date] = None


@dataclass(frozen=True, slots=True)
class IncomeEvent:
    """A single deposit; yearly records are annual sums, not schedules."""

    id: int
    owner_id: int
    amount: Decimal
    occurred_on: date
    period: IncomePeriod = IncomePeriod.MONTHLY
    account_id: Optional[int] = None
    note: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExpenseEvent:
    """A single outflow labelled with a frozen category string."""

    id: int
    owner_id: int
    amount: Decimal
    occurred_on: date
    category: str = "other"
    account_id: Optional[int] = None
    description: Optional[str] = None
    payment_method: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BudgetRecord:
    """Spending ceiling for a category over a period."""

    id: int
    owner_id: int
    category: str
    limit: Decimal
    period: BudgetPeriod = BudgetPeriod.MONTHLY


@dataclass(frozen=True, slots=True)
class SavingsGoalRecord:
    """Savings target; ``current_amount`` may exceed ``target_amount``."""

    id: int
    owner_id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: Optional[date] = None


@dataclass(frozen=True, slots=True)
class CategoryRecord:
    """An owner-defined expense category name."""

    id: int
    owner_id: int
    name: str


@dataclass(frozen=True, slots=True)
class EventSnapshot:
    """Everything the calculators need for one owner, fetched in full."""

    owner_id: int
    accounts: tuple[AccountRecord, ...] = field(default_factory=tuple)
    incomes: tuple[IncomeEvent, ...] = field(default_factory=tuple)
    expenses: tuple[ExpenseEvent, ...] = field(default_factory=tuple)
    budgets: tuple[BudgetRecord, ...] = field(default_factory=tuple)
    savings_goals: tuple[SavingsGoalRecord, ...] = field(default_factory=tuple)
    categories: tuple[CategoryRecord, ...] = field(default_factory=tuple)

    def account(self, account_id: int | None) -> AccountRecord | None:
        """Return the owner's account with ``account_id`` if present."""

        if account_id is None:
            return None
        return next((acct for acct in self.accounts if acct.id == account_id), None)
