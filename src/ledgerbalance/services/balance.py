"""Rolling account balance with month-by-month carry-forward.

The balance at month M is the sum of the net (income minus expenses) of
every earlier month that had any activity, plus the net of M itself. Yearly
incomes are spread as 1/12 over each month of their own calendar year.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from ..domain.records import (
    AccountRecord,
    AccountSelector,
    ExpenseEvent,
    IncomeEvent,
    IncomePeriod,
    MonthKey,
    YearlyProration,
)
from .bucketing import active_months, month_bucket, month_key
from .periods import monthly_equivalent

ZERO = Decimal("0")


@dataclass(slots=True)
class MonthlyBalance:
    """One row of the running balance table."""

    month: MonthKey
    income: Decimal
    expenses: Decimal
    balance: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


def _yearly_share_applies(
    income: IncomeEvent,
    key: MonthKey,
    proration: YearlyProration,
    accounts: Sequence[AccountRecord],
) -> bool:
    """Whether a yearly income's 1/12 share lands in ``key``."""

    if proration is YearlyProration.CALENDAR_YEAR:
        return True
    account = next((acct for acct in accounts if acct.id == income.account_id), None)
    if account is None or account.created_on is None:
        return True
    return key >= month_key(account.created_on)


def income_for_month(
    incomes: Iterable[IncomeEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
    proration: YearlyProration = YearlyProration.CALENDAR_YEAR,
    accounts: Sequence[AccountRecord] = (),
) -> Decimal:
    """Monthly incomes dated in the month plus 1/12 of the year's yearly incomes."""

    key = month_bucket(year, month)
    selector = AccountSelector.coerce(account)
    total = ZERO
    for income in incomes:
        if not selector.matches(income.account_id):
            continue
        if income.period is IncomePeriod.YEARLY:
            # Prorated by calendar year, not by months remaining after the deposit.
            if income.occurred_on.year == key.year and _yearly_share_applies(
                income, key, proration, accounts
            ):
                total += monthly_equivalent(income.amount, income.period)
        elif month_key(income.occurred_on) == key:
            total += income.amount
    return total


def expense_for_month(
    expenses: Iterable[ExpenseEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
) -> Decimal:
    """Sum of expenses dated in the month."""

    key = month_bucket(year, month)
    selector = AccountSelector.coerce(account)
    return sum(
        (
            expense.amount
            for expense in expenses
            if selector.matches(expense.account_id) and month_key(expense.occurred_on) == key
        ),
        ZERO,
    )


def net_for_month(
    incomes: Iterable[IncomeEvent],
    expenses: Iterable[ExpenseEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
    proration: YearlyProration = YearlyProration.CALENDAR_YEAR,
    accounts: Sequence[AccountRecord] = (),
) -> Decimal:
    """Income minus expenses for one month."""

    income = income_for_month(
        incomes, year, month, account=account, proration=proration, accounts=accounts
    )
    return income - expense_for_month(expenses, year, month, account=account)


def carry_forward_balance(
    incomes: Sequence[IncomeEvent],
    expenses: Sequence[ExpenseEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
    proration: YearlyProration = YearlyProration.CALENDAR_YEAR,
    accounts: Sequence[AccountRecord] = (),
) -> Decimal:
    """Accumulated net of every active month strictly before ``(year, month)``.

    Only months holding a dated income or expense are visited, so the cost
    grows with the number of active months rather than the calendar span.
    """

    cutoff = month_bucket(year, month)
    running_total = ZERO
    for key in active_months(incomes, expenses, before=cutoff, account=account):
        running_total += net_for_month(
            incomes,
            expenses,
            key.year,
            key.month,
            account=account,
            proration=proration,
            accounts=accounts,
        )
    return running_total


def remaining_balance(
    incomes: Sequence[IncomeEvent],
    expenses: Sequence[ExpenseEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
    proration: YearlyProration = YearlyProration.CALENDAR_YEAR,
    accounts: Sequence[AccountRecord] = (),
) -> Decimal:
    """Carry-forward balance before the month plus the month's own net."""

    options = {"account": account, "proration": proration, "accounts": accounts}
    carried = carry_forward_balance(incomes, expenses, year, month, **options)
    return carried + net_for_month(incomes, expenses, year, month, **options)


def balance_history(
    incomes: Sequence[IncomeEvent],
    expenses: Sequence[ExpenseEvent],
    *,
    account: AccountSelector | int | None = None,
    proration: YearlyProration = YearlyProration.CALENDAR_YEAR,
    accounts: Sequence[AccountRecord] = (),
) -> list[MonthlyBalance]:
    """Return the running balance after each active month, oldest first.

    The last row's ``balance`` equals ``remaining_balance`` for that month, and
    each row's balance is the carry-forward for the next active month.
    """

    months = active_months(incomes, expenses, before=None, account=account)
    running_total = ZERO
    rows: list[MonthlyBalance] = []
    for key in months:
        income = income_for_month(
            incomes, key.year, key.month, account=account, proration=proration, accounts=accounts
        )
        spent = expense_for_month(expenses, key.year, key.month, account=account)
        running_total += income - spent
        rows.append(MonthlyBalance(month=key, income=income, expenses=spent, balance=running_total))
    return rows
