"""Budgeting domain services."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from ..domain.records import BudgetPeriod, BudgetRecord, ExpenseEvent
from .balance import expense_for_month

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(slots=True)
class BudgetStatus:
    """Lightweight DTO for reporting a budget against its window's spend."""

    budget: BudgetRecord
    spent: Decimal
    progress: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.budget.limit - self.spent

    @property
    def over_budget(self) -> bool:
        return self.spent > self.budget.limit


def monthly_budget_total(budgets: Iterable[BudgetRecord]) -> Decimal:
    """Sum of limits over monthly budgets.

    Weekly and yearly budgets are left out of this total on purpose.
    """

    return sum((b.limit for b in budgets if b.period is BudgetPeriod.MONTHLY), ZERO)


def remaining_budget(
    budgets: Iterable[BudgetRecord],
    expenses: Iterable[ExpenseEvent],
    year: int,
    month: int,
) -> Decimal:
    """Monthly budget total minus all-category spend for the month."""

    return monthly_budget_total(budgets) - expense_for_month(expenses, year, month)


def budget_window(period: BudgetPeriod, on: date) -> tuple[date, date]:
    """Return the inclusive window of ``period`` that contains ``on``.

    Weeks run Monday to Sunday.
    """

    if period is BudgetPeriod.WEEKLY:
        start = on - timedelta(days=on.weekday())
        return start, start + timedelta(days=6)
    if period is BudgetPeriod.YEARLY:
        return date(on.year, 1, 1), date(on.year, 12, 31)
    last_day = calendar.monthrange(on.year, on.month)[1]
    return date(on.year, on.month, 1), date(on.year, on.month, last_day)


def budget_spent(budget: BudgetRecord, expenses: Iterable[ExpenseEvent], on: date) -> Decimal:
    """Spend in the budget's category inside the window containing ``on``."""

    start, end = budget_window(budget.period, on)
    return sum(
        (
            e.amount
            for e in expenses
            if e.category == budget.category and start <= e.occurred_on <= end
        ),
        ZERO,
    )


def budget_progress(spent: Decimal, limit: Decimal) -> Decimal:
    """Percentage of the limit used, capped at 100; zero for a zero limit."""

    if limit <= 0:
        return ZERO
    return min(spent / limit * HUNDRED, HUNDRED)


def budget_statuses(
    budgets: Sequence[BudgetRecord], expenses: Sequence[ExpenseEvent], on: date
) -> list[BudgetStatus]:
    """Compose spend and progress for every budget as of ``on``."""

    statuses = []
    for budget in budgets:
        spent = budget_spent(budget, expenses, on)
        statuses.append(
            BudgetStatus(budget=budget, spent=spent, progress=budget_progress(spent, budget.limit))
        )
    return statuses
