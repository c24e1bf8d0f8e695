"""Per-category spend shares for a month."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..domain.records import AccountSelector, ExpenseEvent
from .bucketing import month_bucket, month_key

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class CategoryShare:
    """Total spent in a category and its share of the month's spend."""

    category: str
    amount: Decimal
    percentage: Decimal


def category_totals(
    expenses: Iterable[ExpenseEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
) -> dict[str, Decimal]:
    """Roll up the month's expense totals by category label."""

    key = month_bucket(year, month)
    selector = AccountSelector.coerce(account)
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        if not selector.matches(expense.account_id):
            continue
        if month_key(expense.occurred_on) != key:
            continue
        totals[expense.category] = totals.get(expense.category, ZERO) + expense.amount
    return totals


def category_breakdown(
    expenses: Iterable[ExpenseEvent],
    year: int,
    month: int,
    *,
    account: AccountSelector | int | None = None,
    categories: Iterable[str] = (),
    suppress_zero: bool = False,
) -> list[CategoryShare]:
    """Return ``CategoryShare`` rows for the month, largest first.

    Names in ``categories`` with no spend are listed with a zero amount unless
    ``suppress_zero`` is set. When the month has no spend every percentage is
    zero.
    """

    totals = category_totals(expenses, year, month, account=account)
    for name in categories:
        totals.setdefault(name, ZERO)
    grand_total = sum(totals.values(), ZERO)

    breakdown: list[CategoryShare] = []
    for name, amount in totals.items():
        if suppress_zero and amount == 0:
            continue
        if grand_total > 0:
            percentage = max(ZERO, min(amount / grand_total * HUNDRED, HUNDRED))
        else:
            percentage = ZERO
        breakdown.append(CategoryShare(category=name, amount=amount, percentage=percentage))
    breakdown.sort(key=lambda share: (-share.amount, share.category))
    return breakdown
