"""Savings goal adjustments and spend-based suggestions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Iterable

from ..constants.categories import SUGGESTION_THRESHOLDS
from ..domain.records import ExpenseEvent, SavingsGoalRecord
from ..errors import InvalidAmount
from .categories import category_totals

ZERO = Decimal("0")
HUNDRED = Decimal("100")

SUGGESTION_MESSAGES = {
    "food": "Consider cutting food spending by cooking at home more often",
    "leisure": "Cut back on leisure spending by looking for free activities",
}


@dataclass(frozen=True, slots=True)
class SavingsSuggestion:
    """A hint raised when a category takes too large a share of the month."""

    category: str
    share: Decimal
    message: str


def _parse_delta(delta: Any) -> Decimal:
    if isinstance(delta, bool) or delta is None:
        raise InvalidAmount("delta must be a number", field="delta", value=delta)
    value = Decimal(str(delta)) if isinstance(delta, (int, float)) else delta
    if not isinstance(value, Decimal) or not value.is_finite():
        raise InvalidAmount("delta must be a finite number", field="delta", value=delta)
    return value


def adjust_savings_goal(goal: SavingsGoalRecord, delta: Any) -> SavingsGoalRecord:
    """Return a copy of ``goal`` with ``delta`` applied to its current amount.

    The result is clamped at zero. Going past the target is allowed and means
    the goal was surpassed. Persisting the new record is the caller's job.
    """

    amount = max(ZERO, goal.current_amount + _parse_delta(delta))
    return replace(goal, current_amount=amount)


def savings_progress(goal: SavingsGoalRecord) -> Decimal:
    """Percentage of the target reached, capped at 100; zero for a zero target."""

    if goal.target_amount <= 0:
        return ZERO
    return min(goal.current_amount / goal.target_amount * HUNDRED, HUNDRED)


def savings_suggestions(
    expenses: Iterable[ExpenseEvent], year: int, month: int
) -> list[SavingsSuggestion]:
    """Suggest cuts for categories whose share of the month's spend is too high."""

    totals = category_totals(expenses, year, month)
    month_total = sum(totals.values(), ZERO)
    if month_total <= 0:
        return []

    suggestions = []
    for category, threshold in SUGGESTION_THRESHOLDS.items():
        share = totals.get(category, ZERO) / month_total * HUNDRED
        if share > threshold:
            suggestions.append(
                SavingsSuggestion(
                    category=category, share=share, message=SUGGESTION_MESSAGES[category]
                )
            )
    return suggestions
