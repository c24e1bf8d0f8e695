"""Period normalization for income amounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..domain.records import IncomePeriod
from .parsing import parse_amount, parse_income_period

MONTHS_PER_YEAR = Decimal(12)


def monthly_equivalent(amount: Any, period: IncomePeriod | str) -> Decimal:
    """Return the per-calendar-month share of ``amount``.

    Monthly amounts pass through unchanged; yearly amounts are divided by
    twelve. No rounding happens here, display code rounds.
    """

    value = parse_amount(amount)
    if parse_income_period(period) is IncomePeriod.YEARLY:
        return value / MONTHS_PER_YEAR
    return value
