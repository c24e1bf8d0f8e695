"""Group dated ledger events into calendar-month buckets."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Protocol, TypeVar

from ..domain.records import AccountSelector, MonthKey
from ..errors import InvalidDate


class DatedEvent(Protocol):
    """Anything with an occurrence date and an optional account reference."""

    occurred_on: date
    account_id: int | None


E = TypeVar("E", bound=DatedEvent)


def month_key(day: date) -> MonthKey:
    """Return the ``(year, month)`` bucket a date falls in."""

    return MonthKey(day.year, day.month)


def month_bucket(year: int, month: int) -> MonthKey:
    """Validate a caller-supplied ``(year, month)`` pair and return its key."""

    for name, value in (("year", year), ("month", month)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDate(f"{name} must be an integer (got {value!r})", field=name, value=value)
    if not 1 <= month <= 12:
        raise InvalidDate(f"month must be between 1 and 12 (got {month})", field="month", value=month)
    return MonthKey(year, month)


def group_by_month(events: Iterable[E]) -> dict[MonthKey, list[E]]:
    """Bucket events by month, preserving input order inside each bucket."""

    buckets: dict[MonthKey, list[E]] = defaultdict(list)
    for event in events:
        buckets[month_key(event.occurred_on)].append(event)
    return dict(buckets)


def active_months(
    *event_groups: Iterable[DatedEvent],
    before: tuple[int, int] | None,
    account: AccountSelector | int | None = None,
) -> list[MonthKey]:
    """Return distinct months strictly before ``before`` with any activity.

    Every positional argument is an iterable of events (typically incomes and
    expenses); a month counts as active when at least one event matching the
    account selector is dated in it. The result is sorted chronologically.
    ``before=None`` lifts the cutoff.
    """

    cutoff = MonthKey(*before) if before is not None else None
    selector = AccountSelector.coerce(account)
    months: set[MonthKey] = set()
    for events in event_groups:
        for event in events:
            if not selector.matches(event.account_id):
                continue
            key = month_key(event.occurred_on)
            if cutoff is None or key < cutoff:
                months.add(key)
    return sorted(months)
