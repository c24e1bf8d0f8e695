"""Boundary parsing from loosely typed payloads into ledger records.

Payloads arrive as the JSON shape the CRUD layer stores (``amount``, ``date``,
``period``, ``accountId`` ...). Everything is validated here so the
calculators never see a negative, NaN, or unparsable value.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..constants.categories import DEFAULT_CATEGORY
from ..domain.records import (
    AccountRecord,
    BudgetPeriod,
    BudgetRecord,
    CategoryRecord,
    ExpenseEvent,
    IncomeEvent,
    IncomePeriod,
    SavingsGoalRecord,
)
from ..errors import InvalidAmount, InvalidDate, InvalidPeriod, LedgerError


def parse_amount(value: Any, *, field: str = "amount") -> Decimal:
    """Return ``value`` as a finite, non-negative ``Decimal``."""

    if value is None or isinstance(value, bool):
        raise InvalidAmount(f"{field} is required and must be a number", field=field, value=value)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        # str() keeps 0.1 as Decimal("0.1") rather than its binary expansion
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidAmount(f"{field} is not a number: {value!r}", field=field, value=value) from exc
    else:
        raise InvalidAmount(f"{field} has unsupported type {type(value).__name__}", field=field, value=value)

    if not amount.is_finite():
        raise InvalidAmount(f"{field} must be finite", field=field, value=value)
    if amount < 0:
        raise InvalidAmount(f"{field} must not be negative", field=field, value=value)
    return amount


def parse_date(value: Any, *, field: str = "date") -> date:
    """Return ``value`` as a calendar date.

    Accepts dates, datetimes (date part is kept) and ISO-8601 strings, with or
    without a time component.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidDate(f"{field} is not a valid date: {value!r}", field=field, value=value) from exc
    raise InvalidDate(f"{field} is required and must be a date", field=field, value=value)


def _parse_optional_date(value: Any, *, field: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return parse_date(value, field=field)


def parse_income_period(value: Any) -> IncomePeriod:
    """Return the income period for a tag such as ``"monthly"``."""

    return _parse_enum(IncomePeriod, value, field="period")


def parse_budget_period(value: Any) -> BudgetPeriod:
    """Return the budget period for a tag such as ``"weekly"``."""

    return _parse_enum(BudgetPeriod, value, field="period")


def _parse_enum(enum_cls, value: Any, *, field: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_cls)
    raise InvalidPeriod(f"{field} must be one of: {allowed} (got {value!r})", field=field, value=value)


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key; payloads use both camelCase and snake_case."""

    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _parse_id(value: Any, *, field: str) -> int:
    if isinstance(value, bool):
        raise LedgerError(f"{field} must be an integer id", field=field, value=value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise LedgerError(f"{field} must be an integer id", field=field, value=value) from exc


def _parse_optional_id(value: Any, *, field: str) -> Optional[int]:
    if value is None or value == "":
        return None
    return _parse_id(value, field=field)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_account(payload: Mapping[str, Any]) -> AccountRecord:
    """Build an ``AccountRecord`` from a payload."""

    return AccountRecord(
        id=_parse_id(_pick(payload, "id"), field="id"),
        owner_id=_parse_id(_pick(payload, "owner_id", "userId", "user_id"), field="owner_id"),
        name=str(_pick(payload, "name", default="")),
        is_default=bool(_pick(payload, "is_default", "isDefault", default=False)),
        created_on=_parse_optional_date(
            _pick(payload, "created_on", "createdAt", "created_at"), field="created_on"
        ),
    )


def parse_income_event(payload: Mapping[str, Any]) -> IncomeEvent:
    """Build an ``IncomeEvent``; a missing period means monthly."""

    return IncomeEvent(
        id=_parse_id(_pick(payload, "id"), field="id"),
        owner_id=_parse_id(_pick(payload, "owner_id", "userId", "user_id"), field="owner_id"),
        amount=parse_amount(_pick(payload, "amount")),
        occurred_on=parse_date(_pick(payload, "date", "occurred_on")),
        period=parse_income_period(_pick(payload, "period", default=IncomePeriod.MONTHLY)),
        account_id=_parse_optional_id(_pick(payload, "account_id", "accountId"), field="account_id"),
        note=_optional_text(_pick(payload, "note", "description")),
    )


def parse_expense_event(payload: Mapping[str, Any]) -> ExpenseEvent:
    """Build an ``ExpenseEvent``; a blank category becomes ``other``."""

    category = _optional_text(_pick(payload, "category")) or DEFAULT_CATEGORY
    return ExpenseEvent(
        id=_parse_id(_pick(payload, "id"), field="id"),
        owner_id=_parse_id(_pick(payload, "owner_id", "userId", "user_id"), field="owner_id"),
        amount=parse_amount(_pick(payload, "amount")),
        occurred_on=parse_date(_pick(payload, "date", "occurred_on")),
        category=category,
        account_id=_parse_optional_id(_pick(payload, "account_id", "accountId"), field="account_id"),
        description=_optional_text(_pick(payload, "description")),
        payment_method=_optional_text(_pick(payload, "payment_method", "paymentMethod")),
    )


def parse_budget(payload: Mapping[str, Any]) -> BudgetRecord:
    """Build a ``BudgetRecord``; any stored ``spent`` value is ignored."""

    return BudgetRecord(
        id=_parse_id(_pick(payload, "id"), field="id"),
        owner_id=_parse_id(_pick(payload, "owner_id", "userId", "user_id"), field="owner_id"),
        category=_optional_text(_pick(payload, "category")) or DEFAULT_CATEGORY,
        limit=parse_amount(_pick(payload, "limit"), field="limit"),
        period=parse_budget_period(_pick(payload, "period", default=BudgetPeriod.MONTHLY)),
    )


def parse_savings_goal(payload: Mapping[str, Any]) -> SavingsGoalRecord:
    """Build a ``SavingsGoalRecord``; current amount defaults to zero."""

    return SavingsGoalRecord(
        id=_parse_id(_pick(payload, "id"), field="id"),
        owner_id=_parse_id(_pick(payload, "owner_id", "userId", "user_id"), field="owner_id"),
        name=str(_pick(payload, "name", default="")),
        target_amount=parse_amount(
            _pick(payload, "target_amount", "targetAmount"), field="target_amount"
        ),
        current_amount=parse_amount(
            _pick(payload, "current_amount", "currentAmount", default=0), field="current_amount"
        ),
        deadline=_parse_optional_date(_pick(payload, "deadline"), field="deadline"),
    )


def parse_category(payload: Mapping[str, Any]) -> CategoryRecord:
    """Build a ``CategoryRecord``; the name must be non-blank."""

    name = _optional_text(_pick(payload, "name"))
    if name is None:
        raise LedgerError("category name must not be blank", field="name", value=payload.get("name"))
    return CategoryRecord(
        id=_parse_id(_pick(payload, "id"), field="id"),
        owner_id=_parse_id(_pick(payload, "owner_id", "userId", "user_id"), field="owner_id"),
        name=name,
    )
