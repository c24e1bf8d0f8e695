"""Default-account rules and ownership checks for wallet accounts."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..domain.records import AccountRecord, AccountSelector, EventSnapshot
from ..errors import AccountMismatch, DuplicateDefaultAccount


def default_account(accounts: Iterable[AccountRecord]) -> Optional[AccountRecord]:
    """Return the owner's default account, or ``None`` if none is flagged."""

    defaults = [acct for acct in accounts if acct.is_default]
    if len(defaults) > 1:
        ids = ", ".join(str(acct.id) for acct in defaults)
        raise DuplicateDefaultAccount(f"multiple default accounts: {ids}", field="is_default")
    return defaults[0] if defaults else None


def set_default_account(
    accounts: Sequence[AccountRecord], account_id: int
) -> tuple[AccountRecord, ...]:
    """Flag ``account_id`` as default and clear the flag everywhere else."""

    if not any(acct.id == account_id for acct in accounts):
        raise AccountMismatch(
            f"account {account_id} is not one of the owner's accounts",
            field="account_id",
            value=account_id,
        )
    return tuple(replace(acct, is_default=acct.id == account_id) for acct in accounts)


def remove_account(
    accounts: Sequence[AccountRecord], account_id: int
) -> tuple[AccountRecord, ...]:
    """Drop an account; promote the lowest-id survivor if it was the default."""

    removed = next((acct for acct in accounts if acct.id == account_id), None)
    remaining = [acct for acct in accounts if acct.id != account_id]
    if removed is None or not removed.is_default or not remaining:
        return tuple(remaining)
    promoted = min(remaining, key=lambda acct: acct.id)
    return tuple(replace(acct, is_default=acct.id == promoted.id) for acct in remaining)


def ensure_owned(owner_id: int, accounts: Iterable[AccountRecord], account_id: Optional[int]) -> None:
    """Raise ``AccountMismatch`` unless a non-null reference is the owner's."""

    if account_id is None:
        return
    for acct in accounts:
        if acct.id == account_id:
            if acct.owner_id != owner_id:
                break
            return
    raise AccountMismatch(
        f"account {account_id} does not belong to owner {owner_id}",
        field="account_id",
        value=account_id,
    )


def validate_snapshot(snapshot: EventSnapshot, account_filter: AccountSelector) -> None:
    """Check every record and the filter itself belong to the snapshot's owner."""

    owner_id = snapshot.owner_id
    if account_filter.scope == "account":
        ensure_owned(owner_id, snapshot.accounts, account_filter.account_id)

    records = (
        *snapshot.incomes,
        *snapshot.expenses,
        *snapshot.budgets,
        *snapshot.savings_goals,
        *snapshot.categories,
    )
    for record in records:
        if record.owner_id != owner_id:
            raise AccountMismatch(
                f"{type(record).__name__} {record.id} belongs to owner {record.owner_id}, "
                f"not {owner_id}",
                field="owner_id",
                value=record.owner_id,
            )
    for event in (*snapshot.incomes, *snapshot.expenses):
        ensure_owned(owner_id, snapshot.accounts, event.account_id)
