"""Validation errors raised at the ledger boundary."""

from __future__ import annotations

from typing import Any


class LedgerError(ValueError):
    """Base class for rejected ledger input.

    Subclasses ``ValueError`` so callers that already guard parsing with
    ``except ValueError`` keep working.
    """

    def __init__(self, message: str, *, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidAmount(LedgerError):
    """A monetary value was negative, non-finite, or not a number."""


class InvalidDate(LedgerError):
    """A date could not be parsed into a calendar date."""


class InvalidPeriod(LedgerError):
    """A period tag is outside the enumerated set."""


class AccountMismatch(LedgerError):
    """An account reference does not belong to the querying owner."""


class DuplicateDefaultAccount(LedgerError):
    """More than one account is flagged as default for the same owner."""
