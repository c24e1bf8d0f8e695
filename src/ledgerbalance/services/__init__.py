"""Service module exports."""

from . import (
    accounts,
    balance,
    bucketing,
    budgeting,
    categories,
    engine,
    parsing,
    periods,
    savings,
)

__all__ = [
    "accounts",
    "balance",
    "bucketing",
    "budgeting",
    "categories",
    "engine",
    "parsing",
    "periods",
    "savings",
]
