"""LedgerBalance: derived balances, budgets and category shares for personal ledgers."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, TestConfig
from .services.engine import LedgerEngine

__all__ = ["BaseConfig", "DevConfig", "LedgerEngine", "TestConfig"]
