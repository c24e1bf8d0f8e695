"""Pytest configuration and shared fixtures for LedgerBalance tests.

This module provides database fixtures, record factories and helper utilities
for testing the calculators, the event stores and the engine facade without
touching a real application database.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from itertools import count
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from ledgerbalance.config import TestConfig

# Import all models to ensure they're registered with SQLModel metadata
from ledgerbalance.models import Account, Budget, Expense, ExpenseCategory, Income, SavingsGoal  # noqa: F401
from ledgerbalance.domain.records import (
    AccountRecord,
    BudgetPeriod,
    BudgetRecord,
    CategoryRecord,
    ExpenseEvent,
    IncomeEvent,
    IncomePeriod,
    SavingsGoalRecord,
)

OWNER_ID = 1


@pytest.fixture(autouse=True)
def _isolated_data_dir(tmp_path, monkeypatch):
    """Keep BaseConfig from creating ./instance during tests."""

    monkeypatch.setenv("LEDGERBALANCE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("LEDGERBALANCE_YEARLY_PRORATION", raising=False)
    monkeypatch.delenv("LEDGERBALANCE_DATABASE_URL", raising=False)


@pytest.fixture
def ledger_config(_isolated_data_dir):
    """``TestConfig`` rooted in the per-test data directory."""

    return TestConfig()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for a single test."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the event store expects."""

    @contextmanager
    def factory():
        session = Session(db_engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


# =============================================================================
# Table Row Factories
# =============================================================================


@pytest.fixture
def account_row_factory(db_session):
    """Factory for persisted ``Account`` rows."""

    def _create(name: str = "Main wallet", owner_id: int = OWNER_ID, is_default: bool = False):
        account = Account(name=name, owner_id=owner_id, is_default=is_default)
        db_session.add(account)
        db_session.commit()
        db_session.refresh(account)
        return account

    return _create


@pytest.fixture
def income_row_factory(db_session):
    """Factory for persisted ``Income`` rows."""

    def _create(
        amount: str | Decimal,
        occurred_on: date,
        period: str = "monthly",
        account_id: int | None = None,
        owner_id: int = OWNER_ID,
    ):
        income = Income(
            amount=Decimal(amount),
            occurred_on=occurred_on,
            period=period,
            account_id=account_id,
            owner_id=owner_id,
        )
        db_session.add(income)
        db_session.commit()
        db_session.refresh(income)
        return income

    return _create


@pytest.fixture
def expense_row_factory(db_session):
    """Factory for persisted ``Expense`` rows."""

    def _create(
        amount: str | Decimal,
        occurred_on: date,
        category: str = "other",
        account_id: int | None = None,
        owner_id: int = OWNER_ID,
    ):
        expense = Expense(
            amount=Decimal(amount),
            occurred_on=occurred_on,
            category=category,
            account_id=account_id,
            owner_id=owner_id,
        )
        db_session.add(expense)
        db_session.commit()
        db_session.refresh(expense)
        return expense

    return _create


# =============================================================================
# Domain Record Factories
# =============================================================================


@pytest.fixture
def make_income():
    """Build ``IncomeEvent`` records with sequential ids."""

    ids = count(1)

    def _make(
        amount,
        occurred_on: date,
        period: IncomePeriod = IncomePeriod.MONTHLY,
        account_id: int | None = None,
        owner_id: int = OWNER_ID,
    ) -> IncomeEvent:
        return IncomeEvent(
            id=next(ids),
            owner_id=owner_id,
            amount=Decimal(str(amount)),
            occurred_on=occurred_on,
            period=period,
            account_id=account_id,
        )

    return _make


@pytest.fixture
def make_expense():
    """Build ``ExpenseEvent`` records with sequential ids."""

    ids = count(1)

    def _make(
        amount,
        occurred_on: date,
        category: str = "other",
        account_id: int | None = None,
        owner_id: int = OWNER_ID,
    ) -> ExpenseEvent:
        return ExpenseEvent(
            id=next(ids),
            owner_id=owner_id,
            amount=Decimal(str(amount)),
            occurred_on=occurred_on,
            category=category,
            account_id=account_id,
        )

    return _make


@pytest.fixture
def make_budget():
    """Build ``BudgetRecord`` records with sequential ids."""

    ids = count(1)

    def _make(
        category: str,
        limit,
        period: BudgetPeriod = BudgetPeriod.MONTHLY,
        owner_id: int = OWNER_ID,
    ) -> BudgetRecord:
        return BudgetRecord(
            id=next(ids),
            owner_id=owner_id,
            category=category,
            limit=Decimal(str(limit)),
            period=period,
        )

    return _make


@pytest.fixture
def make_goal():
    """Build ``SavingsGoalRecord`` records with sequential ids."""

    ids = count(1)

    def _make(target, current=0, name: str = "Holiday", owner_id: int = OWNER_ID) -> SavingsGoalRecord:
        return SavingsGoalRecord(
            id=next(ids),
            owner_id=owner_id,
            name=name,
            target_amount=Decimal(str(target)),
            current_amount=Decimal(str(current)),
        )

    return _make


@pytest.fixture
def make_account():
    """Build ``AccountRecord`` records."""

    def _make(
        account_id: int,
        owner_id: int = OWNER_ID,
        is_default: bool = False,
        created_on: date | None = None,
        name: str = "",
    ) -> AccountRecord:
        return AccountRecord(
            id=account_id,
            owner_id=owner_id,
            name=name or f"Wallet {account_id}",
            is_default=is_default,
            created_on=created_on,
        )

    return _make


@pytest.fixture
def make_category():
    """Build ``CategoryRecord`` records with sequential ids."""

    ids = count(1)

    def _make(name: str, owner_id: int = OWNER_ID) -> CategoryRecord:
        return CategoryRecord(id=next(ids), owner_id=owner_id, name=name)

    return _make
