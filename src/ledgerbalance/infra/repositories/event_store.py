"""SQLModel implementation of the read-only event store."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...domain.records import (
    AccountRecord,
    AccountSelector,
    BudgetRecord,
    CategoryRecord,
    ExpenseEvent,
    IncomeEvent,
    SavingsGoalRecord,
)
from ...models.account import Account
from ...models.budget import Budget
from ...models.category import ExpenseCategory
from ...models.expense import Expense
from ...models.income import Income
from ...models.savings import SavingsGoal
from ...services.parsing import (
    parse_account,
    parse_budget,
    parse_category,
    parse_expense_event,
    parse_income_event,
    parse_savings_goal,
)


def _scoped(statement, column, account_filter: AccountSelector | None):
    """Narrow a statement to the selector's account bucket."""

    selector = AccountSelector.coerce(account_filter)
    if selector.scope == "unassigned":
        return statement.where(column.is_(None))  # type: ignore[union-attr]
    if selector.scope == "account":
        return statement.where(column == selector.account_id)
    return statement


class SQLModelEventStore:
    """Event store reading SQLModel tables.

    Rows are passed through the boundary parsers, so a corrupt row (negative
    amount, unknown period) raises instead of reaching the calculators.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_accounts(self, owner_id: int) -> list[AccountRecord]:
        with self.session_factory() as session:
            statement = (
                select(Account).where(Account.owner_id == owner_id).order_by(Account.id)  # type: ignore[arg-type]
            )
            return [parse_account(row.model_dump()) for row in session.exec(statement).all()]

    def list_income_events(
        self, owner_id: int, account_filter: AccountSelector | None = None
    ) -> list[IncomeEvent]:
        with self.session_factory() as session:
            statement = select(Income).where(Income.owner_id == owner_id)
            statement = _scoped(statement, Income.account_id, account_filter)
            statement = statement.order_by(Income.occurred_on, Income.id)  # type: ignore[arg-type]
            return [parse_income_event(row.model_dump()) for row in session.exec(statement).all()]

    def list_expense_events(
        self, owner_id: int, account_filter: AccountSelector | None = None
    ) -> list[ExpenseEvent]:
        with self.session_factory() as session:
            statement = select(Expense).where(Expense.owner_id == owner_id)
            statement = _scoped(statement, Expense.account_id, account_filter)
            statement = statement.order_by(Expense.occurred_on, Expense.id)  # type: ignore[arg-type]
            return [parse_expense_event(row.model_dump()) for row in session.exec(statement).all()]

    def list_budgets(self, owner_id: int) -> list[BudgetRecord]:
        with self.session_factory() as session:
            statement = select(Budget).where(Budget.owner_id == owner_id).order_by(Budget.id)  # type: ignore[arg-type]
            return [parse_budget(row.model_dump()) for row in session.exec(statement).all()]

    def list_savings_goals(self, owner_id: int) -> list[SavingsGoalRecord]:
        with self.session_factory() as session:
            statement = (
                select(SavingsGoal)
                .where(SavingsGoal.owner_id == owner_id)
                .order_by(SavingsGoal.id)  # type: ignore[arg-type]
            )
            return [parse_savings_goal(row.model_dump()) for row in session.exec(statement).all()]

    def list_categories(self, owner_id: int) -> list[CategoryRecord]:
        with self.session_factory() as session:
            statement = (
                select(ExpenseCategory)
                .where(ExpenseCategory.owner_id == owner_id)
                .order_by(ExpenseCategory.name)  # type: ignore[arg-type]
            )
            return [parse_category(row.model_dump()) for row in session.exec(statement).all()]
