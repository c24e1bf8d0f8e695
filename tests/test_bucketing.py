"""Tests for month bucketing of dated events."""

from __future__ import annotations

from datetime import date

import pytest

from ledgerbalance.domain.records import AccountSelector, MonthKey
from ledgerbalance.errors import InvalidDate, LedgerError
from ledgerbalance.services.bucketing import active_months, group_by_month, month_bucket, month_key


def test_month_key_orders_chronologically():
    assert month_key(date(2024, 12, 31)) < month_key(date(2025, 1, 1))
    assert str(MonthKey(2025, 3)) == "2025-03"


def test_group_by_month_keeps_input_order(make_expense):
    first = make_expense(10, date(2025, 1, 20))
    second = make_expense(20, date(2025, 1, 5))
    third = make_expense(30, date(2025, 2, 1))

    buckets = group_by_month([first, second, third])

    assert buckets == {MonthKey(2025, 1): [first, second], MonthKey(2025, 2): [third]}


def test_active_months_are_distinct_sorted_and_before_cutoff(make_income, make_expense):
    incomes = [make_income(100, date(2025, 3, 1)), make_income(100, date(2024, 11, 1))]
    expenses = [
        make_expense(5, date(2025, 3, 9)),
        make_expense(5, date(2025, 1, 2)),
        make_expense(5, date(2025, 4, 2)),
    ]

    months = active_months(incomes, expenses, before=(2025, 4))

    assert months == [MonthKey(2024, 11), MonthKey(2025, 1), MonthKey(2025, 3)]


def test_active_months_respect_account_selector(make_income, make_expense):
    incomes = [make_income(100, date(2025, 1, 1), account_id=1)]
    expenses = [
        make_expense(5, date(2025, 2, 1), account_id=2),
        make_expense(5, date(2025, 3, 1)),
    ]

    assert active_months(incomes, expenses, before=(2026, 1), account=1) == [MonthKey(2025, 1)]
    assert active_months(incomes, expenses, before=(2026, 1), account=AccountSelector.account(2)) == [
        MonthKey(2025, 2)
    ]
    assert active_months(incomes, expenses, before=(2026, 1), account=AccountSelector.unassigned()) == [
        MonthKey(2025, 3)
    ]


def test_active_months_without_cutoff_lists_everything(make_expense):
    expenses = [make_expense(1, date(2030, 6, 1)), make_expense(1, date(2020, 6, 1))]

    assert active_months(expenses, before=None) == [MonthKey(2020, 6), MonthKey(2030, 6)]


def test_no_events_means_no_months():
    assert active_months([], [], before=(2025, 1)) == []


class TestMonthBucket:
    def test_valid_pair(self):
        assert month_bucket(2025, 12) == MonthKey(2025, 12)

    @pytest.mark.parametrize("year, month", [(2025, 0), (2025, 13), (2025, True), (2025, "3"), ("2025", 3)])
    def test_rejects_bad_pairs(self, year, month):
        with pytest.raises(InvalidDate):
            month_bucket(year, month)


class TestAccountSelectorCoerce:
    def test_accepts_none_ids_and_selectors(self):
        assert AccountSelector.coerce(None) == AccountSelector.all()
        assert AccountSelector.coerce(4) == AccountSelector.account(4)
        assert AccountSelector.coerce(AccountSelector.unassigned()).scope == "unassigned"

    @pytest.mark.parametrize("value", [True, False, "1", 1.0])
    def test_rejects_non_id_values(self, value):
        with pytest.raises(LedgerError) as excinfo:
            AccountSelector.coerce(value)

        assert excinfo.value.field == "account_filter"
