"""Unit tests for predictive_finance.data_processing."""

from __future__ import annotations

import datetime as dt

from predictive_finance import config
from predictive_finance import data_processing as dp
from predictive_finance.models import Category, Expense


def sample_expenses():
    return [Expense(**row) for row in config.SAMPLE_EXPENSES]


def test_month_key_zero_pads():
    assert dp.month_key(dt.date(2025, 5, 2)) == '2025-05'
    assert dp.month_key('2024-12-31') == '2024-12'


def test_monthly_totals_sample_scenario():
    buckets = dp.monthly_totals(sample_expenses())
    assert [b.month_key for b in buckets] == ['2025-05', '2025-06', '2025-07', '2025-08']
    assert [b.total for b in buckets] == [4399, 2350, 1200, 7300]


def test_monthly_totals_preserves_sum_and_ordering():
    expenses = [
        Expense(id=1, date='2025-10-01', amount=10.5, description='a'),
        Expense(id=2, date='2024-02-01', amount=3, description='b'),
        Expense(id=3, date='2025-09-30', amount=1, description='c'),
        Expense(id=4, date='2025-10-31', amount=2, description='d'),
    ]
    buckets = dp.monthly_totals(expenses)
    keys = [b.month_key for b in buckets]
    assert keys == sorted(set(keys))
    assert keys == ['2024-02', '2025-09', '2025-10']
    assert sum(b.total for b in buckets) == sum(e.amount for e in expenses)


def test_empty_collection():
    assert dp.monthly_totals([]) == []
    assert dp.category_totals([]) == {}
    assert dp.category_history([]) == []
    assert dp.category_series([]) == {}


def test_category_totals():
    totals = dp.category_totals(sample_expenses())
    assert totals[Category.GROCERIES] == 9400
    assert totals[Category.TRANSPORT] == 1999
    assert totals[Category.DINING] == 1150
    assert totals[Category.BILLS] == 1500
    assert totals[Category.SHOPPING] == 1200
    assert sum(totals.values()) == 15249


def test_category_totals_respects_override():
    expenses = [Expense(id=1, date='2025-01-01', amount=5, description='Walmart', category=Category.HEALTH)]
    assert dp.category_totals(expenses) == {Category.HEALTH: 5}


def test_category_history_zero_fills():
    history = dp.category_history(sample_expenses())
    assert [row['month'] for row in history] == ['2025-05', '2025-06', '2025-07', '2025-08']
    may = history[0]
    assert may['Groceries'] == 4200
    assert may['Transport'] == 199
    assert may['Dining'] == 0
    assert may['Shopping'] == 0
    columns = {key for row in history for key in row}
    assert columns == {'month', 'Groceries', 'Transport', 'Dining', 'Bills', 'Shopping'}
    assert all(set(row) == columns for row in history)


def test_category_series_aligned_with_months():
    series = dp.category_series(sample_expenses())
    assert series[Category.GROCERIES] == [4200, 0, 0, 5200]
    assert series[Category.SHOPPING] == [0, 0, 1200, 0]
    assert all(len(values) == 4 for values in series.values())


def test_aggregations_are_repeatable():
    expenses = sample_expenses()
    assert dp.monthly_totals(expenses) == dp.monthly_totals(expenses)
    assert dp.category_totals(expenses) == dp.category_totals(expenses)
    assert dp.category_history(expenses) == dp.category_history(expenses)


def test_expenses_to_frame_categorizes_rows():
    df = dp.expenses_to_frame(sample_expenses())
    assert list(df.columns) == dp.FRAME_COLUMNS
    assert df['Category'].notna().all()
    assert df.loc[df['Description'] == 'Coffee', 'Category'].iloc[0] == 'Dining'
