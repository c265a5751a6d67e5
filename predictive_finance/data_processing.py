"""Monthly and per-category aggregation of expenses.

These are pure functions of the expense collection: they build a pandas
DataFrame from the records and group it by calendar month and category.
Nothing is cached; callers recompute on every change.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Union

import pandas as pd

from .category_rules import categorize_frame
from .models import Category, Expense, MonthBucket

FRAME_COLUMNS = ['id', 'Date', 'Amount', 'Description', 'Category', 'Month']


def month_key(value: Any) -> str:
    """Return the ``YYYY-MM`` key for a date, datetime or ISO date string."""
    ts = pd.Timestamp(value)
    return f"{ts.year:04d}-{ts.month:02d}"


def expenses_to_frame(expenses: Iterable[Expense]) -> pd.DataFrame:
    """Build a categorized DataFrame with one row per expense."""
    rows = [
        {
            'id': e.id,
            'Date': pd.Timestamp(e.date),
            'Amount': float(e.amount),
            'Description': e.description,
            'Category': e.category.value if e.category is not None else None,
            'Month': month_key(e.date),
        }
        for e in expenses
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    if df.empty:
        df['Amount'] = df['Amount'].astype(float)
        return df
    return categorize_frame(df)


def _as_frame(expenses: Union[pd.DataFrame, Iterable[Expense]]) -> pd.DataFrame:
    if isinstance(expenses, pd.DataFrame):
        return expenses
    return expenses_to_frame(expenses)


def monthly_totals(expenses: Union[pd.DataFrame, Iterable[Expense]]) -> List[MonthBucket]:
    """Sum amounts per calendar month.

    Returns:
        One bucket per month present, ascending by month key.  Zero-padded
        keys make the lexicographic sort chronological.
    """
    df = _as_frame(expenses)
    if df.empty:
        return []
    grouped = df.groupby('Month', sort=True)['Amount'].sum()
    return [MonthBucket(month_key=str(key), total=float(total)) for key, total in grouped.items()]


def category_totals(expenses: Union[pd.DataFrame, Iterable[Expense]]) -> Dict[Category, float]:
    """Sum amounts per category, in order of first appearance."""
    df = _as_frame(expenses)
    if df.empty:
        return {}
    grouped = df.groupby('Category', sort=False)['Amount'].sum()
    return {Category(name): float(total) for name, total in grouped.items()}


def _category_matrix(df: pd.DataFrame) -> pd.DataFrame:
    """Month x category totals, zero-filled, categories in first-seen order."""
    matrix = df.pivot_table(
        index='Month',
        columns='Category',
        values='Amount',
        aggfunc='sum',
        fill_value=0.0,
    )
    observed = list(pd.unique(df['Category']))
    return matrix.reindex(columns=observed, fill_value=0.0).sort_index()


def category_history(expenses: Union[pd.DataFrame, Iterable[Expense]]) -> List[Dict[str, Any]]:
    """One row per month with a column per observed category.

    Example:
        >>> category_history(expenses)  # doctest: +SKIP
        [{'month': '2025-05', 'Groceries': 4200.0, 'Transport': 199.0}, ...]
    """
    df = _as_frame(expenses)
    if df.empty:
        return []
    matrix = _category_matrix(df)
    rows: List[Dict[str, Any]] = []
    for month, values in matrix.iterrows():
        row: Dict[str, Any] = {'month': str(month)}
        row.update({str(cat): float(total) for cat, total in values.items()})
        rows.append(row)
    return rows


def category_series(expenses: Union[pd.DataFrame, Iterable[Expense]]) -> Dict[Category, List[float]]:
    """Per-category monthly totals aligned with :func:`monthly_totals`."""
    df = _as_frame(expenses)
    if df.empty:
        return {}
    matrix = _category_matrix(df)
    return {Category(cat): [float(v) for v in matrix[cat].tolist()] for cat in matrix.columns}
