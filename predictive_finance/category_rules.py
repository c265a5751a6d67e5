"""Category Rules - Keyword-based expense categorization.

Descriptions are matched against an ordered table of keyword rules.  The
table is a list rather than a mapping so the first-declared category always
wins when several categories have a matching keyword.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pandas as pd

from .models import Category, Expense


@dataclass(frozen=True)
class CategoryRule:
    """A category together with the keywords that select it."""
    category: Category
    keywords: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        """Return True if any non-empty keyword occurs in ``text``.

        ``text`` must already be lower-cased.
        """
        for keyword in self.keywords:
            if not keyword:
                continue
            if re.search(re.escape(keyword.lower()), text):
                return True
        return False


CATEGORY_RULES: List[CategoryRule] = [
    CategoryRule(Category.GROCERIES, ("groc", "market", "super", "walmart", "aldi", "pmt", "veg", "fruit")),
    CategoryRule(Category.TRANSPORT, ("uber", "ola", "taxi", "bus", "rail", "metro", "fuel", "petrol", "diesel")),
    CategoryRule(Category.ENTERTAINMENT, ("netflix", "prime", "movie", "spotify", "concert", "game")),
    CategoryRule(Category.BILLS, ("electric", "water", "internet", "gas", "bill", "phone", "rent")),
    CategoryRule(Category.DINING, ("cafe", "restaurant", "dine", "coffee", "cafe")),
    CategoryRule(Category.HEALTH, ("doc", "pharm", "clinic", "hospital", "med", "fitness")),
    CategoryRule(Category.SHOPPING, ("amazon", "flipkart", "mall", "shirt", "clothes", "shoe", "store")),
    CategoryRule(Category.OTHERS, ("",)),
]

# Distance or trip phrasing with no keyword hit
TRIP_PATTERN = re.compile(r"\d+\s?km|journey|trip")


def categorize(description: Optional[str], rules: Optional[List[CategoryRule]] = None) -> Category:
    """Map a free-text description to a category.

    Args:
        description: Expense description; ``None`` and ``""`` are accepted.
        rules: Ordered rule table. Defaults to :data:`CATEGORY_RULES`.

    Returns:
        The first category whose keywords match, ``Transport`` for trip-like
        text, otherwise ``Others``.

    Example:
        >>> categorize("Walmart Groceries")
        <Category.GROCERIES: 'Groceries'>
        >>> categorize("2 km trip")
        <Category.TRANSPORT: 'Transport'>
    """
    text = (description or "").lower()
    for rule in rules if rules is not None else CATEGORY_RULES:
        if rule.matches(text):
            return rule.category

    if TRIP_PATTERN.search(text):
        return Category.TRANSPORT
    return Category.OTHERS


def categorize_expense(expense: Expense) -> Expense:
    """Return ``expense`` with a category, keeping one the caller already set."""
    if expense.category is not None:
        return expense
    return expense.model_copy(update={"category": categorize(expense.description)})


def categorize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Fill the ``Category`` column of an expense DataFrame.

    Rows that already carry a category keep it.

    Args:
        df: DataFrame with a ``Description`` and optionally a ``Category`` column

    Returns:
        Copy of ``df`` with every row categorized
    """
    df = df.copy()
    if 'Category' not in df.columns:
        df['Category'] = None

    category_series = df['Category'].astype('string')
    mask = category_series.fillna('').str.strip().eq('')

    if mask.any():
        descriptions = df.loc[mask, 'Description'] if 'Description' in df.columns else pd.Series('', index=df.index[mask])
        df.loc[mask, 'Category'] = [
            categorize(str(d) if pd.notna(d) else '').value for d in descriptions
        ]
    return df
