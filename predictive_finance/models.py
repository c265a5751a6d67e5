"""Typed entities shared across the dashboard.

Persisted entities (expenses, budget configuration and the savings goal) are
pydantic models so that JSON read back from the store is validated at the
boundary.  Derived values (month buckets, alerts, forecasts) are plain
dataclasses recomputed on every read and never persisted.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Closed set of expense categories, in categorizer priority order."""

    GROCERIES = "Groceries"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    BILLS = "Bills"
    DINING = "Dining"
    HEALTH = "Health"
    SHOPPING = "Shopping"
    OTHERS = "Others"

    def __str__(self) -> str:
        return self.value


class AlertKind(str, Enum):
    TOTAL = "total"
    CATEGORY = "category"


class Expense(BaseModel):
    """A single recorded expense.

    ``category`` may be missing in stored data; it is filled in by
    :func:`predictive_finance.category_rules.categorize_expense`.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int
    date: dt.date
    amount: float = Field(ge=0)
    description: str = ""
    category: Optional[Category] = None


class BudgetConfig(BaseModel):
    """Monthly spending limit plus optional per-category limits."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    monthly_limit: float = Field(alias="monthly", ge=0)
    per_category_limit: Dict[Category, float] = Field(default_factory=dict, alias="byCategory")


class Goal(BaseModel):
    """A savings goal tracked alongside spending."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    target: float = Field(ge=0)
    saved: float = 0.0


@dataclass(frozen=True)
class MonthBucket:
    month_key: str
    total: float


@dataclass(frozen=True)
class Alert:
    """A forecast that exceeds a configured limit."""

    kind: AlertKind
    projected: float
    limit: float
    category: Optional[Category] = None


@dataclass(frozen=True)
class Forecasts:
    """Display-ready next-month projections (rounded, floored at zero)."""

    total: int
    by_category: Dict[Category, int] = field(default_factory=dict)
