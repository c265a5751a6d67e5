"""Budget alerts and goal tracking.

``evaluate`` compares projected spend with the configured limits.  The
helpers below it validate user-edited category limits and summarize progress
towards the savings goal.
"""

from __future__ import annotations

import json
import math
from typing import Dict, List, Mapping, Optional

from .models import Alert, AlertKind, BudgetConfig, Category, Goal


class BudgetValidationError(ValueError):
    """Raised when user-supplied budget data cannot be accepted."""


def evaluate(
    category_forecasts: Mapping[Category, Optional[float]],
    total_forecast: Optional[float],
    budget: BudgetConfig,
) -> List[Alert]:
    """Return alerts for every forecast that exceeds its limit.

    Category alerts come first, in category declaration order, followed by the
    total alert.  A category limit of zero counts as not configured.

    Example:
        >>> budget = BudgetConfig(monthly=30000, byCategory={"Groceries": 8000})
        >>> evaluate({Category.GROCERIES: 9000}, 20000, budget)  # doctest: +SKIP
        [Alert(kind=<AlertKind.CATEGORY: 'category'>, projected=9000, limit=8000.0, ...)]
    """
    alerts: List[Alert] = []
    for category in Category:
        projected = category_forecasts.get(category)
        limit = budget.per_category_limit.get(category)
        if projected is None or not limit:
            continue
        if projected > limit:
            alerts.append(Alert(kind=AlertKind.CATEGORY, category=category, projected=projected, limit=limit))

    if total_forecast is not None and total_forecast > budget.monthly_limit:
        alerts.append(Alert(kind=AlertKind.TOTAL, projected=total_forecast, limit=budget.monthly_limit))
    return alerts


def parse_category_limits(text: str) -> Dict[Category, float]:
    """Parse the JSON category-budget editor contents.

    Args:
        text: JSON object mapping category names to limits,
            e.g. ``{"Groceries": 8000}``

    Returns:
        Mapping of category to limit

    Raises:
        BudgetValidationError: If the text is not a JSON object of known
            categories with non-negative numeric limits
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BudgetValidationError(f"Invalid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise BudgetValidationError("Category budgets must be a JSON object")

    limits: Dict[Category, float] = {}
    for name, value in data.items():
        try:
            category = Category(name)
        except ValueError as e:
            raise BudgetValidationError(f"Unknown category '{name}'") from e
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise BudgetValidationError(f"Budget for '{name}' must be a number")
        if not math.isfinite(value):
            raise BudgetValidationError(f"Budget for '{name}' must be finite")
        if value < 0:
            raise BudgetValidationError(f"Budget for '{name}' cannot be negative")
        limits[category] = float(value)
    return limits


def goal_progress(goal: Goal) -> Dict[str, float]:
    """Remaining amount and fraction saved (clamped to 0..1)."""
    remaining = goal.target - goal.saved
    progress = goal.saved / goal.target if goal.target > 0 else 0.0
    return {
        'remaining': remaining,
        'progress': min(max(progress, 0.0), 1.0),
    }
