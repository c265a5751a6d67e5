"""Application state owned by the presentation layer.

``AppState`` holds the expense list, budget and goal explicitly and passes
the relevant slices to the pure aggregation, forecasting and alert functions.
Every mutation replaces whole values; ``persist`` writes them back to the
store.  Derived values are recomputed by :meth:`AppState.summary` and never
stored.
"""

from __future__ import annotations

import datetime as dt
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .budgets import BudgetValidationError, evaluate, parse_category_limits
from .category_rules import categorize
from .data_processing import category_history, category_totals, expenses_to_frame, monthly_totals
from .forecasting import forecast_spending
from .logging_setup import get_logger
from .models import Alert, BudgetConfig, Category, Expense, Forecasts, Goal, MonthBucket
from .storage import Store, load_budget, load_expenses, load_goal, save_budget, save_expenses, save_goal

logger = get_logger(__name__)


@dataclass
class DashboardSummary:
    """Everything the dashboard renders, derived from one state snapshot."""
    monthly_totals: List[MonthBucket]
    category_totals: Dict[Category, float]
    category_history: List[Dict[str, Any]]
    forecasts: Forecasts
    alerts: List[Alert]

    @property
    def latest_month_spent(self) -> float:
        return self.monthly_totals[-1].total if self.monthly_totals else 0.0


@dataclass
class AppState:
    expenses: List[Expense] = field(default_factory=list)
    budget: BudgetConfig = field(default_factory=lambda: BudgetConfig(monthly=0))
    goal: Goal = field(default_factory=lambda: Goal(name="", target=0))

    @classmethod
    def load(cls, store: Store) -> "AppState":
        """Read state from ``store``, using defaults for anything unusable."""
        return cls(
            expenses=load_expenses(store),
            budget=load_budget(store),
            goal=load_goal(store),
        )

    def persist(self, store: Store) -> None:
        save_expenses(store, self.expenses)
        save_budget(store, self.budget)
        save_goal(store, self.goal)

    def _next_id(self) -> int:
        candidate = int(time.time() * 1000)
        taken = {e.id for e in self.expenses}
        while candidate in taken:
            candidate += 1
        return candidate

    def add_expense(self, date: dt.date, amount: float, description: str,
                    category: Optional[Category] = None) -> Expense:
        """Record a new expense at the top of the list.

        The category is assigned by keyword matching unless one is given.

        Raises:
            pydantic.ValidationError: If ``amount`` is negative
        """
        expense = Expense(
            id=self._next_id(),
            date=date,
            amount=amount,
            description=description,
            category=category or categorize(description),
        )
        self.expenses = [expense] + self.expenses
        logger.info("Added expense %s (%s) as %s", expense.id, expense.amount, expense.category.value)
        return expense

    def remove_expense(self, expense_id: int) -> bool:
        remaining = [e for e in self.expenses if e.id != expense_id]
        removed = len(remaining) < len(self.expenses)
        self.expenses = remaining
        return removed

    def set_monthly_limit(self, limit: float) -> None:
        """Replace the monthly limit.

        Raises:
            pydantic.ValidationError: If ``limit`` is negative or not finite;
                the current budget is kept
        """
        self.budget = BudgetConfig.model_validate({**self.budget.model_dump(by_alias=True), 'monthly': limit})

    def set_category_limits_json(self, text: str) -> Dict[Category, float]:
        """Replace per-category limits from JSON editor contents.

        Raises:
            BudgetValidationError: If ``text`` is rejected; the current limits
                are kept
        """
        try:
            limits = parse_category_limits(text)
        except BudgetValidationError:
            logger.info("Rejected category budget edit")
            raise
        self.budget = self.budget.model_copy(update={'per_category_limit': limits})
        return limits

    def update_goal_saved(self, saved: float) -> None:
        self.goal = Goal.model_validate({**self.goal.model_dump(), 'saved': saved})

    def summary(self) -> DashboardSummary:
        df = expenses_to_frame(self.expenses)
        forecasts = forecast_spending(df)
        return DashboardSummary(
            monthly_totals=monthly_totals(df),
            category_totals=category_totals(df),
            category_history=category_history(df),
            forecasts=forecasts,
            alerts=evaluate(forecasts.by_category, forecasts.total, self.budget),
        )
