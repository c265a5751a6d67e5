"""Key-value persistence for expenses, budget and goal.

The store only knows string keys and JSON text values.  The ``load_*``
helpers parse and validate what comes back into typed entities and fall back
to the built-in defaults when a value is missing or malformed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from . import config
from .category_rules import categorize_expense
from .logging_setup import get_logger
from .models import BudgetConfig, Expense, Goal

logger = get_logger(__name__)

_EXPENSE_LIST = TypeAdapter(List[Expense])


class Store(Protocol):
    """Synchronous string key-value store; writes replace the whole value."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Dict-backed store, mostly useful for tests and ephemeral sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a single JSON object on disk.

    Every ``set`` rewrites the file with all keys, so the last write wins.
    """

    def __init__(self, path: Optional[Path] = None):
        """Initialize the store.

        Args:
            path: JSON file to use. Defaults to ``config.STORE_PATH``.
        """
        self.path = Path(path or config.STORE_PATH)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: expected a JSON object", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open('w', encoding='utf-8') as handle:
            json.dump(data, handle, indent=2, sort_keys=True)


def _sample_expenses() -> List[Expense]:
    return [categorize_expense(e) for e in _EXPENSE_LIST.validate_python(config.SAMPLE_EXPENSES)]


def load_expenses(store: Store) -> List[Expense]:
    """Load and categorize stored expenses, falling back to the sample data."""
    raw = store.get(config.EXPENSES_KEY)
    if raw is None:
        return _sample_expenses()
    try:
        expenses = _EXPENSE_LIST.validate_json(raw)
    except ValidationError as e:
        logger.warning("Stored expenses are invalid, using sample data: %s", e.errors()[0].get('msg'))
        return _sample_expenses()

    ids = [e.id for e in expenses]
    if len(ids) != len(set(ids)):
        logger.warning("Stored expenses contain duplicate ids, using sample data")
        return _sample_expenses()
    return [categorize_expense(e) for e in expenses]


def save_expenses(store: Store, expenses: List[Expense]) -> None:
    store.set(config.EXPENSES_KEY, _EXPENSE_LIST.dump_json(expenses, exclude_none=True).decode('utf-8'))


def load_budget(store: Store) -> BudgetConfig:
    """Load the budget configuration, falling back to the defaults."""
    raw = store.get(config.BUDGET_KEY)
    if raw is not None:
        try:
            return BudgetConfig.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Stored budget is invalid, using defaults: %s", e.errors()[0].get('msg'))
    return BudgetConfig.model_validate(config.DEFAULT_BUDGET)


def save_budget(store: Store, budget: BudgetConfig) -> None:
    store.set(config.BUDGET_KEY, budget.model_dump_json(by_alias=True))


def load_goal(store: Store) -> Goal:
    """Load the savings goal, falling back to the default goal."""
    raw = store.get(config.GOAL_KEY)
    if raw is not None:
        try:
            return Goal.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Stored goal is invalid, using defaults: %s", e.errors()[0].get('msg'))
    return Goal.model_validate(config.DEFAULT_GOAL)


def save_goal(store: Store, goal: Goal) -> None:
    store.set(config.GOAL_KEY, goal.model_dump_json())
