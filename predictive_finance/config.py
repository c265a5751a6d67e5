"""Configuration management for the predictive finance dashboard.

This module centralizes all configuration values including paths,
store keys, defaults, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List

# Base project root - assumes this file is in predictive_finance/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("PREDICTIVE_FINANCE_DATA_DIR", _PROJECT_ROOT / "data"))

# Key-value store file
STORE_PATH = Path(
    os.getenv("PREDICTIVE_FINANCE_STORE_PATH", DATA_DIR / "store.json")
).resolve()

# Store keys
EXPENSES_KEY = "ai_fin_expenses"
BUDGET_KEY = "ai_fin_budget"
GOAL_KEY = "ai_fin_goal"

CURRENCY = os.getenv("PREDICTIVE_FINANCE_CURRENCY", "INR")

DEFAULT_BUDGET: Dict[str, Any] = {
    "monthly": 30000,
    "byCategory": {"Groceries": 8000, "Transport": 3000, "Entertainment": 2000},
}

DEFAULT_GOAL: Dict[str, Any] = {
    "name": "Emergency Fund",
    "target": 50000,
    "saved": 12000,
}

# Starter data shown when nothing usable has been stored yet
SAMPLE_EXPENSES: List[Dict[str, Any]] = [
    {"id": 1, "date": "2025-05-02", "amount": 4200, "description": "Walmart Groceries"},
    {"id": 2, "date": "2025-05-10", "amount": 199, "description": "Metro Ride"},
    {"id": 3, "date": "2025-06-03", "amount": 850, "description": "Dinner at cafe"},
    {"id": 4, "date": "2025-06-06", "amount": 1500, "description": "Electric Bill"},
    {"id": 5, "date": "2025-07-11", "amount": 1200, "description": "Amazon Shopping - Shoes"},
    {"id": 6, "date": "2025-08-02", "amount": 5200, "description": "Monthly Groceries"},
    {"id": 7, "date": "2025-08-07", "amount": 300, "description": "Coffee"},
    {"id": 8, "date": "2025-08-19", "amount": 1800, "description": "Fuel"},
]
