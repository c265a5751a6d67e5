"""Top‑level package for the predictive finance dashboard.

The core functions are pure and UI independent:

* ``category_rules`` – keyword categorization of expense descriptions
* ``data_processing`` – monthly and per-category aggregation
* ``forecasting`` – linear-trend next-month forecasts
* ``budgets`` – budget alerts and goal progress

``storage`` and ``app_state`` hold the persisted state, and ``dashboard``
is the Streamlit app that ties everything together:

```bash
streamlit run predictive_finance/dashboard.py
```
"""

from .budgets import evaluate  # noqa: F401  # re-exported for convenience
from .category_rules import categorize  # noqa: F401
from .data_processing import category_history, category_totals, monthly_totals  # noqa: F401
from .forecasting import forecast_next  # noqa: F401

__all__ = [
    "categorize",
    "monthly_totals",
    "category_totals",
    "category_history",
    "forecast_next",
    "evaluate",
]
