"""Linear-trend spending forecasts.

``forecast_next`` fits an ordinary least-squares line over a monthly series
(index as x, amount as y) and extrapolates forward.  It returns the raw
extrapolation; :func:`forecast_spending` applies the display rules
(round, floor at zero) used by the dashboard and budget alerts.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .data_processing import category_series, expenses_to_frame, monthly_totals
from .logging_setup import get_logger
from .models import Expense, Forecasts

logger = get_logger(__name__)


def forecast_next(series: Sequence[float], horizon: int = 1) -> Optional[float]:
    """Forecast the value ``horizon`` steps after the last observation.

    Args:
        series: Values ordered oldest to newest.
        horizon: Number of steps ahead; 1 means the next unseen point.

    Returns:
        ``None`` for an empty series, the sole value for a single-element
        series, otherwise ``intercept + slope * (n - 1 + horizon)``.

    Raises:
        ValueError: If ``horizon`` is less than 1.
    """
    if horizon < 1:
        raise ValueError(f"horizon must be a positive integer, got {horizon}")

    values = np.asarray(list(series), dtype=float)
    n = values.size
    if n == 0:
        return None
    if n == 1:
        return float(values[0])

    xs = np.arange(n, dtype=float)
    x_mean = xs.mean()
    y_mean = values.mean()
    den = float(np.sum((xs - x_mean) ** 2))
    num = float(np.sum((xs - x_mean) * (values - y_mean)))
    slope = 0.0 if den == 0 else num / den
    intercept = y_mean - slope * x_mean
    return float(intercept + slope * (n - 1 + horizon))


def display_amount(value: Optional[float]) -> int:
    """Round half up and floor at zero; a missing forecast shows as 0."""
    if value is None:
        return 0
    return max(0, int(math.floor(value + 0.5)))


def forecast_spending(expenses: Union[pd.DataFrame, Iterable[Expense]], horizon: int = 1) -> Forecasts:
    """Project next-month spend overall and for every observed category."""
    df = expenses if isinstance(expenses, pd.DataFrame) else expenses_to_frame(expenses)
    by_category = {
        category: display_amount(forecast_next(values, horizon))
        for category, values in category_series(df).items()
    }
    totals = [bucket.total for bucket in monthly_totals(df)]
    total = display_amount(forecast_next(totals, horizon))
    logger.debug("Forecast %s months of history: total=%s categories=%s", len(totals), total, len(by_category))
    return Forecasts(total=total, by_category=by_category)
