import pytest

from predictive_finance import config
from predictive_finance.forecasting import display_amount, forecast_next, forecast_spending
from predictive_finance.models import Category, Expense


def test_empty_series_has_no_forecast():
    assert forecast_next([]) is None


def test_single_value_is_repeated():
    assert forecast_next([5]) == 5


def test_perfect_linear_trend():
    assert forecast_next([1, 2, 3]) == pytest.approx(4)


def test_flat_series():
    assert forecast_next([10, 10, 10]) == pytest.approx(10)


def test_horizon_extrapolates_further():
    assert forecast_next([1, 2, 3], horizon=3) == pytest.approx(6)


def test_negative_forecasts_are_not_clamped():
    assert forecast_next([30, 20, 10]) == pytest.approx(0)
    assert forecast_next([20, 10]) == pytest.approx(0)
    assert forecast_next([10, 0]) == pytest.approx(-10)


def test_invalid_horizon():
    with pytest.raises(ValueError):
        forecast_next([1, 2], horizon=0)


def test_display_amount_rounds_and_floors():
    assert display_amount(None) == 0
    assert display_amount(-10.2) == 0
    assert display_amount(2.5) == 3
    assert display_amount(2.4) == 2


def test_forecast_spending_on_sample_data():
    expenses = [Expense(**row) for row in config.SAMPLE_EXPENSES]
    forecasts = forecast_spending(expenses)
    assert forecasts.by_category[Category.GROCERIES] == 3100
    assert forecasts.by_category[Category.SHOPPING] == 600
    assert forecasts.by_category[Category.BILLS] == 0
    assert forecasts.total > 0
    assert set(forecasts.by_category) == {
        Category.GROCERIES, Category.TRANSPORT, Category.DINING, Category.BILLS, Category.SHOPPING,
    }


def test_forecast_spending_without_expenses():
    forecasts = forecast_spending([])
    assert forecasts.total == 0
    assert forecasts.by_category == {}
