"""Streamlit app for the predictive finance dashboard.

Renders the expense list, spending charts, next-month forecasts, budget
alerts and the budget/goal editor.  State lives in an
:class:`~predictive_finance.app_state.AppState` kept in
``st.session_state`` and is written back to the JSON store after every
change.

To run the dashboard from the command line::

    streamlit run predictive_finance/dashboard.py

or use ``python run_dashboard.py`` from the project root.
"""

from __future__ import annotations

import datetime as dt
import json
import os
import sys

import streamlit as st
from pydantic import ValidationError

# Support both package execution and ``streamlit run`` on this file
if __package__:
    from . import visualization as viz
    from .app_state import AppState, DashboardSummary
    from .budgets import BudgetValidationError, goal_progress
    from .formatting import escape_dollar_for_markdown, format_currency
    from .logging_setup import configure_logging
    from .models import AlertKind
    from .storage import JsonFileStore
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from predictive_finance import visualization as viz  # type: ignore
    from predictive_finance.app_state import AppState, DashboardSummary  # type: ignore
    from predictive_finance.budgets import BudgetValidationError, goal_progress  # type: ignore
    from predictive_finance.formatting import escape_dollar_for_markdown, format_currency  # type: ignore
    from predictive_finance.logging_setup import configure_logging  # type: ignore
    from predictive_finance.models import AlertKind  # type: ignore
    from predictive_finance.storage import JsonFileStore  # type: ignore

STATE_KEY = 'app_state'


def _rerun() -> None:
    rerun_fn = getattr(st, 'rerun', None) or getattr(st, 'experimental_rerun', None)
    if rerun_fn:
        rerun_fn()


def _get_store() -> JsonFileStore:
    return JsonFileStore()


def _ensure_state() -> AppState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AppState.load(_get_store())
    return st.session_state[STATE_KEY]


def _persist_state() -> None:
    state = st.session_state.get(STATE_KEY)
    if state is not None:
        state.persist(_get_store())


def _md(text: str) -> str:
    return escape_dollar_for_markdown(text)


def render_add_expense_form(state: AppState) -> None:
    st.subheader("Add Expense")
    with st.form("add_expense", clear_on_submit=True):
        col1, col2, col3 = st.columns(3)
        date = col1.date_input("Date", value=dt.date.today())
        amount = col2.number_input("Amount", min_value=0.0, value=0.0, step=50.0)
        description = col3.text_input("Description", placeholder="e.g. Grocery at Walmart")
        submitted = st.form_submit_button("Add Expense")

    if submitted:
        try:
            state.add_expense(date, amount, description)
        except ValidationError as e:
            st.error(f"Could not add expense: {e.errors()[0].get('msg')}")
            return
        _persist_state()
        _rerun()


def render_expense_list(state: AppState) -> None:
    st.subheader("Recent Expenses")
    if not state.expenses:
        st.info("No expenses recorded yet.")
        return
    for expense in state.expenses:
        col1, col2 = st.columns([3, 1])
        col1.markdown(_md(f"**{expense.description or '—'}**"))
        col1.caption(f"{expense.date:%d %b %Y} • {expense.category}")
        col2.markdown(_md(f"**{format_currency(expense.amount)}**"))
        if col2.button("Remove", key=f"remove_{expense.id}"):
            state.remove_expense(expense.id)
            _persist_state()
            _rerun()


def render_charts(summary: DashboardSummary) -> None:
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(
            viz.create_monthly_line_chart(summary.monthly_totals, summary.forecasts.total),
            use_container_width=True,
        )
        st.markdown(_md(f"Forecast next month: **{format_currency(summary.forecasts.total)}**"))
    with col2:
        st.plotly_chart(viz.create_category_pie_chart(summary.category_totals), use_container_width=True)
    st.plotly_chart(viz.create_category_history_chart(summary.category_history), use_container_width=True)


def render_forecasts(state: AppState, summary: DashboardSummary) -> None:
    header_col, goal_col = st.columns([3, 1])
    header_col.subheader("Predictive Analytics & Goals")
    header_col.caption("Projected next month by category")
    goal = state.goal
    goal_col.metric(f"Goal: {goal.name}", f"{format_currency(goal.saved)} / {format_currency(goal.target)}")
    goal_col.progress(goal_progress(goal)['progress'])

    forecasts = list(summary.forecasts.by_category.items())
    if not forecasts:
        st.info("Add expenses to see forecasts.")
        return
    columns = st.columns(3)
    for i, (category, value) in enumerate(forecasts):
        limit = state.budget.per_category_limit.get(category)
        with columns[i % 3]:
            st.metric(str(category), format_currency(value))
            st.caption(f"Budget: {format_currency(limit) if limit else '—'}")


def render_alerts(summary: DashboardSummary) -> None:
    st.markdown("#### Alerts")
    if not summary.alerts:
        st.success("All good: your projected spending is within budgets.")
        return
    for alert in summary.alerts:
        if alert.kind is AlertKind.TOTAL:
            message = (f"Projected total {format_currency(alert.projected)} exceeds monthly budget "
                       f"{format_currency(alert.limit)}")
        else:
            message = (f"{alert.category} projected {format_currency(alert.projected)} exceeds category budget "
                       f"{format_currency(alert.limit)}")
        st.error(_md(message))


def render_budget_editor(state: AppState) -> None:
    st.markdown("#### Tune Budget / Goal")
    col1, col2, col3 = st.columns(3)

    with col1:
        monthly = st.number_input("Monthly budget", min_value=0.0, value=float(state.budget.monthly_limit), step=500.0)
        if st.button("Save", key="save_monthly"):
            try:
                state.set_monthly_limit(monthly)
            except ValidationError as e:
                st.error(f"Could not save budget: {e.errors()[0].get('msg')}")
            else:
                _persist_state()
                _rerun()

    with col2:
        saved = st.number_input("Goal saved", value=float(state.goal.saved), step=500.0)
        if st.button("Update Goal", key="update_goal"):
            try:
                state.update_goal_saved(saved)
            except ValidationError as e:
                st.error(f"Could not update goal: {e.errors()[0].get('msg')}")
            else:
                _persist_state()
                _rerun()

    with col3:
        current = {str(c): v for c, v in state.budget.per_category_limit.items()}
        text = st.text_area("Category budgets (JSON)", value=json.dumps(current, indent=2), height=160)
        if st.button("Save category budgets", key="save_categories"):
            try:
                state.set_category_limits_json(text)
            except BudgetValidationError as e:
                st.error(str(e))
            else:
                _persist_state()
                _rerun()


def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    st.set_page_config(page_title="AI Finance — Predictive Dashboard", layout="wide")

    state = _ensure_state()
    summary = state.summary()

    title_col, budget_col = st.columns([3, 1])
    title_col.title("AI Finance — Predictive Dashboard")
    title_col.caption("Automated expense categorization, forecasts, and budget alerts")
    budget_col.metric("Monthly Budget", format_currency(state.budget.monthly_limit))

    left, right = st.columns([1, 2])
    with left:
        render_add_expense_form(state)
        st.divider()
        render_expense_list(state)
    with right:
        render_charts(summary)

    st.divider()
    render_forecasts(state, summary)
    render_alerts(summary)
    render_budget_editor(state)
    st.caption("Demo AI Financial Tool • Data stored locally on this machine")


if __name__ == "__main__":  # pragma: no cover
    main()
