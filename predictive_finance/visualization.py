"""Plotly visualisation helpers for the dashboard.

Each function accepts a value produced by :mod:`data_processing` (or the
dashboard summary) and returns a `plotly.graph_objects.Figure` that
Streamlit renders via ``st.plotly_chart``.  Empty inputs produce an empty
figure titled "No data to display".
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .models import Category, MonthBucket

COLORS = ["#4dc9f6", "#f67019", "#f53794", "#537bc4", "#acc236", "#166a8f", "#00a950", "#58595b"]


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display")
    return fig


def create_monthly_line_chart(buckets: Sequence[MonthBucket], forecast: Optional[float] = None,
                              title: str | None = None) -> go.Figure:
    """Line chart of monthly spending.

    Parameters
    ----------
    buckets : sequence of MonthBucket
        Monthly totals in ascending month order.
    forecast : float, optional
        Next-month projection, drawn as a dashed marker after the last month.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
    """
    if not buckets:
        return _empty_figure()
    df = pd.DataFrame({'Month': [b.month_key for b in buckets], 'Total': [b.total for b in buckets]})
    fig = px.line(df, x='Month', y='Total', markers=True, color_discrete_sequence=COLORS)
    if forecast is not None:
        last = buckets[-1]
        fig.add_trace(
            go.Scatter(
                x=[last.month_key, 'Forecast'],
                y=[last.total, forecast],
                mode='lines+markers',
                line={'dash': 'dash', 'color': COLORS[1]},
                name='Forecast',
            )
        )
    fig.update_layout(title=title or "Monthly Spending", xaxis_title="Month", yaxis_title="Total")
    return fig


def create_category_pie_chart(totals: Mapping[Category, float], title: str | None = None) -> go.Figure:
    """Donut chart of total spend per category."""
    if not totals:
        return _empty_figure()
    df = pd.DataFrame({'Category': [str(c) for c in totals], 'Value': list(totals.values())})
    fig = px.pie(df, names='Category', values='Value', hole=0.4, color_discrete_sequence=COLORS)
    fig.update_layout(title=title or "Category Breakdown")
    return fig


def create_category_history_chart(history: List[Dict[str, Any]], title: str | None = None) -> go.Figure:
    """Stacked bar chart with one bar per month and one segment per category."""
    if not history:
        return _empty_figure()
    df = pd.DataFrame(history)
    categories = [c for c in df.columns if c != 'month']
    long_df = df.melt(id_vars='month', value_vars=categories, var_name='Category', value_name='Amount')
    fig = px.bar(
        long_df,
        x='month',
        y='Amount',
        color='Category',
        barmode='stack',
        color_discrete_sequence=COLORS,
    )
    fig.update_layout(title=title or "Category Spending History", xaxis_title="Month", yaxis_title="Amount")
    return fig
