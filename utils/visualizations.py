"""Visualization utilities for the financial model."""

import plotly.graph_objects as go

from utils.formatting import format_billions

CURRENT_COLOR = '#0ea5e9'
REFERENCE_COLOR = '#cbd5e1'


def create_revenue_share_chart(share_df):
    """Donut chart of monthly revenue by category."""
    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=share_df['category'],
        values=share_df['value'],
        hole=0.6,
        marker=dict(colors=list(share_df['color'])),
        sort=False,
        text=[format_billions(v) for v in share_df['value']],
        hovertemplate='%{label}: %{text}<extra></extra>',
        textinfo='percent',
    ))
    fig.update_layout(
        title='Revenue Breakdown (Monthly)',
        height=320,
        margin=dict(t=50, b=10, l=10, r=10),
        legend=dict(orientation='v')
    )
    return fig


def create_ebitda_comparison_chart(comparison_df):
    """Horizontal bars of monthly EBITDA, current simulation highlighted."""
    colors = [CURRENT_COLOR if current else REFERENCE_COLOR for current in comparison_df['is_current']]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=comparison_df['monthly_ebitda'],
        y=comparison_df['label'],
        orientation='h',
        marker=dict(color=colors),
        text=[format_billions(v) for v in comparison_df['monthly_ebitda']],
        textposition='auto',
        hovertemplate='%{y}: %{text}<extra></extra>',
    ))
    fig.add_vline(x=0, line_dash="dash", line_color="gray")
    fig.update_layout(
        title='EBITDA Comparison (Monthly)',
        xaxis=dict(showticklabels=False, showgrid=True),
        yaxis=dict(autorange='reversed'),
        height=300,
        margin=dict(t=50, b=10, l=10, r=10)
    )
    return fig
