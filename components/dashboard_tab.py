"""Headline KPI cards and charts."""

import streamlit as st

from engine import reference
from engine.scenarios import comparison_rows
from utils.calculations import comparison_frame, revenue_share_frame
from utils.formatting import format_billions, format_idr, format_margin, format_payback
from utils.visualizations import create_ebitda_comparison_chart, create_revenue_share_chart


def render_kpi_cards(metrics):
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Monthly Revenue", format_billions(metrics.monthly_revenue))
        st.caption(format_idr(metrics.monthly_revenue))
    with c2:
        st.metric("Monthly EBITDA", format_billions(metrics.monthly_ebitda))
        margin = format_margin(metrics.ebitda_margin)
        if metrics.monthly_ebitda > 0:
            st.caption(f":green[{margin}]")
        else:
            st.caption(f":red[{margin}]")
    with c3:
        st.metric("Payback Period", format_payback(metrics.payback))
        st.caption(f"Inv: {format_billions(reference.total_capex())}")


def render_dashboard_tab(metrics):
    """Render the KPI cards, revenue share and scenario comparison."""
    render_kpi_cards(metrics)

    share_df = revenue_share_frame(metrics)
    col1, col2 = st.columns([2, 3])
    with col1:
        st.subheader("💰 Revenue Breakdown (Monthly)")
        for row in share_df.itertuples(index=False):
            st.markdown(f"<span style='color:{row.color}'>●</span> {row.category}: **{format_billions(row.value)}**",
                        unsafe_allow_html=True)
        if share_df.empty:
            st.info("No revenue under the current assumptions")
    with col2:
        if not share_df.empty:
            st.plotly_chart(create_revenue_share_chart(share_df), use_container_width=True)

    comp_df = comparison_frame(comparison_rows(metrics, reference.reference_scenarios()))
    st.plotly_chart(create_ebitda_comparison_chart(comp_df), use_container_width=True)
