"""Simulation summary, CAPEX and OPEX tables with downloads."""

from datetime import datetime

import pandas as pd
import streamlit as st

from engine import reference
from utils.calculations import capex_frame, opex_frame, summary_frame
from utils.export import XLSX_MIME, frame_to_csv, frames_to_excel
from utils.formatting import format_billions, format_idr, format_payback


def _cell(value, fmt):
    # Dash where the monthly/annual column does not apply
    return "-" if pd.isna(value) else fmt(value)


def _summary_display(df, metrics):
    display_df = df.copy()
    display_df['Monthly'] = [
        _cell(v, format_billions if row_type == 'detail' else format_idr)
        for v, row_type in zip(df['Monthly'], df['row_type'])
    ]
    display_df['Annual'] = [_cell(v, format_billions) for v in df['Annual']]
    display_df.loc[df['row_type'] == 'payback', 'Annual'] = format_payback(metrics.payback)
    display_df['Component'] = [
        f"    ↳ {c}" if row_type == 'detail' else c
        for c, row_type in zip(df['Component'], df['row_type'])
    ]
    return display_df.drop(columns=['row_type'])


def render_details_tab(metrics, assumptions):
    summary = summary_frame(
        metrics, assumptions, reference.list_court_types(),
        reference.cash_opex_monthly(), reference.total_capex()
    )
    capex = capex_frame()
    opex = opex_frame()

    tab1, tab2, tab3 = st.tabs(["📄 Simulation Summary", "🏗️ CAPEX Details", "📉 OPEX Details"])

    with tab1:
        st.dataframe(_summary_display(summary, metrics), use_container_width=True, hide_index=True)
        st.caption("Payback Period = Investment / Annual EBITDA")

    with tab2:
        st.info(f"**Note:** Static data from Financial Summary PDF. Total Investment: "
                f"{format_billions(reference.total_capex())}.")
        capex_display = capex.copy()
        capex_display['Value (IDR)'] = capex['Value (IDR)'].apply(format_idr)
        st.dataframe(capex_display, use_container_width=True, hide_index=True)

    with tab3:
        st.info("**Note:** Static data from Financial Summary PDF. Used to calculate Cash OPEX.")
        opex_display = opex.copy()
        opex_display['Value (Monthly)'] = opex['Value (Monthly)'].apply(format_idr)
        st.dataframe(opex_display, use_container_width=True, hide_index=True)
        st.caption(
            f"* Cash OPEX used in simulation excludes Depreciation Reserve "
            f"({format_idr(reference.depreciation_reserve())}) = {format_idr(reference.cash_opex_monthly())}"
        )

    # Downloads
    st.markdown("#### 📥 Export")
    stamp = datetime.now().strftime('%Y%m%d')
    summary_export = summary.drop(columns=['row_type'])
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Simulation Summary (CSV)",
            data=frame_to_csv(summary_export),
            file_name=f"Simulation_Summary_{stamp}.csv",
            mime="text/csv"
        )
    with col2:
        xlsx = frames_to_excel({
            "Simulation Summary": summary_export,
            "CAPEX": capex,
            "OPEX": opex,
        })
        st.download_button(
            "All Tables (Excel)",
            data=xlsx,
            file_name=f"Financial_Simulation_{stamp}.xlsx",
            mime=XLSX_MIME
        )
