"""
Padel Club Financial Projection Simulator - Streamlit UI
Every figure on the page comes from the engine; the UI only collects inputs and formats output
"""

import logging
import os

import streamlit as st

from components.controls import render_controls
from components.dashboard_tab import render_dashboard_tab
from components.details_tab import render_details_tab
from config.default_params import FACILITY_NAME
from engine.compute import project

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=f"{FACILITY_NAME} – Financial Projection Simulator",
    page_icon="🎾",
    layout="wide"
)


def main():
    st.title(f"🎾 {FACILITY_NAME}")
    st.caption("Financial Projection Simulator · Internal Use Only")

    assumptions = render_controls()

    # Single engine call per rerun
    metrics = project(assumptions)
    logger.debug("Projection: revenue %.0f, EBITDA %.0f, payback %.1f",
                 metrics.monthly_revenue, metrics.monthly_ebitda, metrics.payback_years)

    render_dashboard_tab(metrics)

    st.markdown("---")
    render_details_tab(metrics, assumptions)

    st.markdown("---")
    st.caption("Based on Financial Summary PDF data. EBITDA excludes depreciation. All figures are estimates.")


if __name__ == "__main__":
    main()
