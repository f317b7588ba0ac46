"""Sidebar controls for the operating assumptions."""

import streamlit as st

from config.default_params import HOURS_MAX, HOURS_MIN, HOURS_STEP
from engine import reference
from engine.models import PricingMode
from engine.revenue import court_monthly_revenue
from utils.calculations import ANCILLARY_LABELS, clamp_hours, parse_millions
from utils.formatting import format_billions, format_idr, format_millions

PRICING_LABELS = {
    PricingMode.NORMAL: "Normal Price",
    PricingMode.DISCOUNT: "Discount (-100k)",
}

ANCILLARY_INPUT_LABELS = {
    'food_and_beverage': "☕ F&B (Cafe + Resto)",
    'fitness': "🏋️ Fitness Membership",
    'pro_shop': "🏪 Pro Shop & Rentals",
    'sponsorship': "🏆 Sponsorship & Branding",
}

SESSION_KEY = 'assumptions'


def current_assumptions():
    """Session's assumptions snapshot, seeded with reference defaults on first run"""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = reference.default_assumptions()
    return st.session_state[SESSION_KEY]


def render_controls():
    """Render the sidebar and return the (possibly replaced) OperatingAssumptions."""
    assumptions = current_assumptions()

    st.sidebar.header("🧮 Operational Controls")

    # Pricing strategy (global, applies to every court)
    st.sidebar.subheader("💰 Pricing Strategy")
    modes = list(PRICING_LABELS)
    mode = st.sidebar.radio(
        "Pricing Strategy",
        modes,
        index=modes.index(assumptions.pricing_mode),
        format_func=PRICING_LABELS.get,
        horizontal=True,
        label_visibility="collapsed",
    )
    assumptions = assumptions.with_pricing_mode(mode)

    # Sold hours per court
    st.sidebar.subheader("⏰ Daily Sold Hours (Per Court)")
    for court in reference.list_court_types():
        price = court.price_for(assumptions.pricing_mode)
        hours = st.sidebar.slider(
            f"{court.name} (x{court.unit_count} units) · {format_idr(price)}/hr",
            min_value=HOURS_MIN,
            max_value=HOURS_MAX,
            value=clamp_hours(assumptions.hours_for(court.court_id)),
            step=HOURS_STEP,
            key=f"hours_{court.court_id.name}",
        )
        assumptions = assumptions.with_hours(court.court_id, clamp_hours(hours))
        est = court_monthly_revenue(court, hours, assumptions.pricing_mode)
        st.sidebar.caption(f"Est. {format_millions(est)} / mo")

    # Non-court revenue, entered in millions
    st.sidebar.subheader("🏬 Non-Court Monthly Revenue")
    st.sidebar.caption("Input values in Millions (Juta Rupiah)")
    anc = assumptions.ancillary_revenue
    changes = {}
    for field_name in ANCILLARY_LABELS:
        current = getattr(anc, field_name)
        raw = st.sidebar.number_input(
            ANCILLARY_INPUT_LABELS[field_name],
            min_value=0.0,
            value=current / 1_000_000,
            step=1.0,
            key=f"ancillary_{field_name}",
        )
        changes[field_name] = parse_millions(raw)
        st.sidebar.caption(f"Rp {format_billions(changes[field_name])}")
    assumptions = assumptions.with_ancillary(**changes)

    st.sidebar.info(f"Simulating fixed Monthly Cash OPEX of {format_billions(reference.cash_opex_monthly())}.")

    st.session_state[SESSION_KEY] = assumptions
    return assumptions
