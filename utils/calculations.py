"""Input handling and table/chart data preparation for the simulator."""

import logging
import math

import pandas as pd

from config.default_params import CATEGORY_COLORS, HOURS_MAX, HOURS_MIN
from engine import reference
from engine.models import FinancialMetrics, OperatingAssumptions
from utils.formatting import format_idr

logger = logging.getLogger(__name__)

ANCILLARY_LABELS = {
    'food_and_beverage': 'F&B',
    'fitness': 'Fitness',
    'pro_shop': 'Pro Shop',
    'sponsorship': 'Sponsorship',
}


def parse_millions(raw):
    """Convert a value entered in millions (Juta) to base IDR; malformed input becomes 0."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug("Non-numeric revenue input %r treated as 0", raw)
        return 0.0
    if not math.isfinite(value):
        logger.debug("Non-finite revenue input %r treated as 0", raw)
        return 0.0
    return value * 1_000_000


def clamp_hours(hours):
    """Keep sold hours inside the slider range [0, 16]."""
    return min(max(float(hours), HOURS_MIN), HOURS_MAX)


def revenue_share_frame(metrics: FinancialMetrics):
    """Revenue categories for the share chart; only categories with positive value."""
    rb = metrics.revenue_breakdown
    rows = [
        {'category': court_id.label, 'value': value, 'color': CATEGORY_COLORS[court_id.name]}
        for court_id, value in rb.courts_breakdown.items()
    ]
    for key, label in ANCILLARY_LABELS.items():
        rows.append({'category': label, 'value': getattr(rb, key), 'color': CATEGORY_COLORS[key]})

    df = pd.DataFrame(rows, columns=['category', 'value', 'color'])
    return df[df['value'] > 0].reset_index(drop=True)


def comparison_frame(rows):
    return pd.DataFrame(rows, columns=['label', 'monthly_revenue', 'monthly_ebitda', 'is_current'])


def summary_frame(metrics: FinancialMetrics, assumptions: OperatingAssumptions,
                  court_types, cash_opex_monthly, total_capex):
    """
    Simulation summary with monthly and annual columns.

    ``row_type`` tags each row for display styling: 'revenue', 'detail',
    'total', 'cost', 'ebitda', 'capex' or 'payback'. Annual values are None
    where the source table shows a dash; the payback row holds years (None
    when payback never occurs).
    """
    rb = metrics.revenue_breakdown
    other = rb.fitness + rb.pro_shop + rb.sponsorship
    rows = [('Total Court Revenue', rb.courts_total, rb.courts_total * 12, 'revenue')]

    for court in court_types:
        price = court.price_for(assumptions.pricing_mode)
        rows.append((
            f"{court.name} ({format_idr(price)}/hr)",
            rb.courts_breakdown.get(court.court_id, 0.0),
            None,
            'detail',
        ))

    rows += [
        ('F&B Revenue', rb.food_and_beverage, rb.food_and_beverage * 12, 'revenue'),
        ('Other (Gym, Pro Shop, Sponsor)', other, other * 12, 'revenue'),
        ('Total Revenue', metrics.monthly_revenue, metrics.monthly_revenue * 12, 'total'),
        ('(-) Cash OPEX', cash_opex_monthly, cash_opex_monthly * 12, 'cost'),
        ('EBITDA', metrics.monthly_ebitda, metrics.annual_ebitda, 'ebitda'),
        ('Total Investment (CAPEX)', None, total_capex, 'capex'),
        ('Payback Period (years)', None, metrics.payback.years, 'payback'),
    ]
    return pd.DataFrame(rows, columns=['Component', 'Monthly', 'Annual', 'row_type'])


def capex_frame():
    items = reference.capex_schedule()
    rows = [(li.item, li.amount) for li in items]
    rows.append(('TOTAL CAPEX', reference.total_capex()))
    return pd.DataFrame(rows, columns=['Investment Component', 'Value (IDR)'])


def opex_frame():
    items = reference.opex_schedule()
    rows = [(li.item, li.amount) for li in items]
    rows.append(('TOTAL MONTHLY OPEX', reference.opex_schedule_total()))
    return pd.DataFrame(rows, columns=['Operational Cost Component', 'Value (Monthly)'])
