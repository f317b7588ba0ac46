"""EBITDA and payback calculations"""

from .models import MONTHS_PER_YEAR, Payback


def monthly_ebitda(monthly_revenue: float, cash_opex_monthly: float) -> float:
    """Revenue minus cash OPEX (fixed, independent of revenue; may be negative)"""
    return monthly_revenue - cash_opex_monthly


def annualize(monthly_amount: float) -> float:
    """Steady-state month extrapolated to a year, no seasonality"""
    return monthly_amount * MONTHS_PER_YEAR


def payback_period(total_capex: float, annual_ebitda: float) -> Payback:
    """Years for cumulative annual EBITDA to cover CAPEX"""
    if annual_ebitda > 0:
        return Payback.finite(total_capex / annual_ebitda)
    return Payback.never()
