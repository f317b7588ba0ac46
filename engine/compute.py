import logging
from typing import Sequence

from .models import CourtType, FinancialMetrics, OperatingAssumptions, RevenueBreakdown
from .revenue import courts_monthly_revenue, ancillary_monthly_revenue
from .finance import monthly_ebitda, annualize, payback_period
from . import reference

logger = logging.getLogger(__name__)


def compute(
    assumptions: OperatingAssumptions,
    court_types: Sequence[CourtType],
    cash_opex_monthly: float,
    total_capex: float,
) -> FinancialMetrics:
    """
    Compute the steady-state monthly projection from operating assumptions.

    Pure: inputs are never mutated and identical inputs give identical output.
    No validation or clamping is applied; any hours or currency amount is accepted.

    Args:
        assumptions: Current session inputs (hours per court, pricing mode, ancillary revenue)
        court_types: Court definitions to price
        cash_opex_monthly: Fixed monthly cash operating expenditure
        total_capex: Total capital expenditure to recover
    """
    # 1. Court revenue
    courts_total, courts_breakdown = courts_monthly_revenue(court_types, assumptions)

    # 2. Non-court revenue, taken as entered
    anc = assumptions.ancillary_revenue
    total_ancillary = ancillary_monthly_revenue(anc)

    monthly_revenue = courts_total + total_ancillary

    # 3. EBITDA = revenue - cash OPEX
    ebitda_m = monthly_ebitda(monthly_revenue, cash_opex_monthly)
    ebitda_y = annualize(ebitda_m)

    # 4. Payback
    payback = payback_period(total_capex, ebitda_y)
    if not payback.pays_back:
        logger.debug("Annual EBITDA %.0f is not positive; payback never occurs", ebitda_y)

    return FinancialMetrics(
        monthly_revenue=monthly_revenue,
        monthly_ebitda=ebitda_m,
        annual_ebitda=ebitda_y,
        payback=payback,
        revenue_breakdown=RevenueBreakdown(
            courts_total=courts_total,
            courts_breakdown=courts_breakdown,
            food_and_beverage=anc.food_and_beverage,
            fitness=anc.fitness,
            pro_shop=anc.pro_shop,
            sponsorship=anc.sponsorship,
            total_ancillary=total_ancillary,
        ),
    )


def project(assumptions: OperatingAssumptions) -> FinancialMetrics:
    """Compute against the club's reference courts and cost schedules"""
    return compute(
        assumptions,
        reference.list_court_types(),
        reference.cash_opex_monthly(),
        reference.total_capex(),
    )
