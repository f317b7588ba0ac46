from typing import Dict, Iterable, Tuple

from .models import DAYS_PER_MONTH, AncillaryRevenue, CourtId, CourtType, PricingMode


def court_monthly_revenue(court: CourtType, hours_per_day: float, mode: PricingMode) -> float:
    """Monthly revenue of one court type: units * price * sold hours/day * 30 days"""
    return court.unit_count * court.price_for(mode) * hours_per_day * DAYS_PER_MONTH


def courts_monthly_revenue(court_types: Iterable[CourtType], assumptions) -> Tuple[float, Dict[CourtId, float]]:
    """
    Monthly court revenue across all court types.

    The pricing mode is global: the same price column applies to every court.
    Returns (total, breakdown keyed by court id).
    """
    breakdown = {}
    total = 0.0
    for court in court_types:
        rev = court_monthly_revenue(court, assumptions.hours_for(court.court_id), assumptions.pricing_mode)
        breakdown[court.court_id] = rev
        total += rev
    return total, breakdown


def ancillary_monthly_revenue(ancillary: AncillaryRevenue) -> float:
    return ancillary.total
