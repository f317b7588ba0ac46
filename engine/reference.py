"""Static reference data: courts, OPEX/CAPEX schedules and ancillary defaults"""
import logging
from typing import Tuple

from config import default_params as params
from .models import (
    AncillaryRevenue, CourtId, CourtType, LineItem, OperatingAssumptions,
    PricingMode, ReferenceScenario
)

logger = logging.getLogger(__name__)

_COURT_TYPES = tuple(
    CourtType(
        court_id=CourtId[c['court_id']],
        unit_count=c['unit_count'],
        price_per_hour_normal=c['price_normal'],
        price_per_hour_discounted=c['price_discount'],
    )
    for c in params.COURT_TYPES
)

_OPEX_SCHEDULE = tuple(LineItem(item, amount) for item, amount in params.OPEX_SCHEDULE)
_CAPEX_SCHEDULE = tuple(LineItem(item, amount) for item, amount in params.CAPEX_SCHEDULE)

_DEPRECIATION_RESERVE = next(
    li.amount for li in _OPEX_SCHEDULE if li.item == params.DEPRECIATION_RESERVE_ITEM
)

# EBITDA excludes depreciation: only cash OPEX is deducted from revenue
CASH_OPEX_MONTHLY = params.TOTAL_OPEX_MONTHLY - _DEPRECIATION_RESERVE
TOTAL_CAPEX = sum(li.amount for li in _CAPEX_SCHEDULE)

logger.debug("Reference data loaded: cash opex %s/month, capex %s", CASH_OPEX_MONTHLY, TOTAL_CAPEX)


def list_court_types() -> Tuple[CourtType, ...]:
    return _COURT_TYPES


def court_type(court_id: CourtId) -> CourtType:
    for court in _COURT_TYPES:
        if court.court_id == court_id:
            return court
    raise KeyError(court_id)


def cash_opex_monthly() -> float:
    return CASH_OPEX_MONTHLY


def total_capex() -> float:
    return TOTAL_CAPEX


def total_opex_monthly() -> float:
    return params.TOTAL_OPEX_MONTHLY


def depreciation_reserve() -> float:
    return _DEPRECIATION_RESERVE


def opex_schedule() -> Tuple[LineItem, ...]:
    return _OPEX_SCHEDULE


def opex_schedule_total() -> float:
    """Sum of the itemised OPEX lines (rounded figures, differs from the stated total)"""
    return sum(li.amount for li in _OPEX_SCHEDULE)


def capex_schedule() -> Tuple[LineItem, ...]:
    return _CAPEX_SCHEDULE


def default_ancillary_revenue() -> AncillaryRevenue:
    return AncillaryRevenue(**params.ANCILLARY_DEFAULTS)


def default_assumptions() -> OperatingAssumptions:
    """Seed values for a new session"""
    return OperatingAssumptions(
        daily_hours_by_court={c.court_id: params.DEFAULT_DAILY_HOURS for c in _COURT_TYPES},
        pricing_mode=PricingMode.NORMAL,
        ancillary_revenue=default_ancillary_revenue(),
    )


def reference_scenarios() -> Tuple[ReferenceScenario, ...]:
    return tuple(ReferenceScenario(**s) for s in params.REFERENCE_SCENARIOS)
