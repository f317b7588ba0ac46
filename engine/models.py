from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

DAYS_PER_MONTH = 30           # calendar days, no month-length variation
MONTHS_PER_YEAR = 12
PAYBACK_SENTINEL_YEARS = 999.0  # "never pays back", kept finite and orderable


class CourtId(Enum):
    SIDE = "Side Courts"
    CENTER = "Center Courts"
    STADIUM = "Stadium Court"

    @property
    def label(self) -> str:
        return self.value


class PricingMode(Enum):
    NORMAL = "NORMAL"
    DISCOUNT = "DISCOUNT"


@dataclass(frozen=True)
class CourtType:
    court_id: CourtId
    unit_count: int
    price_per_hour_normal: float
    price_per_hour_discounted: float

    def __post_init__(self):
        if self.unit_count < 0:
            raise ValueError(f"{self.court_id.label}: unit count cannot be negative ({self.unit_count})")
        if self.price_per_hour_discounted > self.price_per_hour_normal:
            raise ValueError(
                f"{self.court_id.label}: discounted price {self.price_per_hour_discounted} "
                f"exceeds normal price {self.price_per_hour_normal}"
            )

    @property
    def name(self) -> str:
        return self.court_id.label

    def price_for(self, mode: PricingMode) -> float:
        """Active price per court-hour for the given pricing mode"""
        if mode == PricingMode.DISCOUNT:
            return self.price_per_hour_discounted
        return self.price_per_hour_normal


@dataclass(frozen=True)
class LineItem:
    item: str
    amount: float


@dataclass(frozen=True)
class AncillaryRevenue:
    # monthly amounts, IDR
    food_and_beverage: float = 0.0
    fitness: float = 0.0
    pro_shop: float = 0.0
    sponsorship: float = 0.0

    @property
    def total(self) -> float:
        return self.food_and_beverage + self.fitness + self.pro_shop + self.sponsorship

    def replace(self, **changes) -> "AncillaryRevenue":
        return replace(self, **changes)


@dataclass(frozen=True)
class OperatingAssumptions:
    """
    Snapshot of the user-adjustable inputs.

    Never edited in place: every control change produces a new value via the
    ``with_*`` helpers, which is then handed to the engine as a plain argument.
    """
    daily_hours_by_court: Mapping[CourtId, float] = field(default_factory=dict)
    pricing_mode: PricingMode = PricingMode.NORMAL
    ancillary_revenue: AncillaryRevenue = field(default_factory=AncillaryRevenue)

    def __post_init__(self):
        object.__setattr__(self, "daily_hours_by_court", MappingProxyType(dict(self.daily_hours_by_court)))

    def hours_for(self, court_id: CourtId) -> float:
        # Missing entries mean zero utilization
        return self.daily_hours_by_court.get(court_id, 0.0)

    def with_hours(self, court_id: CourtId, hours: float) -> "OperatingAssumptions":
        hours_by_court = dict(self.daily_hours_by_court)
        hours_by_court[court_id] = hours
        return replace(self, daily_hours_by_court=hours_by_court)

    def with_pricing_mode(self, mode: PricingMode) -> "OperatingAssumptions":
        return replace(self, pricing_mode=mode)

    def with_ancillary(self, **changes) -> "OperatingAssumptions":
        return replace(self, ancillary_revenue=self.ancillary_revenue.replace(**changes))


@dataclass(frozen=True)
class Payback:
    """Payback period: either a finite number of years or never"""
    years: Optional[float] = None

    @classmethod
    def finite(cls, years: float) -> "Payback":
        return cls(years=years)

    @classmethod
    def never(cls) -> "Payback":
        return cls(years=None)

    @property
    def pays_back(self) -> bool:
        return self.years is not None

    @property
    def sortable_years(self) -> float:
        return self.years if self.pays_back else PAYBACK_SENTINEL_YEARS


@dataclass(frozen=True)
class RevenueBreakdown:
    courts_total: float
    courts_breakdown: Mapping[CourtId, float]
    food_and_beverage: float
    fitness: float
    pro_shop: float
    sponsorship: float
    total_ancillary: float

    def __post_init__(self):
        object.__setattr__(self, "courts_breakdown", MappingProxyType(dict(self.courts_breakdown)))


@dataclass(frozen=True)
class FinancialMetrics:
    monthly_revenue: float
    monthly_ebitda: float
    annual_ebitda: float
    payback: Payback
    revenue_breakdown: RevenueBreakdown

    @property
    def payback_years(self) -> float:
        return self.payback.sortable_years

    @property
    def ebitda_margin(self) -> Optional[float]:
        """EBITDA as a fraction of revenue; None when there is no revenue"""
        if self.monthly_revenue <= 0:
            return None
        return self.monthly_ebitda / self.monthly_revenue

    def to_dict(self) -> dict:
        rb = self.revenue_breakdown
        out = {
            "monthly_revenue": self.monthly_revenue,
            "monthly_ebitda": self.monthly_ebitda,
            "annual_ebitda": self.annual_ebitda,
            "payback_years": self.payback_years,
            "pays_back": self.payback.pays_back,
            "courts_total": rb.courts_total,
        }
        for court_id, revenue in rb.courts_breakdown.items():
            out[court_id.label] = revenue
        out.update({
            "food_and_beverage": rb.food_and_beverage,
            "fitness": rb.fitness,
            "pro_shop": rb.pro_shop,
            "sponsorship": rb.sponsorship,
            "total_ancillary": rb.total_ancillary,
        })
        return out


@dataclass(frozen=True)
class ReferenceScenario:
    label: str
    monthly_revenue: float
    monthly_ebitda: float
