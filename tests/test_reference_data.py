"""Test the static reference data against the Financial Summary document"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from engine import reference
from engine.models import CourtId, PricingMode


def test_three_court_types_in_order():
    courts = reference.list_court_types()
    assert [c.court_id for c in courts] == [CourtId.SIDE, CourtId.CENTER, CourtId.STADIUM]
    assert [c.name for c in courts] == ["Side Courts", "Center Courts", "Stadium Court"]
    assert [c.unit_count for c in courts] == [6, 2, 1]
    assert [c.price_per_hour_normal for c in courts] == [382_500, 472_500, 675_000]
    assert [c.price_per_hour_discounted for c in courts] == [292_500, 382_500, 585_000]


def test_discount_never_above_normal():
    for court in reference.list_court_types():
        assert court.price_for(PricingMode.DISCOUNT) <= court.price_for(PricingMode.NORMAL)


def test_cash_opex_excludes_depreciation():
    assert reference.total_opex_monthly() == 437_708_125
    assert reference.depreciation_reserve() == 105_400_000
    assert reference.cash_opex_monthly() == 332_308_125
    assert reference.cash_opex_monthly() == reference.CASH_OPEX_MONTHLY


def test_opex_schedule_itemised_total():
    items = reference.opex_schedule()
    assert len(items) == 12
    assert items[0].item == "Land Rental"
    assert items[1].item == "Depreciation Reserve"
    # Rounded line items in the source document
    assert reference.opex_schedule_total() == 437_500_000


def test_total_capex():
    items = reference.capex_schedule()
    assert len(items) == 7
    assert items[0].amount == 21_190_000_000
    assert reference.total_capex() == 30_000_000_000
    assert reference.total_capex() == sum(li.amount for li in items)


def test_default_ancillary_revenue():
    anc = reference.default_ancillary_revenue()
    assert anc.food_and_beverage == 300_000_000
    assert anc.fitness == 25_000_000
    assert anc.pro_shop == 45_000_000
    assert anc.sponsorship == 135_000_000
    assert anc.total == 505_000_000


def test_default_assumptions():
    a = reference.default_assumptions()
    assert a.pricing_mode == PricingMode.NORMAL
    assert all(a.hours_for(c) == 8.0 for c in CourtId)
    assert a.ancillary_revenue == reference.default_ancillary_revenue()


def test_reference_scenarios_static():
    scenarios = reference.reference_scenarios()
    assert [s.label for s in scenarios] == ["Scenario A (8h)", "Scenario F (6h)"]
    assert scenarios[0].monthly_revenue == 1_445_000_000
    assert scenarios[0].monthly_ebitda == 1_112_000_000
    assert scenarios[1].monthly_revenue == 914_000_000
    assert scenarios[1].monthly_ebitda == 582_000_000


def test_court_type_lookup():
    assert reference.court_type(CourtId.STADIUM).unit_count == 1
    with pytest.raises(KeyError):
        reference.court_type("Stadium Court")
