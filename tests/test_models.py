"""Test immutability and integrity checks of the engine data model"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dataclasses import FrozenInstanceError

import pytest
from engine.models import *
from engine.finance import annualize, monthly_ebitda, payback_period


def test_court_type_rejects_discount_above_normal():
    with pytest.raises(ValueError):
        CourtType(CourtId.SIDE, 6, price_per_hour_normal=100.0, price_per_hour_discounted=150.0)


def test_court_type_rejects_negative_units():
    with pytest.raises(ValueError):
        CourtType(CourtId.SIDE, -1, 100.0, 90.0)


def test_court_id_carries_label():
    assert CourtId.CENTER.label == "Center Courts"
    assert CourtType(CourtId.CENTER, 2, 10.0, 10.0).name == "Center Courts"


def test_assumptions_replaced_not_mutated():
    a = OperatingAssumptions(daily_hours_by_court={CourtId.SIDE: 8.0})
    b = a.with_hours(CourtId.SIDE, 12.0)
    c = b.with_pricing_mode(PricingMode.DISCOUNT)
    d = c.with_ancillary(fitness=5.0)

    assert a.hours_for(CourtId.SIDE) == 8.0
    assert b.hours_for(CourtId.SIDE) == 12.0
    assert b.pricing_mode == PricingMode.NORMAL
    assert c.pricing_mode == PricingMode.DISCOUNT
    assert c.ancillary_revenue.fitness == 0.0
    assert d.ancillary_revenue.fitness == 5.0
    assert d.hours_for(CourtId.SIDE) == 12.0


def test_assumptions_are_frozen():
    a = OperatingAssumptions(daily_hours_by_court={CourtId.SIDE: 8.0})
    with pytest.raises(FrozenInstanceError):
        a.pricing_mode = PricingMode.DISCOUNT
    with pytest.raises(TypeError):
        a.daily_hours_by_court[CourtId.SIDE] = 10.0


def test_assumptions_copy_input_mapping():
    hours = {CourtId.SIDE: 8.0}
    a = OperatingAssumptions(daily_hours_by_court=hours)
    hours[CourtId.SIDE] = 1.0
    assert a.hours_for(CourtId.SIDE) == 8.0


def test_missing_hours_default_to_zero():
    assert OperatingAssumptions().hours_for(CourtId.STADIUM) == 0.0


def test_payback_variants():
    assert payback_period(30_000.0, 10_000.0) == Payback.finite(3.0)
    never = payback_period(30_000.0, 0.0)
    assert never == Payback.never()
    assert not never.pays_back
    assert never.sortable_years == PAYBACK_SENTINEL_YEARS
    assert payback_period(30_000.0, -5.0).sortable_years == PAYBACK_SENTINEL_YEARS
    # Sentinel stays orderable against finite paybacks
    assert Payback.finite(2.5).sortable_years < never.sortable_years


def test_ebitda_and_annualize():
    assert monthly_ebitda(100.0, 130.0) == -30.0
    assert annualize(-30.0) == -360.0


def test_ebitda_margin():
    rb = RevenueBreakdown(0.0, {}, 0.0, 0.0, 0.0, 0.0, 0.0)
    m = FinancialMetrics(200.0, 50.0, 600.0, Payback.finite(1.0), rb)
    assert m.ebitda_margin == 0.25
    empty = FinancialMetrics(0.0, -10.0, -120.0, Payback.never(), rb)
    assert empty.ebitda_margin is None
