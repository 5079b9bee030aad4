"""Tests for default cost templates."""

from decimal import Decimal

import pytest

from vendorcosts.domain.entities import CostEntry, CostKind
from vendorcosts.domain.templates import (
    build_default_costs,
    has_entered_values,
    pricing_guidance,
    rebuild_for_category,
)


def _shape(entries):
    return [(e.cost_kind, e.unit, e.period) for e in entries]


class TestBuildDefaultCosts:
    """Tests for build_default_costs."""

    def test_pool_service(self):
        """Test a pool service vendor gets one unset monthly plan."""
        entries = build_default_costs("Pool Service")
        assert len(entries) == 1
        entry = entries[0]
        assert entry.cost_kind == CostKind.MONTHLY_PLAN
        assert entry.unit == "month"
        assert entry.period == "monthly"
        assert entry.amount is None
        assert entry.quantity is None

    @pytest.mark.parametrize("category", ["Landscaping", "Pest Control", "pool"])
    def test_monthly_plan_categories(self, category):
        """Test recurring-visit categories get a monthly plan with visits."""
        entries = build_default_costs(category)
        assert _shape(entries) == [(CostKind.MONTHLY_PLAN, "month", "monthly")]
        assert entries[0].quantity_enabled

    def test_hvac(self):
        """Test HVAC gets a service call and a yearly plan."""
        assert _shape(build_default_costs("HVAC")) == [
            (CostKind.SERVICE_CALL, "visit", None),
            (CostKind.YEARLY_PLAN, "year", "yearly"),
        ]

    @pytest.mark.parametrize(
        "category",
        [
            "Plumbing",
            "Electrical",
            "Pet Grooming",
            "House Cleaning",
            "Mobile Tire Repair",
            "Appliance Repair",
        ],
    )
    def test_service_call_categories(self, category):
        """Test per-visit categories get one service call."""
        assert _shape(build_default_costs(category)) == [(CostKind.SERVICE_CALL, "visit", None)]

    @pytest.mark.parametrize("category", ["Handyman", "Landscape Lighting"])
    def test_hourly_categories(self, category):
        """Test hourly categories get one hourly rate."""
        assert _shape(build_default_costs(category)) == [(CostKind.HOURLY, "hour", None)]

    @pytest.mark.parametrize("category", ["Power Washing", "Car Wash & Detail"])
    def test_service_call_with_visits(self, category):
        """Test washing categories collect visits per year."""
        entries = build_default_costs(category)
        assert _shape(entries) == [(CostKind.SERVICE_CALL, "visit", None)]
        assert entries[0].quantity_enabled

    def test_water_filtration(self):
        """Test water filtration gets installation and yearly plan."""
        assert _shape(build_default_costs("Water Filtration")) == [
            (CostKind.ONE_TIME, "installation", None),
            (CostKind.YEARLY_PLAN, "year", "yearly"),
        ]

    def test_generator(self):
        """Test generator gets service call, installation and yearly plan."""
        assert [e.cost_kind for e in build_default_costs("Generator")] == [
            CostKind.SERVICE_CALL,
            CostKind.INSTALLATION,
            CostKind.YEARLY_PLAN,
        ]

    @pytest.mark.parametrize("category", ["Roofing", "General Contractor"])
    def test_guidance_only_categories(self, category):
        """Test roofing and contractors collect no numeric fields."""
        assert build_default_costs(category) == []
        assert "pricing guidance" in pricing_guidance(category)

    @pytest.mark.parametrize("category", [None, "", "Dog Walking"])
    def test_unknown_category(self, category):
        """Test unknown categories fall back to a monthly plan."""
        assert _shape(build_default_costs(category)) == [(CostKind.MONTHLY_PLAN, "month", "monthly")]
        assert pricing_guidance(category) is None

    def test_idempotent(self):
        """Test repeated calls produce equal but independent lists."""
        first = build_default_costs("HVAC")
        second = build_default_costs("HVAC")
        assert first == second
        assert first is not second


class TestRebuildForCategory:
    """Tests for the category change guard."""

    def test_has_entered_values(self):
        """Test amount or quantity counts as entered."""
        assert not has_entered_values(build_default_costs("HVAC"))
        assert has_entered_values([CostEntry(CostKind.HOURLY, amount=Decimal("60"))])
        assert has_entered_values([CostEntry(CostKind.MONTHLY_PLAN, quantity=Decimal("4"))])

    def test_replaces_untouched_entries(self):
        """Test an all-unset entry set follows the new category."""
        entries = build_default_costs("Pool Service")
        assert rebuild_for_category(entries, "HVAC") == build_default_costs("HVAC")

    def test_keeps_entered_values(self):
        """Test entered values survive a category change."""
        entries = [CostEntry(CostKind.MONTHLY_PLAN, amount=Decimal("160"), unit="month", period="monthly")]
        assert rebuild_for_category(entries, "HVAC") == entries

    def test_keeps_entered_quantity(self):
        """Test a quantity alone also blocks replacement."""
        entries = [CostEntry(CostKind.MONTHLY_PLAN, quantity=Decimal("2"))]
        assert rebuild_for_category(entries, "Handyman") == entries

    def test_switching_back_and_forth(self):
        """Test unedited switches replace the entries every time."""
        entries = build_default_costs("Pool Service")
        entries = rebuild_for_category(entries, "Handyman")
        assert [e.cost_kind for e in entries] == [CostKind.HOURLY]
        entries = rebuild_for_category(entries, "Pool Service")
        assert [e.cost_kind for e in entries] == [CostKind.MONTHLY_PLAN]
        entries = rebuild_for_category(entries, "Roofing")
        assert entries == []
        entries = rebuild_for_category(entries, "HVAC")
        assert len(entries) == 2
