"""Tests for database mappers."""

from datetime import datetime, UTC
from decimal import Decimal

from vendorcosts.database.models import (
    Vendor as ORMVendor,
    Member as ORMMember,
    Cost as ORMCost,
)
from vendorcosts.database.mappers import (
    vendor_to_domain,
    member_to_domain,
    cost_to_domain,
)
from vendorcosts.domain.entities import Cost, CostKind, Member, Vendor


class TestVendorMapper:
    """Tests for Vendor mapper."""

    def test_vendor_to_domain(self):
        """Test converting ORM Vendor to domain Vendor."""
        orm_vendor = ORMVendor(
            id=1,
            name="Blue Wave Pools",
            category="Pool Service",
            created_at=datetime.now(UTC),
        )
        vendor = vendor_to_domain(orm_vendor)

        assert isinstance(vendor, Vendor)
        assert vendor.id == 1
        assert vendor.name == "Blue Wave Pools"
        assert vendor.category == "Pool Service"
        assert vendor.created_at == orm_vendor.created_at


class TestMemberMapper:
    """Tests for Member mapper."""

    def test_member_to_domain(self):
        orm_member = ORMMember(
            id=2,
            name="Dana",
            email="dana@example.com",
            address=None,
            is_admin=False,
            created_at=datetime.now(UTC),
        )
        member = member_to_domain(orm_member)

        assert isinstance(member, Member)
        assert member.email == "dana@example.com"
        assert member.address is None
        assert member.is_admin is False


class TestCostMapper:
    """Tests for Cost mapper."""

    def test_cost_to_domain(self):
        """Test converting ORM Cost to domain Cost, including the kind enum."""
        orm_cost = ORMCost(
            id=5,
            vendor_id=1,
            amount=Decimal("400.00"),
            currency="USD",
            cost_kind="yearly_plan",
            unit="year",
            period="yearly",
            quantity=Decimal("2"),
            notes="Two tune-ups",
            household_address="12 Palm Ct",
            created_by=2,
            session_id=None,
            anonymous=True,
            created_at=datetime.now(UTC),
            admin_modified=False,
        )
        cost = cost_to_domain(orm_cost)

        assert isinstance(cost, Cost)
        assert cost.cost_kind is CostKind.YEARLY_PLAN
        assert cost.amount == Decimal("400")
        assert cost.quantity == Decimal("2")
        assert cost.notes == "Two tune-ups"
        assert cost.created_by == 2
        assert not cost.is_deleted
        assert not cost.admin_modified
