"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay stable
when the table layout changes.
"""

from vendorcosts.domain import entities as domain
from vendorcosts.database.models import (
    Vendor as ORMVendor,
    Member as ORMMember,
    Cost as ORMCost,
)


def vendor_to_domain(orm_vendor: ORMVendor) -> domain.Vendor:
    """Convert SQLAlchemy Vendor model to domain Vendor entity."""
    return domain.Vendor(
        id=orm_vendor.id,
        name=orm_vendor.name,
        category=orm_vendor.category,
        created_at=orm_vendor.created_at,
    )


def member_to_domain(orm_member: ORMMember) -> domain.Member:
    """Convert SQLAlchemy Member model to domain Member entity."""
    return domain.Member(
        id=orm_member.id,
        name=orm_member.name,
        email=orm_member.email,
        address=orm_member.address,
        is_admin=orm_member.is_admin,
        created_at=orm_member.created_at,
    )


def cost_to_domain(orm_cost: ORMCost) -> domain.Cost:
    """Convert SQLAlchemy Cost model to domain Cost entity."""
    return domain.Cost(
        id=orm_cost.id,
        vendor_id=orm_cost.vendor_id,
        amount=orm_cost.amount,
        currency=orm_cost.currency,
        cost_kind=domain.CostKind(orm_cost.cost_kind),
        unit=orm_cost.unit,
        period=orm_cost.period,
        quantity=orm_cost.quantity,
        notes=orm_cost.notes,
        household_address=orm_cost.household_address,
        created_by=orm_cost.created_by,
        session_id=orm_cost.session_id,
        anonymous=orm_cost.anonymous,
        created_at=orm_cost.created_at,
        updated_at=orm_cost.updated_at,
        deleted_at=orm_cost.deleted_at,
        deleted_by=orm_cost.deleted_by,
        admin_modified=orm_cost.admin_modified,
        admin_modified_by=orm_cost.admin_modified_by,
        admin_modified_at=orm_cost.admin_modified_at,
    )
